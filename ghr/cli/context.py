from __future__ import annotations

from dataclasses import dataclass

from ghr.output.console import ConsoleProtocol, RichConsole
from ghr.tools.http import HttpClient, RealHttpClient


@dataclass(frozen=True, slots=True)
class CLIContext:
    console: ConsoleProtocol
    http: HttpClient


def build_context() -> CLIContext:
    return CLIContext(console=RichConsole(), http=RealHttpClient())
