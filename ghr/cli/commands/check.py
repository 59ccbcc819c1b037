from __future__ import annotations

import json
import sys

import typer

from ghr.cli.commands._helpers import exit_on_error, exit_with_code
from ghr.cli.context import CLIContext, build_context
from ghr.core.config import load_check_request
from ghr.core.errors import ErrorCode
from ghr.core.result import Err
from ghr.github.listing import GitHubReleaseLister
from ghr.output.console import Style
from ghr.output.errors import check_error_exit_code, print_check_error
from ghr.resolve.service import CheckReport, CheckService


def check() -> None:
    """Read a check request on stdin and print new versions as JSON."""
    ctx = build_context()

    try:
        text = sys.stdin.read()
    except OSError as e:
        ctx.console.error(f"reading request from stdin: {e}")
        exit_with_code(int(ErrorCode.IO_ERROR))

    request = exit_on_error(load_check_request(text), ctx, ErrorCode.USER_ERROR)
    source = request.source

    lister = GitHubReleaseLister(
        http=ctx.http,
        owner=source.owner,
        repository=source.repository,
        api_url=source.github_api_url,
    )
    result = CheckService(lister=lister).run(source.filter_config(), request.version)
    if isinstance(result, Err):
        print_check_error(result.error, ctx.console)
        exit_with_code(check_error_exit_code(result.error))

    _print_summary(ctx, source.slug, result.value)
    typer.echo(json.dumps([v.to_json() for v in result.value.versions]))


def _print_summary(ctx: CLIContext, slug: str, report: CheckReport) -> None:
    console = ctx.console
    console.print(
        f"{slug}: {report.fetched} releases, {report.qualifying} qualifying",
        Style.DIM,
    )
    if report.by_classification:
        breakdown = ", ".join(f"{count} {kind}" for kind, count in report.by_classification)
        console.print(f"fetched: {breakdown}", Style.DIM)
    if report.latest is None:
        console.warning("no qualifying releases")
        return
    if not report.versions:
        console.info(f"up to date at {report.latest.tag or report.latest.id}")
        return
    console.info(f"{len(report.versions)} version(s) to emit")
