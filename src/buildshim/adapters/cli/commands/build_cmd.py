"""CLI command that validates a source file and dispatches one toolchain build.

``buildshim build [ARGS]... SOURCE TARGET`` takes the source path and the
target identifier from the end of its arguments. With default settings it
runs ``cargo run -r --target TARGET`` in the current working directory.

Output order:
    1. toolchain stderr (stderr stream, if any)
    2. execution error (stderr stream, if any)
    3. toolchain stdout (stdout stream, if any)
    4. ``Done!`` (stdout stream, always once the toolchain was dispatched)

Contents:
    * :func:`cli_build` - The build command.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from buildshim.adapters.toolchain.settings import BuildSettings, load_build_settings
from buildshim.application.dispatch import dispatch_build
from buildshim.domain.behaviors import render_report, resolve_exit_code
from buildshim.domain.errors import ConfigurationError, SourceFileError, SourceFileReason
from buildshim.domain.models import InvocationRequest, InvocationResult

from ..constants import PASSTHROUGH_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_SOURCE_ERROR_EXIT_CODES: dict[SourceFileReason, ExitCode] = {
    SourceFileReason.MISSING: ExitCode.FILE_NOT_FOUND,
    SourceFileReason.UNREADABLE: ExitCode.PERMISSION_DENIED,
    SourceFileReason.DIRECTORY: ExitCode.INVALID_ARGUMENT,
    SourceFileReason.UNDECODABLE: ExitCode.INVALID_ARGUMENT,
}


def _split_arguments(args: tuple[str, ...]) -> tuple[str, str]:
    """Return ``(source, target)`` from the last two arguments.

    Raises:
        click.UsageError: If fewer than two arguments were given.
    """
    if len(args) < 2:
        raise click.UsageError("SOURCE and TARGET are required.")
    if len(args) > 2:
        logger.debug("Ignoring leading arguments: %s", args[:-2])
    return args[-2], args[-1]


def _load_settings(cli_ctx: CLIContext) -> BuildSettings:
    try:
        return load_build_settings(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _report(result: InvocationResult) -> None:
    """Echo the captured output in report order."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    for line in render_report(result):
        click.echo(line.text, err=line.err, nl=not line.text.endswith("\n"))


def _run_build(cli_ctx: CLIContext, source: str, target: str) -> int:
    """Validate, dispatch, report, and return the exit code to use.

    Raises:
        SystemExit: With CONFIG_ERROR for invalid settings, or with a
            source-specific code when the source file is unusable. No
            process is launched and no report is printed in those cases.
    """
    settings = _load_settings(cli_ctx)
    request = InvocationRequest(source_path=source, target=target)
    try:
        result = dispatch_build(
            request,
            command=settings.toolchain.to_command(),
            validate_source=cli_ctx.services.validate_source,
            run_toolchain=cli_ctx.services.run_toolchain,
            encoding=settings.source.text_encoding,
            cwd=settings.toolchain.cwd,
        )
    except SourceFileError as exc:
        logger.error("Source validation failed: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(_SOURCE_ERROR_EXIT_CODES[exc.reason]) from exc

    _report(result)
    return resolve_exit_code(result, settings.dispatch.exit_policy)


@click.command("build", context_settings=PASSTHROUGH_CONTEXT_SETTINGS)
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="[ARGS]... SOURCE TARGET")
@click.pass_context
def cli_build(ctx: click.Context, args: tuple[str, ...]) -> None:
    """Validate SOURCE and build it for TARGET with the configured toolchain.

    SOURCE must be a readable file. TARGET is passed to the toolchain as a
    single argument and is never interpreted by a shell. The exit status
    follows ``dispatch.exit_policy``.

    Example:
        buildshim build hello.js wasm32
        buildshim --set dispatch.exit_policy=always-success build hello.js x86_64-pc-windows-gnu
    """
    cli_ctx = get_cli_context(ctx)
    source, target = _split_arguments(args)
    with lib_log_rich.runtime.bind(job_id="cli-build", extra={"command": "build", "target": target}):
        logger.info("Dispatching build of %s for target %s", source, target)
        exit_code = _run_build(cli_ctx, source, target)

    if exit_code != 0:
        raise SystemExit(exit_code)


__all__ = ["cli_build"]
