"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import ExitPolicy
from .models import InvocationResult, ToolchainCommand

COMPLETION_MARKER = "Done!"

#: POSIX shell conventions for commands that cannot be found / executed.
EXIT_COMMAND_NOT_FOUND = 127
EXIT_COMMAND_NOT_EXECUTABLE = 126


@dataclass(frozen=True, slots=True)
class ReportLine:
    """One block of report output and the stream it belongs on."""

    text: str
    err: bool = False


def build_command_argv(command: ToolchainCommand, target: str) -> tuple[str, ...]:
    """Return the argument vector for one toolchain invocation.

    The target always occupies exactly one element, so no shell
    metacharacter in it can split or extend the command.

    Example:
        >>> build_command_argv(ToolchainCommand(), "wasm32")
        ('cargo', 'run', '-r', '--target', 'wasm32')
        >>> build_command_argv(ToolchainCommand(), "x86_64; rm -rf /")[-1]
        'x86_64; rm -rf /'
    """
    return (command.program, *command.arguments, command.target_option, target)


def normalize_returncode(code: int) -> int:
    """Convert negative signal return codes to POSIX 128+N convention.

    Python's ``subprocess`` reports signal-killed processes as negative values
    (e.g., -2 for SIGINT). POSIX convention is 128+N (e.g., 130 for SIGINT).

    Example:
        >>> normalize_returncode(-15)
        143
        >>> normalize_returncode(3)
        3
    """
    if code < 0:
        return 128 + abs(code)
    return code


def render_report(result: InvocationResult) -> list[ReportLine]:
    """Order the captured output the way it is shown to the operator.

    Toolchain stderr first (if any), then the execution error (if any),
    then toolchain stdout, then the completion marker. Stdout and the
    marker are emitted unconditionally, so empty stdout is a blank line.

    Example:
        >>> lines = render_report(InvocationResult(argv=("cargo",), exit_status=0, stdout="hi\\n"))
        >>> [(line.text, line.err) for line in lines]
        [('hi\\n', False), ('Done!', False)]
    """
    lines: list[ReportLine] = []
    if result.stderr:
        lines.append(ReportLine(result.stderr, err=True))
    error = result.error
    if error is not None:
        lines.append(ReportLine(str(error), err=True))
    lines.append(ReportLine(result.stdout))
    lines.append(ReportLine(COMPLETION_MARKER))
    return lines


def resolve_exit_code(result: InvocationResult, policy: ExitPolicy) -> int:
    """Return this process's exit status after a dispatch.

    Example:
        >>> failed = InvocationResult(argv=("cargo",), exit_status=101)
        >>> resolve_exit_code(failed, ExitPolicy.MIRROR)
        101
        >>> resolve_exit_code(failed, ExitPolicy.ALWAYS_SUCCESS)
        0
    """
    if policy is ExitPolicy.ALWAYS_SUCCESS:
        return 0
    if result.launch_error is not None:
        return EXIT_COMMAND_NOT_FOUND if result.launch_error.not_found else EXIT_COMMAND_NOT_EXECUTABLE
    return result.exit_status or 0


__all__ = [
    "COMPLETION_MARKER",
    "EXIT_COMMAND_NOT_EXECUTABLE",
    "EXIT_COMMAND_NOT_FOUND",
    "ReportLine",
    "build_command_argv",
    "normalize_returncode",
    "render_report",
    "resolve_exit_code",
]
