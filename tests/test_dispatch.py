"""Validate-then-dispatch use case stories, using in-memory adapters."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from buildshim.adapters.memory import SourceStub, ToolchainSpy
from buildshim.adapters.source.validator import validate_source
from buildshim.adapters.toolchain.runner import run_toolchain
from buildshim.application.dispatch import dispatch_build
from buildshim.composition import build_testing
from buildshim.domain.errors import SourceFileError
from buildshim.domain.models import InvocationRequest, ToolchainCommand

HELLO = 'console.log("Hello, world!");'


@pytest.mark.os_agnostic
def test_valid_source_launches_exactly_one_process() -> None:
    spy = ToolchainSpy(stdout="Hello, world!\n")
    source = SourceStub({"hello.js": HELLO})

    result = dispatch_build(
        InvocationRequest(source_path="hello.js", target="wasm32"),
        command=ToolchainCommand(),
        validate_source=source.validate_source,
        run_toolchain=spy.run_toolchain,
    )

    assert spy.launches == [("cargo", "run", "-r", "--target", "wasm32")]
    assert source.reads == ["hello.js"]
    assert result.stdout == "Hello, world!\n"


@pytest.mark.os_agnostic
def test_missing_source_spawns_no_process() -> None:
    spy = ToolchainSpy()

    with pytest.raises(SourceFileError):
        dispatch_build(
            InvocationRequest(source_path="missing.txt", target="wasm32"),
            command=ToolchainCommand(),
            validate_source=SourceStub().validate_source,
            run_toolchain=spy.run_toolchain,
        )

    assert spy.launches == []


@pytest.mark.os_agnostic
def test_missing_source_on_disk_spawns_no_process(tmp_path: Path) -> None:
    spy = ToolchainSpy()

    with pytest.raises(SourceFileError):
        dispatch_build(
            InvocationRequest(source_path=str(tmp_path / "missing.txt"), target="wasm32"),
            command=ToolchainCommand(),
            validate_source=validate_source,
            run_toolchain=spy.run_toolchain,
        )

    assert spy.launches == []


@pytest.mark.os_agnostic
def test_repeated_dispatch_launches_independent_processes(hello_source: Path) -> None:
    command = ToolchainCommand(program=sys.executable, arguments=("-c", "import sys; print(sys.argv[-1])"))
    request = InvocationRequest(source_path=str(hello_source), target="wasm32")

    first = dispatch_build(request, command=command, validate_source=validate_source, run_toolchain=run_toolchain)
    second = dispatch_build(request, command=command, validate_source=validate_source, run_toolchain=run_toolchain)

    assert first is not second
    assert first.stdout.strip() == second.stdout.strip() == "wasm32"
    assert first.exit_status == second.exit_status == 0


@pytest.mark.os_agnostic
def test_repeated_dispatch_records_two_launches() -> None:
    spy = ToolchainSpy()
    services = build_testing(spy=spy, source=SourceStub({"hello.js": HELLO}))
    request = InvocationRequest(source_path="hello.js", target="wasm32")

    for _ in range(2):
        dispatch_build(
            request,
            command=ToolchainCommand(),
            validate_source=services.validate_source,
            run_toolchain=services.run_toolchain,
        )

    assert len(spy.launches) == 2


@pytest.mark.os_agnostic
def test_launch_failure_is_returned_not_raised() -> None:
    spy = ToolchainSpy(missing=True)

    result = dispatch_build(
        InvocationRequest(source_path="hello.js", target="wasm32"),
        command=ToolchainCommand(),
        validate_source=SourceStub({"hello.js": HELLO}).validate_source,
        run_toolchain=spy.run_toolchain,
    )

    assert result.launch_error is not None
    assert result.launch_error.not_found


@pytest.mark.os_agnostic
def test_working_directory_is_forwarded(tmp_path: Path) -> None:
    spy = ToolchainSpy()

    dispatch_build(
        InvocationRequest(source_path="hello.js", target="wasm32"),
        command=ToolchainCommand(),
        validate_source=SourceStub({"hello.js": HELLO}).validate_source,
        run_toolchain=spy.run_toolchain,
        cwd=tmp_path,
    )

    assert spy.cwds == [tmp_path]
