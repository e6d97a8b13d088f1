"""Go toolchain steps: run subprocesses, install oapi-codegen, tidy go.mod."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable

from .config import CodegenConfig
from .errors import CommandError, ToolInstallError


@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


# Signature shared by run_command and the fakes used in tests
Runner = Callable[..., Awaitable[CommandResult]]


async def run_command(*args: str, cwd: Path | None = None) -> CommandResult:
    """Run a process to completion, raising CommandError on non-zero exit.

    No timeout is applied; the process decides how long it takes.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd) if cwd is not None else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as exc:
        raise CommandError(args, 127, str(exc)) from exc

    stdout, stderr = await proc.communicate()
    result = CommandResult(
        args=tuple(args),
        returncode=proc.returncode if proc.returncode is not None else -1,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
    if result.returncode != 0:
        raise CommandError(args, result.returncode, result.stderr)
    return result


async def install_codegen(config: CodegenConfig, runner: Runner = run_command) -> None:
    """Make sure oapi-codegen exists at config.codegen_path."""
    if config.codegen_path.exists():
        return

    print(f"Installing {config.codegen_module}")
    try:
        await runner(config.go_path, "install", config.codegen_module, cwd=config.root)
    except CommandError as exc:
        raise ToolInstallError(f"go install failed: {exc}") from exc

    if not config.codegen_path.exists():
        raise ToolInstallError(
            f"oapi-codegen not found at {config.codegen_path} after go install"
        )


async def tidy_modules(config: CodegenConfig, runner: Runner = run_command) -> None:
    """Reconcile go.mod/go.sum with the freshly generated packages."""
    try:
        await runner(config.go_path, "mod", "tidy", cwd=config.root)
    except CommandError as exc:
        raise ToolInstallError(f"dependency tidy failed: {exc}") from exc
