"""Errors raised while fetching, converting and generating SP-API clients."""

from __future__ import annotations

from typing import Any, Sequence


class CodegenError(Exception):
    """Base class for every failure the pipeline reports."""


class FilesystemError(CodegenError):
    """A workspace directory or spec file could not be created, read or written."""


class ToolInstallError(CodegenError):
    """The Go toolchain step (oapi-codegen install, go mod tidy) failed."""


class CommandError(CodegenError):
    """An external process exited non-zero or could not be started."""

    def __init__(self, args: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip()
        message = f"{self.command[0] if self.command else '<empty>'} exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class RequestTimeoutError(CodegenError, TimeoutError):
    """A network call did not finish within its wall-clock bound."""

    def __init__(self, url: str, timeout: float) -> None:
        self.url = url
        self.timeout = timeout
        super().__init__(f"Request to {url} timed out after {timeout:g}s")


class HttpError(CodegenError):
    """A non-2xx HTTP response."""

    def __init__(self, status_code: int, reason: str, url: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"HTTP {status_code}: {reason}")


class FetchError(CodegenError):
    """Transport-level failure (DNS, connection refused, TLS) other than a timeout."""


class EmptyContentError(CodegenError):
    """Conversion produced no usable YAML."""


class ConversionError(CodegenError):
    """Both conversion strategies failed.

    The fallback's error is the ``__cause__``; the first strategy's error is
    kept on ``primary_error``.
    """

    def __init__(self, message: str, primary_error: BaseException | None = None) -> None:
        self.primary_error = primary_error
        super().__init__(message)


class GenerationError(CodegenError):
    """oapi-codegen failed for a package, including its single fallback attempt."""

    def __init__(self, package: str, detail: Any) -> None:
        self.package = package
        super().__init__(
            f"Could not generate client for {package} even from original JSON: {detail}"
        )


class PipelineError(CodegenError):
    """One or more models failed while running with the isolate policy."""

    def __init__(self, failed: Sequence[Any]) -> None:
        self.failed = list(failed)
        names = ", ".join(run.model.json for run in self.failed)
        super().__init__(f"{len(self.failed)} model(s) failed: {names}")
