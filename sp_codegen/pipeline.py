"""Drive fetch -> convert -> generate for every model, one at a time.

Each model moves through ModelState:

    pending -> fetched -> converted -> generated -> done
                                  (any) -> failed

What happens after a failure depends on CodegenConfig.failure_policy:
ABORT stops the run at the first failed model (go mod tidy is skipped),
ISOLATE attempts every model, tidies, then raises PipelineError.
"""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

import httpx

from .codegen import generate, write_package_doc
from .config import CodegenConfig, FailurePolicy, ModelPaths
from .converter import convert, ensure_converted
from .errors import CodegenError, PipelineError
from .fetcher import build_client, fetch
from .registry import ModelDescriptor, validate_registry
from .toolchain import Runner, install_codegen, run_command, tidy_modules
from .workspace import prepare_workspace


class ModelState(str, enum.Enum):
    PENDING = "pending"
    FETCHED = "fetched"
    CONVERTED = "converted"
    GENERATED = "generated"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ModelRun:
    """Progress of one model through the pipeline."""

    model: ModelDescriptor
    paths: ModelPaths
    state: ModelState = ModelState.PENDING
    error: CodegenError | None = None

    @property
    def failed(self) -> bool:
        return self.state is ModelState.FAILED


async def _advance(
    config: CodegenConfig,
    client: httpx.AsyncClient,
    runner: Runner,
    run: ModelRun,
) -> None:
    paths = run.paths
    raw_spec = config.resolve(paths.raw_spec)
    converted_spec = config.resolve(paths.converted_spec)

    await fetch(client, paths.spec_url, raw_spec, config.fetch_timeout)
    run.state = ModelState.FETCHED
    print(f"Fetched {paths.spec_url} -> {paths.raw_spec}")

    await convert(
        client,
        config.converter_base,
        paths.spec_url,
        raw_spec,
        converted_spec,
        config.convert_timeout,
    )
    ensure_converted(converted_spec)
    run.state = ModelState.CONVERTED
    print(f"Converted {paths.raw_spec} -> {paths.converted_spec}")

    await generate(
        config,
        paths.package,
        paths.converted_spec,
        paths.output,
        fallback_spec_path=paths.raw_spec,
        runner=runner,
    )
    run.state = ModelState.GENERATED
    print(f"Generated {paths.output} (package {paths.package})")

    if config.write_package_docs:
        write_package_doc(config, paths, run.model)
    run.state = ModelState.DONE


async def process_model(
    config: CodegenConfig,
    client: httpx.AsyncClient,
    runner: Runner,
    model: ModelDescriptor,
) -> ModelRun:
    """Run one model to DONE or FAILED. Never raises CodegenError."""
    run = ModelRun(model=model, paths=config.paths_for(model))
    try:
        await _advance(config, client, runner, run)
    except CodegenError as exc:
        run.state = ModelState.FAILED
        run.error = exc
        print(f"Error processing {model.json}: {exc}", file=sys.stderr)
    return run


def _report_failures(runs: list[ModelRun]) -> None:
    print("Failed models:", file=sys.stderr)
    for run in runs:
        print(f"  {run.model.json}: {run.error}", file=sys.stderr)


async def _process_all(
    config: CodegenConfig,
    client: httpx.AsyncClient,
    runner: Runner,
) -> list[ModelRun]:
    runs: list[ModelRun] = []
    for model in config.models:
        run = await process_model(config, client, runner, model)
        runs.append(run)
        if run.failed and config.failure_policy is FailurePolicy.ABORT:
            raise run.error
    return runs


async def run_pipeline(
    config: CodegenConfig,
    client: httpx.AsyncClient | None = None,
    runner: Runner = run_command,
) -> list[ModelRun]:
    """Generate every configured client and tidy the Go module.

    Raises the first model's error under ABORT, PipelineError under
    ISOLATE if anything failed, and setup errors (FilesystemError,
    ToolInstallError) before any model is touched.
    """
    validate_registry(config.models)
    prepare_workspace(config.root, config.workspace_dirs())
    await install_codegen(config, runner)

    if client is None:
        async with build_client(config) as owned:
            runs = await _process_all(config, owned, runner)
    else:
        runs = await _process_all(config, client, runner)

    failed = [run for run in runs if run.failed]
    try:
        await tidy_modules(config, runner)
    except CodegenError as exc:
        if not failed:
            raise
        print(f"Error tidying modules: {exc}", file=sys.stderr)
        _report_failures(failed)
        raise PipelineError(failed) from exc

    if failed:
        _report_failures(failed)
        raise PipelineError(failed)

    print("All Swagger clients generated successfully.")
    return runs
