"""Run oapi-codegen for one package and write its doc.go.

Takes the paths from CodegenConfig.paths_for and produces
<package_folder>/client.go (via oapi-codegen) and <package_folder>/doc.go
(via templates/doc.go.j2).
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .config import DOC_FILE, CodegenConfig, ModelPaths
from .errors import CodegenError, FilesystemError, GenerationError
from .registry import ModelDescriptor
from .toolchain import Runner, run_command

TEMPLATE_DIR = Path(__file__).parent / "templates"


def build_codegen_args(
    config: CodegenConfig,
    package: str,
    spec_path: str,
    output_path: str,
    response_suffix: bool = True,
) -> list[str]:
    """Argument vector for one oapi-codegen invocation."""
    args = [
        str(config.codegen_path),
        "-package", package,
        "-generate", ",".join(config.generate_targets),
        "-o", output_path,
    ]
    if response_suffix and config.response_type_suffix:
        args += ["-response-type-suffix", config.response_type_suffix]
    args.append(spec_path)
    return args


async def generate(
    config: CodegenConfig,
    package: str,
    spec_path: str,
    output_path: str,
    fallback_spec_path: str,
    runner: Runner = run_command,
) -> None:
    """Generate a client from the YAML spec, retrying once from the raw JSON.

    The retry drops -response-type-suffix; if it fails too, GenerationError
    carries the retry's error.
    """
    try:
        await runner(
            *build_codegen_args(config, package, spec_path, output_path),
            cwd=config.root,
        )
        return
    except CodegenError as exc:
        print(f"  oapi-codegen failed on {spec_path} ({exc}), retrying with {fallback_spec_path}")

    try:
        await runner(
            *build_codegen_args(
                config, package, fallback_spec_path, output_path, response_suffix=False
            ),
            cwd=config.root,
        )
    except CodegenError as exc:
        raise GenerationError(package, exc) from exc


def _template_env() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_package_doc(config: CodegenConfig, paths: ModelPaths, model: ModelDescriptor) -> str:
    template = _template_env().get_template("doc.go.j2")
    return template.render(
        package=paths.package,
        source_file=model.json,
        spec_url=paths.spec_url,
        generator=config.codegen_module,
        targets=list(config.generate_targets),
    )


def write_package_doc(config: CodegenConfig, paths: ModelPaths, model: ModelDescriptor) -> Path:
    """Render doc.go next to the generated client and return its path."""
    try:
        output = render_package_doc(config, paths, model)
    except jinja2.TemplateError as exc:
        raise FilesystemError(f"Could not render doc.go for {paths.package}: {exc}") from exc
    doc_path = config.resolve(model.package_folder.rstrip("/")) / DOC_FILE
    try:
        doc_path.write_text(output)
    except OSError as exc:
        raise FilesystemError(f"Could not write {doc_path}: {exc}") from exc
    return doc_path
