"""Run configuration for the SP-API client generator.

Everything the pipeline reads from its surroundings (model table, base
URLs, tool location, timeouts) lives on CodegenConfig so tests can build
one pointing at a temp directory and fake endpoints.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from pathlib import Path

from .naming import converted_spec_name, raw_spec_name
from .registry import API_MODELS, REMOTE_MODEL_REPO, ModelDescriptor

CONVERTER_BASE = "https://converter.swagger.io/api"
CODEGEN_MODULE = "github.com/oapi-codegen/oapi-codegen/v2/cmd/oapi-codegen@latest"
MODELS_DIR = "models"
CLIENT_FILE = "client.go"
DOC_FILE = "doc.go"

FETCH_TIMEOUT = 60.0
CONVERT_TIMEOUT = 120.0


def default_codegen_path() -> Path:
    """Where `go install` puts oapi-codegen for the current user."""
    return Path.home() / "go" / "bin" / "oapi-codegen"


class FailurePolicy(str, enum.Enum):
    """What the driver does after a model fails."""

    ABORT = "abort"  # stop the run at the first failed model
    ISOLATE = "isolate"  # keep going, report every failure at the end


@dataclass(frozen=True)
class ModelPaths:
    """Paths derived for one model, relative to the workspace root."""

    spec_url: str
    raw_spec: str
    converted_spec: str
    output: str
    package: str


@dataclass(frozen=True)
class CodegenConfig:
    root: Path = field(default_factory=Path.cwd)
    models: tuple[ModelDescriptor, ...] = API_MODELS
    remote_model_repo: str = REMOTE_MODEL_REPO
    converter_base: str = CONVERTER_BASE
    models_dir: str = MODELS_DIR
    codegen_path: Path = field(default_factory=default_codegen_path)
    codegen_module: str = CODEGEN_MODULE
    go_path: str = "go"
    generate_targets: tuple[str, ...] = ("types", "client", "spec")
    response_type_suffix: str = "Resp"
    fetch_timeout: float = FETCH_TIMEOUT
    convert_timeout: float = CONVERT_TIMEOUT
    failure_policy: FailurePolicy = FailurePolicy.ABORT
    write_package_docs: bool = True
    user_agent: str = "sp-api-codegen/0.1"

    def with_root(self, root: Path) -> CodegenConfig:
        return dataclasses.replace(self, root=root)

    def spec_url(self, model: ModelDescriptor) -> str:
        return f"{self.remote_model_repo.rstrip('/')}/{model.remote_path.lstrip('/')}"

    def paths_for(self, model: ModelDescriptor) -> ModelPaths:
        """Build the URL, local spec paths and output path for *model*."""
        folder = model.package_folder.rstrip("/")
        return ModelPaths(
            spec_url=self.spec_url(model),
            raw_spec=f"{self.models_dir}/{raw_spec_name(model.json)}",
            converted_spec=f"{self.models_dir}/{converted_spec_name(model.json)}",
            output=f"{folder}/{CLIENT_FILE}",
            package=model.package,
        )

    def workspace_dirs(self) -> list[str]:
        """Directories that must exist before any network activity."""
        dirs = [model.package_folder.rstrip("/") for model in self.models]
        dirs.append(self.models_dir)
        return dirs

    def resolve(self, relative: str) -> Path:
        return self.root / relative
