"""Constants shared by the unit tests: fake endpoints, bodies and one model."""

from __future__ import annotations

from sp_codegen.registry import ModelDescriptor

MODEL_REPO = "https://models.test/models"
CONVERTER = "https://converter.test/api"
CONVERT_URL = f"{CONVERTER}/convert"
SPEC_URL = f"{MODEL_REPO}/p/x.json"

RAW_JSON = b'{"swagger": "2.0", "info": {"title": "x", "version": "1"}, "paths": {}}'
YAML_BODY = "openapi: 3.0.1\ninfo:\n  title: x\n  version: '1'\npaths: {}\n"

X_MODEL = ModelDescriptor(json="x.json", remote_path="p/x.json", package_folder="out/x")
