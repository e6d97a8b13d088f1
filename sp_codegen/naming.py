"""Derive Go package names and local spec file names from model entries.

Pattern:
  - package name     -> last segment of the package folder
  - raw spec file    -> halycon_sp_api_{json}
  - converted spec   -> halycon_sp_api_{json stem}.yaml

Examples:
  internal/amazon/catalog           -> catalog
  catalogItems_2022-04-01.json      -> halycon_sp_api_catalogItems_2022-04-01.json
                                    -> halycon_sp_api_catalogItems_2022-04-01.yaml
"""

from __future__ import annotations

import re

SPEC_FILE_PREFIX = "halycon_sp_api_"

RAW_EXTENSION = ".json"
CONVERTED_EXTENSION = ".yaml"

# Go identifiers: letter or underscore, then letters, digits, underscores
_GO_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Go reserved words cannot be package names
_GO_KEYWORDS = {
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
}


def _last_segment(folder: str) -> str:
    """Return the final path segment, ignoring trailing separators."""
    return folder.replace("\\", "/").rstrip("/").split("/")[-1]


def is_valid_package_name(name: str) -> bool:
    """Whether *name* can be used as a Go package clause."""
    return bool(_GO_IDENTIFIER.match(name)) and name not in _GO_KEYWORDS


def package_name(package_folder: str) -> str:
    """Return the Go package name for an output folder.

    Raises ValueError if the last segment is empty or not a Go identifier.
    """
    name = _last_segment(package_folder)
    if not name:
        raise ValueError(f"Package folder {package_folder!r} has no final segment")
    if not is_valid_package_name(name):
        raise ValueError(
            f"Package folder {package_folder!r} does not end in a valid Go package name"
        )
    return name


def raw_spec_name(json_name: str) -> str:
    """Local file name for a downloaded spec."""
    return f"{SPEC_FILE_PREFIX}{json_name}"


def converted_spec_name(json_name: str) -> str:
    """Local file name for the YAML conversion of a spec.

    Only a trailing .json extension is swapped; names without one get
    .yaml appended.
    """
    if json_name.endswith(RAW_EXTENSION):
        stem = json_name[: -len(RAW_EXTENSION)]
    else:
        stem = json_name
    return f"{SPEC_FILE_PREFIX}{stem}{CONVERTED_EXTENSION}"
