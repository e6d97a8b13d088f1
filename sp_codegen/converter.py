"""Convert downloaded specs to YAML through converter.swagger.io.

Two strategies, tried in order:
  1. GET  {converter}/convert?url={spec_url}   (converter fetches the spec)
  2. POST {converter}/convert with the local JSON as body

The second runs only if the first raises, and at most once.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from .errors import CodegenError, ConversionError, EmptyContentError
from .fetcher import bounded_request, raise_for_status
from .workspace import is_non_empty_file, read_spec, write_spec

YAML_MEDIA_TYPE = "application/yaml"
JSON_MEDIA_TYPE = "application/json"


def _convert_endpoint(converter_base: str) -> str:
    return f"{converter_base.rstrip('/')}/convert"


async def convert_from_url(
    client: httpx.AsyncClient,
    converter_base: str,
    spec_url: str,
    destination: Path,
    timeout: float = 120.0,
) -> None:
    """Ask the converter to fetch *spec_url* itself and return YAML."""
    endpoint = _convert_endpoint(converter_base)
    request = client.get(
        endpoint,
        params={"url": spec_url},
        headers={"Accept": YAML_MEDIA_TYPE},
    )
    response = await bounded_request(request, endpoint, timeout)
    raise_for_status(response, endpoint)
    if not response.text.strip():
        raise EmptyContentError("Conversion produced empty content")
    write_spec(destination, response.content)


async def convert_from_file(
    client: httpx.AsyncClient,
    converter_base: str,
    local_spec: Path,
    destination: Path,
    timeout: float = 120.0,
) -> None:
    """POST the local JSON spec to the converter.

    The response body is written as-is; ensure_converted checks it afterwards.
    """
    endpoint = _convert_endpoint(converter_base)
    request = client.post(
        endpoint,
        content=read_spec(local_spec),
        headers={"Accept": YAML_MEDIA_TYPE, "Content-Type": JSON_MEDIA_TYPE},
    )
    response = await bounded_request(request, endpoint, timeout)
    raise_for_status(response, endpoint)
    write_spec(destination, response.content)


async def convert(
    client: httpx.AsyncClient,
    converter_base: str,
    spec_url: str,
    local_spec: Path,
    destination: Path,
    timeout: float = 120.0,
) -> None:
    """Convert a spec to YAML, falling back to uploading the local copy."""
    try:
        await convert_from_url(client, converter_base, spec_url, destination, timeout)
        return
    except CodegenError as primary:
        print(f"  URL conversion failed ({primary}), uploading {local_spec.name}")
        primary_error = primary

    try:
        await convert_from_file(client, converter_base, local_spec, destination, timeout)
    except CodegenError as fallback:
        raise ConversionError(
            f"Fallback conversion failed: {fallback}", primary_error=primary_error
        ) from fallback


def ensure_converted(path: Path) -> None:
    """Fail unless the converted spec exists and is non-empty."""
    if not is_non_empty_file(path):
        raise EmptyContentError(f"Conversion failed or produced empty file: {path}")
