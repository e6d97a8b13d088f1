"""Entry point: python -m sp_codegen

Downloads the SP-API models into models/, converts them to YAML and
generates internal/amazon/<package>/client.go for each.
"""

from __future__ import annotations

import asyncio
import sys

from .config import CodegenConfig
from .errors import CodegenError
from .pipeline import run_pipeline


def main(config: CodegenConfig | None = None) -> None:
    config = config or CodegenConfig()
    try:
        asyncio.run(run_pipeline(config))
    except (CodegenError, ValueError, OSError) as exc:
        print(f"Script failed: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
