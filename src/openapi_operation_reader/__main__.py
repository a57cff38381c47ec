"""Run the CLI with ``python -m openapi_operation_reader``."""

from __future__ import annotations

from .cli import main

raise SystemExit(main())
