"""Command line interface for describing endpoint tables."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .loader import MetadataLoadError, load_endpoint_table
from .options import AssemblyOptions, ServerVariableKey
from .reader import OperationReader
from .request_body import EmptyRequestBodyContentError


class CLIError(RuntimeError):
    """Raised when CLI execution fails."""


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI parser."""
    parser = argparse.ArgumentParser(
        prog="openapi-operation-reader",
        description="Assemble OpenAPI operation objects from a YAML endpoint table",
    )
    parser.add_argument("--input", required=True, help="Path to a YAML endpoint table")
    parser.add_argument(
        "--endpoint",
        action="append",
        default=None,
        help="Only describe this endpoint; may be repeated",
    )
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )
    parser.add_argument(
        "--legacy-server-variable-keys",
        action="store_true",
        help="Key server variables by description instead of name",
    )
    parser.add_argument(
        "--strict-request-body",
        action="store_true",
        help="Fail when a request body declares no content",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    reader = OperationReader(options=_options_from_args(args))
    try:
        described = _describe(reader, input_path=Path(args.input), names=args.endpoint)
    except (MetadataLoadError, EmptyRequestBodyContentError, CLIError) as exc:
        parser.error(str(exc))
        return 2

    if args.format == "json":
        print(json.dumps(described, indent=2))
    else:
        print(yaml.safe_dump(described, sort_keys=False), end="")
    return 0


def _options_from_args(args: argparse.Namespace) -> AssemblyOptions:
    key = ServerVariableKey.DESCRIPTION if args.legacy_server_variable_keys else ServerVariableKey.NAME
    return AssemblyOptions(
        server_variable_key=key,
        strict_request_body_content=bool(args.strict_request_body),
    )


def _describe(
    reader: OperationReader,
    *,
    input_path: Path,
    names: Optional[list[str]],
) -> dict[str, Any]:
    declarations = load_endpoint_table(input_path)
    if names:
        missing = [name for name in names if name not in declarations]
        if missing:
            raise CLIError(f"Unknown endpoint(s): {', '.join(missing)}")
        declarations = {name: declarations[name] for name in names}

    return {
        name: reader.read(declaration).model_dump(mode="json", by_alias=True, exclude_none=True)
        for name, declaration in declarations.items()
    }


if __name__ == "__main__":
    raise SystemExit(main())
