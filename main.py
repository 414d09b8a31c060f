from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

from objetos.api_client import ApiClient
from objetos.services import run_scenario
from objetos.settings import Settings
from objetos.sources import SOURCES

logger = logging.getLogger(__name__)


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    app_name = (settings or Settings()).APP_NAME
    parser = argparse.ArgumentParser(
        prog="main.py",
        description=f"{app_name}: create, read, update, patch and delete products on the objects API",
    )
    parser.add_argument("--source", choices=SOURCES, help="Where products come from (default: INPUT_SOURCE or excel)")
    parser.add_argument("--file", help="Excel workbook to read (default: EXCEL_IMPORT_PATH)")
    parser.add_argument("--sheet", help="Worksheet name (default: first worksheet)")
    parser.add_argument(
        "--search-name",
        help="Only update/patch/delete the created product with this name (case-insensitive)",
    )
    parser.add_argument("--base-url", help="Objects collection URL (default: API_BASE_URL)")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or INFO)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    settings = base or Settings()
    overrides = {
        "INPUT_SOURCE": args.source,
        "EXCEL_IMPORT_PATH": args.file,
        "EXCEL_WORKSHEET_NAME": args.sheet,
        "SEARCH_NAME": args.search_name,
        "API_BASE_URL": args.base_url,
        "LOG_LEVEL": args.log_level,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)

    # Diagnostics share stdout with progress lines.
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
    )

    try:
        with ApiClient() as client:
            run_scenario(client, settings)
    except Exception as e:
        logger.error("Unexpected error: %s", e)
        logger.debug("Traceback", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
