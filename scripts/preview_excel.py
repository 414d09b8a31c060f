"""Read the products workbook and print what would be posted, without calling the API.

Usage:
  python scripts/preview_excel.py [path/to/workbook.xlsx]
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from objetos.excel_import import ExcelImporter
from objetos.models import format_product
from objetos.settings import Settings


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = Settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        stream=sys.stdout,
        format="%(message)s",
    )

    xlsx = Path(argv[0]).resolve() if argv else settings.excel_path()
    products = ExcelImporter(xlsx, settings.EXCEL_WORKSHEET_NAME).read_products()
    if not products:
        print("No valid products found in", xlsx)
        return 1

    for i, p in enumerate(products, 1):
        print(f"\n#{i}")
        print(format_product(p))
    print("\nparsed", len(products))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
