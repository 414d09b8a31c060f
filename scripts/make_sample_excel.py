"""Write a sample products workbook in the layout main.py reads.

Usage:
  python scripts/make_sample_excel.py [path/to/workbook.xlsx]
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from objetos.excel_export import write_products_workbook
from objetos.settings import Settings
from objetos.sources import LITERAL_PRODUCTS


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    xlsx = Path(argv[0]) if argv else Settings().excel_path()

    written = write_products_workbook(xlsx_path=xlsx, products=list(LITERAL_PRODUCTS))

    print("OK: wrote", written, "products to", xlsx)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
