from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook

from objetos.models import Product, ProductData

HEADERS = ["name", "year", "price", "CPU model", "hard disk size"]


def write_products_workbook(*, xlsx_path: Path, products: list[Product], worksheet_name: str = "Products") -> int:
    """Write a fresh workbook in the layout ExcelImporter reads.

    Any existing file at ``xlsx_path`` is replaced. Returns number of data rows written.
    """

    p = Path(xlsx_path).expanduser().resolve()
    if p.suffix.lower() != ".xlsx":
        raise RuntimeError("The file must be .xlsx")
    p.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = (worksheet_name or "Products").strip() or "Products"

    for c, h in enumerate(HEADERS, start=1):
        ws.cell(row=1, column=c, value=h)

    write_row = 2
    for prod in products:
        d = prod.data or ProductData()
        ws.cell(row=write_row, column=1, value=str(prod.name or "").strip())
        ws.cell(row=write_row, column=2, value=d.year)
        ws.cell(row=write_row, column=3, value=d.price)
        ws.cell(row=write_row, column=4, value=d.cpu_model)
        ws.cell(row=write_row, column=5, value=d.disk_size)
        write_row += 1

    wb.save(p)
    return write_row - 2
