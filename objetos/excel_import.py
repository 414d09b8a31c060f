from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any
import unicodedata

from openpyxl import load_workbook

from objetos.models import Product, ProductData

logger = logging.getLogger(__name__)


class ExcelImporter:
    # Canonical (normalized) header names; any casing/spacing is accepted in the sheet.
    REQUIRED = ("name", "year", "price", "cpu model", "hard disk size")

    def __init__(self, xlsx_path: Path, worksheet_name: str | None = None):
        self.xlsx_path = Path(xlsx_path)
        self.worksheet_name = (worksheet_name or "").strip() or None

    @staticmethod
    def _norm(x: Any) -> str:
        s = str(x if x is not None else "").strip()
        s = " ".join(s.split())
        s = unicodedata.normalize("NFKD", s)
        s = "".join(ch for ch in s if not unicodedata.combining(ch))
        return s.casefold()

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    @staticmethod
    def _finite(value: Any, label: str) -> float:
        if isinstance(value, bool) or ExcelImporter._is_blank(value):
            raise ValueError(f"invalid {label}: {value!r}")
        f = float(value)
        if not math.isfinite(f):
            raise ValueError(f"invalid {label}: {value!r}")
        return f

    @staticmethod
    def _parse_year(value: Any) -> int:
        # Rounds like the spreadsheet's own integer conversion (2022.7 -> 2023).
        return int(round(ExcelImporter._finite(value, "year")))

    @staticmethod
    def _parse_price(value: Any) -> float:
        return ExcelImporter._finite(value, "price")

    @staticmethod
    def _text(value: Any) -> str:
        return str(value if value is not None else "").strip()

    def _open(self):
        # read_only keeps memory flat on large sheets; values_only iteration avoids cell objects.
        return load_workbook(filename=self.xlsx_path, data_only=True, read_only=True)

    def _pick_sheet(self, wb):
        if self.worksheet_name:
            wanted = self._norm(self.worksheet_name)
            for name in wb.sheetnames:
                if self._norm(name) == wanted:
                    return wb[name]
            logger.warning(
                "Worksheet '%s' not found, using first worksheet '%s'", self.worksheet_name, wb.sheetnames[0]
            )
        return wb.worksheets[0]

    def _find_header(self, rows) -> tuple[int, list[str]] | None:
        # Header is the first used row of the sheet.
        for row_no, row_vals in rows:
            if any(not self._is_blank(v) for v in row_vals):
                return row_no, [self._norm(v) for v in row_vals]
        return None

    def read_products(self) -> list[Product]:
        if not self.xlsx_path.exists():
            logger.error("File not found: %s", self.xlsx_path)
            return []

        try:
            wb = self._open()
        except Exception as e:
            logger.error("Error reading Excel: %s", e)
            return []

        try:
            return self._read(self._pick_sheet(wb))
        except Exception as e:
            logger.error("Error reading Excel: %s", e)
            return []
        finally:
            wb.close()

    def _read(self, ws) -> list[Product]:
        rows = enumerate(ws.iter_rows(values_only=True), start=1)

        found = self._find_header(rows)
        if found is None:
            logger.error("Excel file is empty.")
            return []
        _header_row, headers = found

        missing = [h for h in self.REQUIRED if h not in headers]
        if missing:
            logger.error("Invalid Excel headers.")
            logger.error("Expected: %s", ", ".join(self.REQUIRED))
            logger.error("Found: %s", ", ".join(h for h in headers if h))
            return []

        # list.index gives the first occurrence when a header repeats.
        i_name, i_year, i_price, i_cpu, i_disk = (headers.index(h) for h in self.REQUIRED)

        out: list[Product] = []
        for row_no, row_vals in rows:
            # Guard against short rows
            def at(i0: int):
                return row_vals[i0] if i0 < len(row_vals) else None

            if all(self._is_blank(v) for v in row_vals):
                continue

            name = self._text(at(i_name))
            if not name:
                logger.warning("Skipping invalid row %s: name is empty", row_no)
                continue

            try:
                year = self._parse_year(at(i_year))
                price = self._parse_price(at(i_price))
            except (TypeError, ValueError, OverflowError) as e:
                logger.warning("Skipping invalid row %s: %s", row_no, e)
                continue

            out.append(
                Product(
                    name=name,
                    data=ProductData(
                        year=year,
                        price=price,
                        cpu_model=self._text(at(i_cpu)),
                        disk_size=self._text(at(i_disk)),
                    ),
                )
            )

        logger.info("%s valid products loaded from Excel.", len(out))
        return out
