from __future__ import annotations

import json
import logging
import sys
from typing import TextIO

from objetos.excel_import import ExcelImporter
from objetos.models import Product, ProductData
from objetos.settings import Settings

logger = logging.getLogger(__name__)

SOURCE_EXCEL = "excel"
SOURCE_PASTE = "paste"
SOURCE_LITERAL = "literal"
SOURCES = (SOURCE_EXCEL, SOURCE_PASTE, SOURCE_LITERAL)

# Used by the literal source. Same shape as the records in the public collection.
LITERAL_PRODUCTS: tuple[Product, ...] = (
    Product(
        name="Apple MacBook Pro 16",
        data=ProductData(year=2019, price=1849.99, cpu_model="Intel Core i9", disk_size="1 TB"),
    ),
    Product(
        name="Dell XPS 15",
        data=ProductData(year=2022, price=1499.0, cpu_model="Intel Core i7", disk_size="512 GB"),
    ),
)


def parse_pasted_products(text: str) -> list[Product]:
    """Parse one JSON object, or an array of objects, into products.

    Ids in the text are dropped: the service assigns them on creation.
    """
    text = (text or "").strip()
    if not text:
        logger.warning("No input received.")
        return []

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON input: %s", e)
        return []

    items = payload if isinstance(payload, list) else [payload]
    out: list[Product] = []
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            logger.warning("Skipping item %s: expected a JSON object, got %s", i, type(item).__name__)
            continue
        p = Product.from_dict(item)
        p.id = None
        out.append(p)
    return out


def read_pasted_products(stream: TextIO | None = None) -> list[Product]:
    stream = stream or sys.stdin
    print('Paste product JSON on one line, e.g. {"name": "...", "data": {"year": 2024, "price": 10}}:')
    return parse_pasted_products(stream.readline())


def load_products(settings: Settings, *, stdin: TextIO | None = None) -> list[Product]:
    source = settings.INPUT_SOURCE
    if source == SOURCE_EXCEL:
        xlsx = settings.excel_path()
        print(f"Using Excel file: {xlsx}")
        return ExcelImporter(xlsx, settings.EXCEL_WORKSHEET_NAME).read_products()
    if source == SOURCE_PASTE:
        return read_pasted_products(stdin)
    if source == SOURCE_LITERAL:
        # Fresh copies so the caller can mutate them freely.
        return [Product.from_dict(p.to_dict()) for p in LITERAL_PRODUCTS]
    raise ValueError(f"Unknown input source: {source!r} (expected one of: {', '.join(SOURCES)})")
