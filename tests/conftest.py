"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import Any

import pytest
import requests
from openpyxl import Workbook

from objetos.models import Product, ProductData
from objetos.settings import Settings

HEADERS = ["name", "year", "price", "CPU model", "hard disk size"]


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake collection, independent of the local .env."""
    return Settings(
        API_BASE_URL="https://objects.test/objects/",
        DEMO_OBJECT_ID="2",
        INPUT_SOURCE="literal",
        EXCEL_IMPORT_PATH="missing.xlsx",
        EXCEL_WORKSHEET_NAME="",
        SEARCH_NAME="",
        LOG_LEVEL="INFO",
    )


@pytest.fixture
def laptop() -> Product:
    return Product(
        name="Laptop A",
        data=ProductData(year=2022, price=999.99, cpu_model="i7", disk_size="512 GB"),
    )


@pytest.fixture
def write_xlsx(tmp_path):
    """Factory writing rows (header included) to a workbook under tmp_path."""

    def _write(rows: list[list[Any]], name: str = "products.xlsx", sheet_title: str = "Sheet1") -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_title
        for row in rows:
            ws.append(row)
        path = tmp_path / name
        wb.save(path)
        return path

    return _write


@pytest.fixture
def make_response():
    """Factory building real requests.Response objects."""

    def _make(status: int, payload: Any = None, reason: str = "OK") -> requests.Response:
        r = requests.Response()
        r.status_code = status
        r.reason = reason
        r.encoding = "utf-8"
        r.headers["Content-Type"] = "application/json"
        r._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
        return r

    return _make


class FakeObjectsApi:
    """In-memory stand-in for ApiClient that behaves like the remote collection."""

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")
        self.store: dict[str, dict] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_create_for: set[str] = set()
        self._ids = itertools.count(1)

    def _id(self, url: str) -> str:
        return url.rsplit("/", 1)[-1]

    def get_product(self, url: str) -> Product | None:
        self.calls.append(("GET", url))
        record = self.store.get(self._id(url))
        return Product.from_dict(record) if record else None

    def create_product(self, url: str, product: Product) -> Product | None:
        self.calls.append(("POST", url))
        if product.name in self.fail_create_for:
            return None
        record = product.to_dict()
        record["id"] = f"obj-{next(self._ids)}"
        self.store[record["id"]] = record
        return Product.from_dict(record)

    def update_product(self, url: str, product: Product) -> Product | None:
        self.calls.append(("PUT", url))
        oid = self._id(url)
        if oid not in self.store:
            return None
        record = product.to_dict()
        record["id"] = oid
        self.store[oid] = record
        return Product.from_dict(record)

    def patch_product(self, url: str, patch_body: dict) -> Product | None:
        self.calls.append(("PATCH", url))
        oid = self._id(url)
        record = self.store.get(oid)
        if record is None:
            return None
        for k, v in patch_body.items():
            if k == "data" and isinstance(v, dict):
                record.setdefault("data", {}).update(v)
            else:
                record[k] = v
        return Product.from_dict(record)

    def delete_product(self, url: str) -> bool:
        self.calls.append(("DELETE", url))
        return self.store.pop(self._id(url), None) is not None


@pytest.fixture
def fake_api(settings) -> FakeObjectsApi:
    api = FakeObjectsApi(settings.API_BASE_URL)
    api.store["2"] = {"id": "2", "name": "Apple iPhone 12 Mini, 256GB, Blue", "data": None}
    return api
