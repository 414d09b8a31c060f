from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

# Wire keys for the nested attribute bag. Outbound keys are emitted exactly
# like this; inbound matching is case-insensitive.
KEY_YEAR = "year"
KEY_PRICE = "price"
KEY_CPU_MODEL = "CPU model"
KEY_DISK_SIZE = "hard disk size"


def _folded(mapping: Mapping[str, Any] | None) -> dict[str, Any]:
    # First key wins when the remote record repeats a name with other casing.
    out: dict[str, Any] = {}
    for k, v in (mapping or {}).items():
        out.setdefault(str(k).strip().casefold(), v)
    return out


def _as_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        f = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # NaN/Infinity cannot be sent back as JSON.
    return f if math.isfinite(f) else None


def _as_int(value: Any) -> int | None:
    f = _as_float(value)
    return int(f) if f is not None else None


def _as_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass
class ProductData:
    year: int | None = None
    price: float | None = None
    cpu_model: str | None = None
    disk_size: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.year is not None:
            out[KEY_YEAR] = int(self.year)
        if self.price is not None:
            out[KEY_PRICE] = float(self.price)
        if self.cpu_model is not None:
            out[KEY_CPU_MODEL] = self.cpu_model
        if self.disk_size is not None:
            out[KEY_DISK_SIZE] = self.disk_size
        return out

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "ProductData":
        f = _folded(mapping)
        return cls(
            year=_as_int(f.get(KEY_YEAR.casefold())),
            price=_as_float(f.get(KEY_PRICE.casefold())),
            cpu_model=_as_str(f.get(KEY_CPU_MODEL.casefold())),
            disk_size=_as_str(f.get(KEY_DISK_SIZE.casefold())),
        )


@dataclass
class Product:
    """A record of the remote ``objects`` collection.

    ``id`` is assigned by the service on creation and stays ``None`` until
    then. After a delete the instance is only a stale snapshot.
    """

    name: str | None = None
    data: ProductData | None = None
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.id is not None:
            out["id"] = self.id
        if self.name is not None:
            out["name"] = self.name
        if self.data is not None:
            out["data"] = self.data.to_dict()
        return out

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "Product":
        f = _folded(mapping)
        raw_data = f.get("data")
        data = ProductData.from_dict(raw_data) if isinstance(raw_data, Mapping) else None
        return cls(
            name=_as_str(f.get("name")),
            data=data,
            id=_as_str(f.get("id")),
        )


def _display(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_product(product: Product | None) -> str:
    p = product or Product()
    d = p.data or ProductData()
    return "\n".join(
        [
            f"ID: {_display(p.id)}",
            f"Name: {_display(p.name)}",
            f"Year: {_display(d.year)}",
            f"Price: {_display(d.price)}",
            f"CPU: {_display(d.cpu_model)}",
            f"Disk: {_display(d.disk_size)}",
        ]
    )
