"""HTTP client for the ``objects`` REST collection.

One ``requests.Session`` is created per client and reused by every call. A
non-2xx reply is logged and turned into ``None`` (``False`` for DELETE);
transport errors and undecodable success bodies propagate to the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from objetos.models import Product

logger = logging.getLogger(__name__)


def object_url(base_url: str, object_id: str | int) -> str:
    return f"{str(base_url).rstrip('/')}/{object_id}"


class ApiClient:
    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()
        self.session.headers["Accept"] = "application/json"

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    @staticmethod
    def _ok(response: requests.Response) -> bool:
        return 200 <= int(response.status_code) < 300

    def _product_or_none(self, verb: str, response: requests.Response) -> Product | None:
        if not self._ok(response):
            logger.warning("%s Error: %s - %s", verb, response.status_code, response.reason)
            return None
        return Product.from_dict(response.json())

    def get_product(self, url: str) -> Product | None:
        response = self.session.get(url)
        return self._product_or_none("GET", response)

    def create_product(self, url: str, product: Product) -> Product | None:
        # json= sets Content-Type: application/json
        response = self.session.post(url, json=product.to_dict())
        return self._product_or_none("POST", response)

    def update_product(self, url: str, product: Product) -> Product | None:
        """Replace the remote record. The server does not merge, so send every field."""
        response = self.session.put(url, json=product.to_dict())
        return self._product_or_none("PUT", response)

    def patch_product(self, url: str, patch_body: dict[str, Any]) -> Product | None:
        response = self.session.patch(url, json=patch_body)
        return self._product_or_none("PATCH", response)

    def delete_product(self, url: str) -> bool:
        response = self.session.delete(url)
        if not self._ok(response):
            logger.warning("DELETE Error: %s - %s", response.status_code, response.reason)
            return False
        logger.info("Product deleted successfully.")
        return True
