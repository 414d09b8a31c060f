from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

from objetos.api_client import ApiClient, object_url
from objetos.models import Product, ProductData, format_product
from objetos.settings import Settings
from objetos.sources import load_products

logger = logging.getLogger(__name__)

PUT_NAME_SUFFIX = " - Updated via PUT"
PUT_PRICE_INCREMENT = 100
PUT_DISK_SIZE = "2 TB"
PATCH_NAME_SUFFIX = " - Patched"
PATCH_CPU_MODEL = "14-Core CPU"


def build_replacement(product: Product) -> Product:
    """Full PUT body derived from ``product``: renamed, +100 price, 2 TB disk."""
    d = product.data or ProductData()
    return Product(
        id=product.id,
        name=f"{product.name or ''}{PUT_NAME_SUFFIX}",
        data=ProductData(
            year=d.year,
            price=float(d.price or 0) + PUT_PRICE_INCREMENT,
            cpu_model=d.cpu_model,
            disk_size=PUT_DISK_SIZE,
        ),
    )


def build_patch_body(product: Product) -> dict[str, Any]:
    return {
        "name": f"{product.name or ''}{PATCH_NAME_SUFFIX}",
        "data": ProductData(cpu_model=PATCH_CPU_MODEL).to_dict(),
    }


def select_by_name(products: list[Product], name: str) -> Product | None:
    # First match wins when several products share the name.
    wanted = (name or "").strip().casefold()
    if not wanted:
        return None
    return next((p for p in products if (p.name or "").strip().casefold() == wanted), None)


@dataclass
class ScenarioResult:
    created: list[Product] = field(default_factory=list)
    updated: list[Product] = field(default_factory=list)
    patched: list[Product] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)


class ProductScenario:
    def __init__(self, client: ApiClient, settings: Settings, *, echo: Callable[[str], Any] = print):
        self.client = client
        self.settings = settings
        self.echo = echo

    def _url(self, object_id: str | int) -> str:
        return object_url(self.settings.API_BASE_URL, object_id)

    def _show(self, title: str | None, product: Product) -> None:
        if title:
            self.echo(f"\n--- {title} ---")
        self.echo(format_product(product))

    def demo_fetch(self) -> Product | None:
        product = self.client.get_product(self._url(self.settings.DEMO_OBJECT_ID))
        if product is not None:
            self._show(None, product)
        return product

    def _create(self, product: Product, result: ScenarioResult) -> Product | None:
        self.echo(f"\nPosting product: {product.name}")
        created = self.client.create_product(self.settings.API_BASE_URL, product)
        if created is None:
            self.echo("POST failed, skipping...")
            return None
        if not created.id:
            logger.warning("POST returned no id for '%s', skipping...", product.name)
            return None
        result.created.append(created)
        self._show("Created Product", created)
        return created

    def _follow_up(self, created: Product, result: ScenarioResult) -> None:
        url = self._url(created.id)

        self.echo("\nFetching created product (GET)...")
        fetched = self.client.get_product(url)
        if fetched is not None:
            self._show(None, fetched)

        self.echo("\nUpdating product (PUT)...")
        updated = self.client.update_product(url, build_replacement(created))
        if updated is not None:
            result.updated.append(updated)
            self._show("Product Updated (PUT)", updated)

        self.echo("\nPatching product (PATCH)...")
        patched = self.client.patch_product(url, build_patch_body(created))
        if patched is not None:
            result.patched.append(patched)
            self._show("Product Patched", patched)

        self.echo("\nDeleting product (DELETE)...")
        if self.client.delete_product(url):
            result.deleted.append(created.id)
            self.echo("\n--- Product Deleted ---")
            self.echo(f"Deleted Product ID: {created.id}")

    def process(self, product: Product, result: ScenarioResult | None = None) -> bool:
        """Create, read back, replace, patch and delete one product."""
        result = result if result is not None else ScenarioResult()
        created = self._create(product, result)
        if created is None:
            return False
        self._follow_up(created, result)
        return True

    def run(self, products: list[Product]) -> ScenarioResult:
        result = ScenarioResult()
        for product in products:
            self.process(product, result)
        return result

    def run_for_name(self, products: list[Product], name: str) -> ScenarioResult:
        """Create every product, then run the remaining steps on the one named ``name``.

        Products created but not selected are left on the server.
        """
        result = ScenarioResult()
        for product in products:
            self._create(product, result)

        target = select_by_name(result.created, name)
        if target is None:
            self.echo(f"\nNo created product named '{name}'. Skipping update, patch and delete.")
            return result

        self.echo(f"\nSelected product: {target.name} (ID: {target.id})")
        self._follow_up(target, result)
        return result


def run_scenario(
    client: ApiClient,
    settings: Settings,
    *,
    stdin: TextIO | None = None,
    echo: Callable[[str], Any] = print,
) -> ScenarioResult | None:
    scenario = ProductScenario(client, settings, echo=echo)

    echo("Fetching sample product (GET)...")
    scenario.demo_fetch()

    products = load_products(settings, stdin=stdin)
    if not products:
        echo("No valid products found. Exiting...")
        return None

    if settings.SEARCH_NAME:
        result = scenario.run_for_name(products, settings.SEARCH_NAME)
    else:
        result = scenario.run(products)

    echo(f"\nProcess completed: {len(result.created)} created, {len(result.deleted)} deleted.")
    return result
