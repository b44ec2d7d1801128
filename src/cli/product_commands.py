"""Product inspection CLI commands."""

import typer
from rich.table import Table

from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.core.services import ProductService
from src.catalog.entities.service.product import Product, ProductRepository

from .utils import console, get_database_service

products_app = typer.Typer(help="📦 Inspect stored products")

_COLUMNS = (
    ("ID", "id", "cyan"),
    ("Code", "code", "green"),
    ("Name", "name", "green"),
    ("Price", "price", "magenta"),
    ("Quantity", "quantity", "magenta"),
    ("Status", "inventory_status", "yellow"),
    ("Category", "category", "blue"),
    ("Rating", "rating", "yellow"),
)


def _format(value: object) -> str:
    if value is None:
        return ""
    return getattr(value, "value", None) or str(value)


def _product_table(products: list[Product], title: str) -> Table:
    table = Table(title=title)
    for header, _, style in _COLUMNS:
        table.add_column(header, style=style)
    for product in products:
        table.add_row(*(_format(getattr(product, attr)) for _, attr, _ in _COLUMNS))
    return table


@products_app.command("list")
def list_products() -> None:
    """List every stored product."""
    with get_database_service().session_scope() as session:
        products = ProductService(ProductRepository(session)).get_all_products()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    console.print(_product_table(products, "Products"))
    console.print(f"\n[green]Found {len(products)} products[/green]")


@products_app.command("show")
def show_product(
    product_id: int = typer.Argument(..., help="Product id"),
) -> None:
    """Show a single product."""
    try:
        with get_database_service().session_scope() as session:
            product = ProductService(ProductRepository(session)).get_product(product_id)
    except ProductNotFoundError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(_product_table([product], f"Product {product_id}"))
