"""Main CLI application module."""

import typer

from .config_commands import config_app
from .product_commands import products_app
from .server_commands import drop_db, init_db, serve

# Create the main CLI application
app = typer.Typer(
    help="🛒 Product Catalog CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="init-db")(init_db)
app.command(name="drop-db")(drop_db)
app.command(name="serve")(serve)

# Register command groups
app.add_typer(products_app, name="products")
app.add_typer(config_app, name="config")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
