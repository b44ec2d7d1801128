"""Configuration CLI commands."""

import json

import typer
from sqlalchemy.engine import make_url

from src.catalog.runtime.context import get_config

from .utils import console

config_app = typer.Typer(help="⚙️ Configuration commands")


@config_app.command("show")
def show_config() -> None:
    """Print the effective configuration with the database password masked."""
    data = get_config().model_dump(
        mode="json",
        exclude={"database": {"password", "connection_string"}},
    )
    data["database"]["url"] = make_url(data["database"]["url"]).render_as_string(
        hide_password=True
    )
    console.print_json(json.dumps(data))
