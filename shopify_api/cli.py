"""Command-line interface for inspecting Shopify client configuration."""

import logging

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .client import Shopify
from .models import ShopifySettings, mask_secret
from .versions import (
    ApiVersion,
    UnknownApiVersionError,
    api_version_to_string,
    get_end_of_support_date,
    is_deprecated,
    parse_api_version,
)


# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shopify-api",
    help="Shopify Admin API version registry and client configuration helper",
    no_args_is_help=True
)

console = Console()


def _status(api_version: ApiVersion) -> str:
    if api_version is ApiVersion.UNSTABLE:
        return "unstable"
    return "deprecated" if is_deprecated(api_version) else "supported"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
):
    """Shopify Admin API configuration helper."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    logging.getLogger("shopify_api").setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command()
def versions(
    show_all: bool = typer.Option(False, "--all", help="Include deprecated versions")
):
    """List known API versions and their end of support."""
    table = Table(title="Shopify Admin API Versions")
    table.add_column("Version", style="cyan")
    table.add_column("End of Support", style="white")
    table.add_column("Status")

    for api_version in ApiVersion:
        status = _status(api_version)
        if status == "deprecated" and not show_all:
            continue
        style = {"supported": "green", "deprecated": "red"}.get(status, "yellow")
        table.add_row(
            api_version_to_string(api_version),
            get_end_of_support_date(api_version).strftime("%Y-%m-%d %H:%M:%S UTC"),
            f"[{style}]{status}[/{style}]",
        )

    console.print(table)


@app.command()
def urls(
    shop: str = typer.Argument(..., help="Shop domain, e.g. my-shop.myshopify.com")
):
    """Show the base URLs built for a shop."""
    # Only the URLs are shown, so the key is a placeholder
    shopify = Shopify(shop, "-")
    console.print(f"GraphQL: {shopify.query_url}", highlight=False)
    console.print(f"REST:    {shopify.rest_url}", highlight=False)


@app.command()
def check(
    version: str = typer.Argument(..., help="Version tag, e.g. 2023-01 or unstable")
):
    """Exit 0 if a version is supported, 1 if deprecated, 2 if unknown."""
    try:
        api_version = parse_api_version(version)
    except UnknownApiVersionError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(2)

    end = get_end_of_support_date(api_version).strftime("%Y-%m-%d")
    if is_deprecated(api_version):
        console.print(f"[red]{api_version} is deprecated (end of support {end})[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓ {api_version} is supported until {end}[/green]")


@app.command()
def info():
    """Show the client configuration loaded from the environment."""
    try:
        settings = ShopifySettings()
    except ValidationError as e:
        console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        console.print("\n[yellow]Please set the following environment variables:[/yellow]")
        console.print("  SHOPIFY_SHOP")
        console.print("  SHOPIFY_API_KEY")
        console.print("  SHOPIFY_SHARED_SECRET (optional)")
        console.print("  SHOPIFY_API_VERSION (optional, defaults to '2023-01')")
        console.print("\nYou can also create a .env file with these variables.")
        raise typer.Exit(1)

    logger.debug("Loaded settings for shop %s", settings.shop)
    shopify = Shopify.from_settings(settings)

    info_table = Table(title="Shopify Client")
    info_table.add_column("Property", style="cyan")
    info_table.add_column("Value", style="white")

    info_table.add_row("Shop", shopify.get_shop())
    info_table.add_row("API Key", mask_secret(shopify.api_key))
    info_table.add_row("Shared Secret", mask_secret(shopify.shared_secret))
    info_table.add_row("GraphQL URL", shopify.query_url)
    info_table.add_row("REST URL", shopify.rest_url)
    info_table.add_row("API Version", f"{settings.api_version} ({_status(settings.api_version)})")

    console.print(info_table)


if __name__ == "__main__":
    app()
