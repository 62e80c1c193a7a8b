"""CLI for searching StreetEasy rentals and viewing listing details."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .client import StreetEasyClient
from .config import get_client_config, get_search_defaults, load_config
from .constants import SORT_ATTRIBUTES, SORT_DIRECTIONS, parse_amenity, parse_area
from .errors import StreetEasyError
from .export import export_csv, export_json
from .models import RentalDetailsSummary, RentalSummary, summarize_search

app = typer.Typer(
    name="street-easy",
    help="Search StreetEasy rentals and inspect individual listings.",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )


def _range(lower: Optional[float], upper: Optional[float]) -> Optional[dict[str, Any]]:
    if lower is None and upper is None:
        return None
    return {"lowerBound": lower, "upperBound": upper}


async def _fetch(cfg: dict[str, Any], operation: str, *args: Any) -> Any:
    async with StreetEasyClient(get_client_config(cfg)) as client:
        return await getattr(client, operation)(*args)


def _run(cfg: dict[str, Any], operation: str, *args: Any) -> Any:
    try:
        return asyncio.run(_fetch(cfg, operation, *args))
    except StreetEasyError as e:
        console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)


def build_search_input(
    defaults: dict[str, Any],
    areas: List[str],
    min_price: Optional[float],
    max_price: Optional[float],
    min_beds: Optional[int],
    max_beds: Optional[int],
    amenities: List[str],
    pets: bool,
    sort: Optional[str],
    direction: Optional[str],
    page: int,
    per_page: Optional[int],
) -> dict[str, Any]:
    """Assemble a SearchRentalsInput from CLI options over config defaults."""
    filters: dict[str, Any] = {
        "areas": [int(parse_area(a)) for a in areas] if areas else defaults["areas"],
        "rentalStatus": "ACTIVE",
    }
    price = _range(min_price, max_price if max_price is not None else defaults["max_price"])
    if price:
        filters["price"] = price
    bedrooms = _range(min_beds, max_beds)
    if bedrooms:
        filters["bedrooms"] = bedrooms
    if amenities:
        filters["amenities"] = [parse_amenity(a).value for a in amenities]
    if pets:
        filters["petsAllowed"] = True

    attribute = (sort or defaults["sort_attribute"]).upper()
    order = (direction or defaults["sort_direction"]).upper()
    if attribute not in SORT_ATTRIBUTES:
        raise typer.BadParameter(f"sort must be one of {', '.join(SORT_ATTRIBUTES)}")
    if order not in SORT_DIRECTIONS:
        raise typer.BadParameter(f"direction must be one of {', '.join(SORT_DIRECTIONS)}")

    return {
        "filters": filters,
        "sorting": {"attribute": attribute, "direction": order},
        "page": page,
        "perPage": per_page or defaults["per_page"],
    }


def _display_results(total: int, summaries: list[RentalSummary]) -> None:
    if not summaries:
        console.print("[yellow]No listings matched.[/yellow]")
        return

    table = Table(title=f"Rentals ({len(summaries)} of {total:,})")
    table.add_column("#", style="dim")
    table.add_column("Address", style="cyan")
    table.add_column("Area", style="dim")
    table.add_column("Price", justify="right")
    table.add_column("Beds", justify="right")
    table.add_column("Baths", justify="right")
    table.add_column("Fee", justify="center")
    table.add_column("Type", style="dim")

    for i, s in enumerate(summaries, 1):
        addr = s.address
        addr_display = addr[:30] + "..." if len(addr) > 30 else addr
        baths = f"{s.full_bathrooms}" + (f"+{s.half_bathrooms}h" if s.half_bathrooms else "")
        kind = s.kind.value.replace("RentalEdge", "")
        if s.sponsored_label:
            kind = f"{kind} ({s.sponsored_label})"
        table.add_row(
            str(i),
            addr_display,
            s.area_name,
            f"${s.price:,.0f}",
            str(s.bedrooms),
            baths,
            "NO FEE" if s.no_fee else "",
            kind,
        )

    console.print(table)


def _display_details(d: RentalDetailsSummary) -> None:
    price = f"${d.price:,.0f}" if d.price is not None else "Unknown"
    console.print(f"[bold]{d.address or d.id}[/bold]  [dim]{d.area_name}[/dim]")
    console.print(f"ID: {d.id}  Status: {d.status}")
    console.print(f"Price: {price}{' (NO FEE)' if d.no_fee else ''}")
    console.print(
        f"Bedrooms: {d.bedrooms if d.bedrooms is not None else '?'}  "
        f"Bathrooms: {d.full_bathrooms or 0} full, {d.half_bathrooms or 0} half"
    )
    console.print(f"Size: {d.living_area_size or 'Unknown'} sq ft")
    console.print(f"Available: {d.available_at or 'Immediately'}")

    sections = [
        ("Amenities", [a.replace("_", " ").lower() for a in d.amenities]),
        ("Features", [f.replace("_", " ").lower() for f in d.features]),
        ("Nearby transit", d.transit),
        ("Nearby schools", d.schools),
    ]
    if d.building_name or d.building_type:
        building = [
            f"Name: {d.building_name or 'N/A'}",
            f"Type: {d.building_type or 'N/A'}",
            f"Year built: {d.year_built or 'Unknown'}",
        ]
        sections.insert(2, ("Building", building))

    for title, lines in sections:
        if not lines:
            continue
        console.print(f"\n[bold]{title}[/bold]")
        for line in lines:
            console.print(f"- {line}")

    if d.description:
        console.print("\n[bold]Description[/bold]")
        console.print(d.description)


@app.command()
def search(
    areas: List[str] = typer.Option([], "--area", "-a", help="Area name or code (repeatable)"),
    min_price: Optional[float] = typer.Option(None, "--min-price", help="Minimum monthly rent"),
    max_price: Optional[float] = typer.Option(None, "--max-price", help="Maximum monthly rent"),
    min_beds: Optional[int] = typer.Option(None, "--min-beds"),
    max_beds: Optional[int] = typer.Option(None, "--max-beds"),
    amenities: List[str] = typer.Option([], "--amenity", "-m", help="Amenity tag (repeatable)"),
    pets: bool = typer.Option(False, "--pets", help="Only pet-friendly listings"),
    sort: Optional[str] = typer.Option(None, "--sort", help="RECOMMENDED, PRICE or DATE_LISTED"),
    direction: Optional[str] = typer.Option(None, "--direction", help="ASCENDING or DESCENDING"),
    page: int = typer.Option(1, "--page", "-p", min=1),
    per_page: Optional[int] = typer.Option(None, "--per-page", "-n", min=1),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    csv_path: Optional[Path] = typer.Option(None, "--csv", help="Write results to CSV"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write raw response to JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Search active rental listings."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    try:
        search_input = build_search_input(
            get_search_defaults(cfg),
            areas,
            min_price,
            max_price,
            min_beds,
            max_beds,
            amenities,
            pets,
            sort,
            direction,
            page,
            per_page,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    payload = _run(cfg, "search_rentals", search_input)
    total, summaries = summarize_search(payload)
    _display_results(total, summaries)

    if csv_path:
        export_csv(summaries, csv_path)
        console.print(f"[dim]CSV: {csv_path}[/dim]")
    if json_path:
        export_json(payload, json_path)
        console.print(f"[dim]JSON: {json_path}[/dim]")


@app.command()
def details(
    listing_id: str = typer.Argument(..., help="Rental listing ID"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    json_path: Optional[Path] = typer.Option(None, "--json", help="Write raw response to JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show details for one rental listing."""
    _setup_logging(verbose)
    cfg = load_config(config_path)
    payload = _run(cfg, "get_rental_listing_details", listing_id)

    if not (payload or {}).get("rentalByListingId"):
        console.print(f"[yellow]Listing {listing_id} not found.[/yellow]")
        raise typer.Exit(1)

    _display_details(RentalDetailsSummary.from_payload(payload))
    if json_path:
        export_json(payload, json_path)
        console.print(f"\n[dim]JSON: {json_path}[/dim]")


if __name__ == "__main__":
    app()
