"""Command-line interface for bookswap.

Commands for searching the swap catalog and matching readers, reading
the JSON catalog files named by the configuration.
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .app_logging import configure_logging
from .catalog.repository import JsonCatalog
from .catalog.schemas import Coordinates, User
from .config import get_config
from .discovery.schemas import SearchCriteria, SearchFilters, SortDirection, SortField
from .discovery.search import SearchRanker
from .errors import BookSwapError
from .geo.cities import CityDirectory
from .geo.distance import distance_km
from .matching.scorer import CompatibilityScorer, find_users
from .text.collation import turkish_lower
from .text.similarity import levenshtein_distance, similarity_score

# Root command group
app = typer.Typer(
    name="bookswap",
    help="Find books to swap and readers to meet.",
    no_args_is_help=True,
)

# Console shared by all commands
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def _setup() -> tuple:
    """Load config, logging and the catalog, exiting on problems."""
    config = get_config()
    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)

    configure_logging(config.log_level)

    try:
        catalog = JsonCatalog(config.data_dir)
    except BookSwapError as e:
        print_error(str(e))
        raise typer.Exit(1)

    return config, catalog


def _require_user(catalog: JsonCatalog, user_id: str) -> User:
    user = catalog.get_user(user_id)
    if user is None:
        print_error(f"No user with id: {user_id}")
        raise typer.Exit(1)
    return user


def _city_directory(default_city: str) -> CityDirectory:
    try:
        return CityDirectory(default_city=default_city)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


def format_results_table(results: list, title: str) -> Table:
    """Create a rich table for displaying search results."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("Owner", style="yellow")
    table.add_column("City")
    table.add_column("Status")
    table.add_column("Rating", justify="center")
    table.add_column("Distance", justify="right")

    for item in results:
        book = item.user_book
        rating = "★" * book.rating + "☆" * (5 - book.rating) if book.rating else "-"
        table.add_row(
            book.title,
            ", ".join(book.authors) or "-",
            item.owner.display_name,
            item.owner.city or "-",
            book.status.value,
            rating,
            f"{item.distance} km" if item.distance is not None else "-",
        )

    return table


# ============================================================================
# Discovery Commands
# ============================================================================


@app.command()
def search(
    query: Optional[str] = typer.Argument(None, help="Text to match in titles and authors"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Searching user id (their books are excluded)"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Filter by author"),
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Filter by title"),
    city: Optional[str] = typer.Option(None, "--city", help="Only owners in this city"),
    owner: Optional[str] = typer.Option(None, "--owner", help="Filter by owner name"),
    min_rating: Optional[int] = typer.Option(None, "--min-rating", "-r", min=1, max=5, help="Minimum rating"),
    include_unrated: bool = typer.Option(False, "--include-unrated", help="Keep unrated books with --min-rating"),
    max_distance: Optional[float] = typer.Option(None, "--max-distance", "-d", help="Maximum distance in km"),
    near: Optional[str] = typer.Option(None, "--near", "-n", help="Your city, enables distances"),
    sort_by: SortField = typer.Option(SortField.TITLE, "--sort-by", "-s", help="Sort field"),
    order: SortDirection = typer.Option(SortDirection.ASC, "--order", "-o", help="Sort order"),
    available_only: bool = typer.Option(False, "--available-only", help="Only books that can be swapped"),
    nearby_only: bool = typer.Option(False, "--nearby-only", help="Only books within the nearby radius"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
) -> None:
    """Search books owned by other members."""
    config, catalog = _setup()
    cities = _city_directory(config.default_city)

    coords: Optional[Coordinates] = None
    if near:
        if near not in cities:
            print_error(f"Unknown city: {near}")
            raise typer.Exit(1)
        coords = cities.lookup(near)

    ranker = SearchRanker(
        catalog=catalog,
        cities=cities,
        nearby_radius_km=config.nearby_radius_km,
        nearby_limit=config.nearby_limit,
    )
    response = ranker.search_catalog(
        SearchCriteria(
            query=query,
            author=author,
            title=title,
            city=city,
            owner=owner,
            min_rating=min_rating,
            max_distance=max_distance,
            include_unrated=include_unrated,
        ),
        SearchFilters(
            sort_by=sort_by,
            sort_order=order,
            available_only=available_only,
            nearby_only=nearby_only,
        ),
        requesting_user_id=user,
        requesting_coords=coords,
    )

    if as_json:
        console.print_json(json.dumps(response.to_dict(), ensure_ascii=False))
        return

    if not response.results:
        print_info("No books found.")
        return

    console.print(format_results_table(response.results, f"Results ({response.total_results})"))
    if response.nearby_results:
        console.print(format_results_table(response.nearby_results, "Nearby"))


# ============================================================================
# Matching Commands
# ============================================================================


@app.command()
def match(
    user_a: str = typer.Argument(..., help="First user id"),
    user_b: str = typer.Argument(..., help="Second user id"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a panel"),
) -> None:
    """Show how compatible two readers are."""
    _, catalog = _setup()
    first = _require_user(catalog, user_a)
    second = _require_user(catalog, user_b)

    scorer = CompatibilityScorer()
    result = scorer.score(first.profile, second.profile)

    if as_json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
        return

    lines = [
        f"[bold]Overall:[/bold] {result.overall_score:.2f} ({result.tier.value})",
        f"Genres: {result.genre_score:.2f}",
        f"Interests: {result.interest_score:.2f}",
        f"Authors: {result.author_score:.2f}",
        f"Intellectual: {result.intellectual_score:.2f}",
        f"Reading pattern: {result.pattern_score:.2f}",
    ]
    if result.match_reasons:
        lines.append("")
        lines.extend(f"• {reason}" for reason in result.match_reasons)
    explanations = scorer.explain(result)
    if explanations:
        lines.append("")
        lines.extend(explanations)

    console.print(Panel(
        "\n".join(lines),
        title=f"{first.display_name} ↔ {second.display_name}",
        border_style="blue",
    ))


@app.command()
def suggest(
    user: str = typer.Argument(..., help="User id to find readers for"),
    min_score: float = typer.Option(0.6, "--min-score", "-m", help="Minimum compatibility"),
    genre: Optional[List[str]] = typer.Option(None, "--genre", "-g", help="Preferred genre (repeatable)"),
    interest: Optional[List[str]] = typer.Option(None, "--interest", "-i", help="Preferred interest (repeatable)"),
    limit: int = typer.Option(10, "--limit", "-l", help="Max suggestions"),
) -> None:
    """Suggest compatible readers to follow."""
    _, catalog = _setup()
    current = _require_user(catalog, user)

    matches = CompatibilityScorer().cultural_matches(
        current,
        catalog.list_users(),
        min_score=min_score,
        preferred_genres=genre,
        preferred_interests=interest,
    )[:limit]

    if not matches:
        print_info("No matching readers.")
        return

    table = Table(title=f"Readers for {current.display_name}", header_style="bold magenta")
    table.add_column("User", style="cyan")
    table.add_column("City")
    table.add_column("Score", justify="right")
    table.add_column("Tier", style="yellow")
    table.add_column("Why", max_width=50)
    for m in matches:
        table.add_row(
            m.user.display_name,
            m.user.city or "-",
            f"{m.score:.2f}",
            m.result.tier.value,
            ", ".join(m.result.match_reasons) or "-",
        )
    console.print(table)


@app.command()
def find(
    query: str = typer.Argument(..., help="Name or interest to look for"),
) -> None:
    """Find members by name or interest."""
    _, catalog = _setup()
    users = find_users(catalog.list_users(), query)

    if not users:
        print_info("No members found.")
        return

    for user in users:
        interests = ", ".join(user.profile.interests) if user.profile else ""
        console.print(f"[cyan]{user.display_name}[/cyan] [dim]({user.id})[/dim] {interests}")


# ============================================================================
# Utility Commands
# ============================================================================


@app.command()
def distance(
    city_a: str = typer.Argument(..., help="First city"),
    city_b: str = typer.Argument(..., help="Second city"),
) -> None:
    """Great-circle distance between two known cities."""
    cities = CityDirectory()
    for city in (city_a, city_b):
        if city not in cities:
            print_error(f"Unknown city: {city}")
            raise typer.Exit(1)

    km = distance_km(cities.lookup(city_a), cities.lookup(city_b))
    console.print(f"{city_a} → {city_b}: [bold]{km} km[/bold]")


@app.command()
def similarity(
    first: str = typer.Argument(..., help="First string"),
    second: str = typer.Argument(..., help="Second string"),
) -> None:
    """Levenshtein similarity between two strings."""
    score = similarity_score(first, second)
    edits = levenshtein_distance(turkish_lower(first), turkish_lower(second))
    console.print(f"Similarity: [bold]{score:.2f}[/bold] ({edits} edits)")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"bookswap version {__version__}")


if __name__ == "__main__":
    app()
