"""CLI entry point for Podnotes."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podnotes.config.logging import apply_log_level, setup_logging
from podnotes.config.manager import ConfigManager
from podnotes.config.schema import GlobalConfig
from podnotes.library.filters import FilterStateManager, SortMode
from podnotes.library.models import PodcastEntry
from podnotes.library.store import PodcastLibrary
from podnotes.library.tags import TagOrder, total_tag_count
from podnotes.library.validation import load_entries_file
from podnotes.utils.datetime import format_date
from podnotes.utils.display import (
    format_duration,
    format_rating,
    truncate_text,
    truncate_url,
)
from podnotes.utils.errors import (
    DuplicateEntryError,
    EntryNotFoundError,
    EntryValidationError,
    PodnotesError,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="podnotes",
    help="Browse, search and organize structured podcast notes",
    no_args_is_help=True,
)
console = Console()

CONFIG_KEYS = ("log_level", "library_file", "default_sort", "tag_order", "list_limit")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """Podnotes - a personal library of structured podcast notes."""
    setup_logging(verbose=verbose, log_file=log_file)


def _print_error(error: PodnotesError) -> None:
    console.print(f"[red]✗[/red] Error: {escape(str(error))}")
    if isinstance(error, EntryValidationError):
        for field_error in error.errors:
            console.print(
                f"  • [bold]{escape(field_error.field)}[/bold]: {escape(field_error.message)}"
            )
    if error.suggestion:
        console.print(f"[dim]  {escape(error.suggestion)}[/dim]")


def _open_library() -> tuple[GlobalConfig, PodcastLibrary]:
    manager = ConfigManager()
    config = manager.load_config()
    apply_log_level(config.log_level)
    return config, PodcastLibrary(manager.resolve_library_file(config))


def _short_id(entry: PodcastEntry) -> str:
    return entry.id[:8]


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podnotes import __version__

    console.print(f"[bold cyan]Podnotes[/bold cyan] v{__version__}")


@app.command("add")
def add_entries(
    file: Annotated[
        Path,
        typer.Argument(help="JSON file with one podcast entry or an array of entries"),
    ],
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Validate only, do not save")
    ] = False,
) -> None:
    """Import podcast entries from a JSON file.

    Examples:
        podnotes add episode.json

        podnotes add backlog.json --dry-run
    """
    try:
        entries = load_entries_file(file)

        if dry_run:
            console.print(
                f"[green]✓[/green] {len(entries)} valid entr{'y' if len(entries) == 1 else 'ies'}"
                f" in {escape(str(file))}"
            )
            return

        _, library = _open_library()
        added = 0
        # Oldest first so the file's first entry ends up on top
        for entry in reversed(entries):
            try:
                library.add_entry(entry)
                added += 1
            except DuplicateEntryError as e:
                console.print(f"[yellow]⚠[/yellow] Skipped: {escape(str(e))}")

        console.print(f"\n[green]✓[/green] Added {added} podcast entr{'y' if added == 1 else 'ies'}")

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("list")
def list_entries(
    search: Annotated[
        str,
        typer.Option(
            "--search", "-s", help="Match title, creator, podcast or guest name"
        ),
    ] = "",
    tags: Annotated[
        list[str] | None,
        typer.Option("--tag", "-t", help="Only entries with any of these tags (repeatable)"),
    ] = None,
    sort: Annotated[
        SortMode | None,
        typer.Option("--sort", help="Sort order (default from config)"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Maximum rows to show", min=1),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List podcast entries with optional search, tag filter and sorting.

    Examples:
        podnotes list --search chen

        podnotes list --tag AI --tag Tech --sort rating-high
    """
    try:
        config, library = _open_library()
        collection = library.list_entries()

        filters = FilterStateManager()
        filters.set_search_query(search)
        for tag in dict.fromkeys(tags or []):
            filters.toggle_tag(tag)
        filters.set_sort_by(sort or config.default_sort)

        results = filters.apply(collection)
        logger.debug("Filters matched %d of %d entries", len(results), len(collection))
        shown = results[: limit or config.list_limit]
        state = filters.state

        if json_output:
            output = {
                "entries": [entry.to_record() for entry in shown],
                "total": len(collection),
                "matched": len(results),
                "showing": len(shown),
                "filters": {
                    "searchQuery": state.search_query,
                    "selectedTags": sorted(state.selected_tags),
                    "sortBy": state.sort_by.value,
                },
            }
            print(json.dumps(output, indent=2, ensure_ascii=False))
            return

        if not collection:
            console.print("[yellow]Your library is empty.[/yellow]")
            console.print("\nImport notes: [cyan]podnotes add <file.json>[/cyan]")
            return

        if not results:
            console.print("[yellow]No podcasts match the current filters.[/yellow]")
            return

        table = Table(title="[bold]Podcast Notes[/bold]", show_lines=False)
        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Title", style="cyan", max_width=45)
        table.add_column("Podcast", style="blue", max_width=25)
        table.add_column("Creator", max_width=20)
        table.add_column("Added", style="green", width=10)
        table.add_column("Length", style="yellow", justify="right")
        table.add_column("Rating", style="magenta")
        table.add_column("Tags", style="dim", max_width=30)

        for entry in shown:
            table.add_row(
                _short_id(entry),
                escape(truncate_text(entry.title, 45)),
                escape(entry.podcast_name),
                escape(entry.creator),
                format_date(entry.created_at),
                format_duration(entry.duration_minutes),
                format_rating(entry.rating),
                escape(", ".join(entry.tags)),
            )

        console.print(table)
        console.print(
            f"\n[dim]Showing {len(shown)} of {len(results)} matching "
            f"({len(collection)} total)[/dim]"
        )

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("show")
def show_entry(
    key: Annotated[str, typer.Argument(help="Entry id, short id or URL slug")],
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Show the full summary of one podcast entry."""
    try:
        _, library = _open_library()
        entry = library.find_entry(key)

        if json_output:
            print(json.dumps(entry.to_record(), indent=2, ensure_ascii=False))
            return

        summary = entry.summary
        console.print(f"\n[bold cyan]{escape(entry.title)}[/bold cyan]")
        byline = f"{entry.podcast_name} · {entry.creator}"
        if entry.guest_name:
            byline += f" with {entry.guest_name}"
        console.print(f"[dim]{escape(byline)}[/dim]\n")

        details = Table(show_header=False, box=None)
        details.add_column("Key", style="cyan")
        details.add_column("Value")
        details.add_row("ID", entry.id)
        details.add_row("Slug", entry.slug)
        details.add_row("Link", escape(truncate_url(entry.source_link, max_length=70)))
        details.add_row("Added", format_date(entry.created_at))
        details.add_row("Published", format_date(entry.published_at))
        details.add_row("Duration", format_duration(entry.duration_minutes))
        details.add_row("Rating", format_rating(entry.rating))
        details.add_row("Tags", escape(", ".join(entry.tags)))
        console.print(details)

        console.print("\n[bold]Main topic[/bold]")
        console.print(escape(summary.main_topic))

        sections = [
            ("Key takeaways", summary.key_takeaways),
            ("Core insights", summary.core_insights),
            ("Actionable advice", summary.actionable_advice),
        ]
        for heading, items in sections:
            if not items:
                continue
            console.print(f"\n[bold]{heading}[/bold]")
            for item in items:
                console.print(f"  • {escape(item)}")

        if summary.resources_mentioned:
            console.print("\n[bold]Resources[/bold]")
            for resource in summary.resources_mentioned:
                link = f" [dim]{escape(resource.link)}[/dim]" if resource.link else ""
                console.print(f"  • {escape(resource.title)}{link}")

        if entry.your_notes:
            console.print("\n[bold]Your notes[/bold]")
            console.print(escape(entry.your_notes))

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("tags")
def list_tags(
    order: Annotated[
        TagOrder | None,
        typer.Option("--order", "-o", help="frequency or alphabetical (default from config)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """List tags with the number of podcasts carrying each."""
    try:
        config, library = _open_library()
        tag_counts = library.get_all_tags(order or config.tag_order)

        if json_output:
            output = {
                "tags": [tc.model_dump() for tc in tag_counts],
                "total": len(tag_counts),
            }
            print(json.dumps(output, indent=2, ensure_ascii=False))
            return

        if not tag_counts:
            console.print("[yellow]No tags yet.[/yellow]")
            return

        table = Table(title="[bold]Tags[/bold]")
        table.add_column("Tag", style="cyan")
        table.add_column("Podcasts", justify="right", style="yellow")
        for tc in tag_counts:
            table.add_row(escape(tc.tag), str(tc.count))

        console.print(table)
        console.print(
            f"\n[dim]Total: {len(tag_counts)} tag(s) across "
            f"{total_tag_count(tag_counts)} tag assignment(s)[/dim]"
        )

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("rate")
def rate_entry(
    key: Annotated[str, typer.Argument(help="Entry id, short id or URL slug")],
    rating: Annotated[int, typer.Argument(help="Rating from 1 to 5", min=1, max=5)],
) -> None:
    """Set the rating of a podcast entry."""
    try:
        _, library = _open_library()
        entry = library.find_entry(key)
        updated = library.update_entry(entry.id, {"rating": rating})
        console.print(
            f"[green]✓[/green] Rated '[bold]{escape(updated.title)}[/bold]' "
            f"{format_rating(updated.rating)}"
        )

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("remove")
def remove_entry(
    key: Annotated[str, typer.Argument(help="Entry id, short id or URL slug")],
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Skip confirmation prompt")
    ] = False,
) -> None:
    """Remove a podcast entry.

    Examples:
        podnotes remove 3f2a9c1e

        podnotes remove 3f2a9c1e --force  # Skip confirmation
    """
    try:
        _, library = _open_library()

        try:
            entry = library.find_entry(key)
        except EntryNotFoundError as e:
            _print_error(e)
            console.print("\nUse [cyan]podnotes list[/cyan] to see entry ids.")
            sys.exit(1)

        if not force:
            console.print(f"\nTitle:   [bold]{escape(entry.title)}[/bold]")
            console.print(f"Podcast: [dim]{escape(entry.podcast_name)}[/dim]")
            confirm: bool = typer.confirm("\nAre you sure you want to remove this entry?")
            if not confirm:
                console.print("[yellow]Cancelled[/yellow]")
                return

        library.remove_entry(entry.id)
        console.print(f"[green]✓[/green] Removed '[bold]{escape(entry.title)}[/bold]'")

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


@app.command("config")
def config_command(
    action: Annotated[str, typer.Argument(help="Action: show or set")],
    key: Annotated[str | None, typer.Argument(help="Config key (for 'set')")] = None,
    value: Annotated[str | None, typer.Argument(help="Config value (for 'set')")] = None,
) -> None:
    """Manage Podnotes configuration.

    Examples:
        podnotes config show

        podnotes config set default_sort rating-high
    """
    try:
        manager = ConfigManager()
        config = manager.load_config()

        if action == "show":
            console.print("\n[bold]Podnotes Configuration[/bold]\n")

            table = Table(show_header=False, box=None)
            table.add_column("Key", style="cyan")
            table.add_column("Value", style="white")

            table.add_row("Config file", str(manager.config_file))
            table.add_row("Library file", str(manager.resolve_library_file(config)))
            table.add_row("", "")
            table.add_row("Log level", config.log_level)
            table.add_row("Default sort", config.default_sort.value)
            table.add_row("Tag order", config.tag_order.value)
            table.add_row("List limit", str(config.list_limit))

            console.print(table)

        elif action == "set":
            if not key or value is None:
                console.print("[red]✗[/red] Usage: podnotes config set <key> <value>")
                sys.exit(1)

            if key not in CONFIG_KEYS:
                console.print(f"[red]✗[/red] Unknown config key: {escape(key)}")
                console.print(f"[dim]  Valid keys: {', '.join(CONFIG_KEYS)}[/dim]")
                sys.exit(1)

            data = config.model_dump()
            data[key] = value
            try:
                new_config = GlobalConfig(**data)
            except ValidationError as e:
                message = e.errors()[0]["msg"]
                console.print(f"[red]✗[/red] Invalid value for {escape(key)}: {escape(message)}")
                sys.exit(1)

            manager.save_config(new_config)
            console.print(f"[green]✓[/green] Set {escape(key)} = {escape(value)}")

        else:
            console.print(f"[red]✗[/red] Unknown action: {escape(action)}")
            console.print("Valid actions: show, set")
            sys.exit(1)

    except PodnotesError as e:
        _print_error(e)
        sys.exit(1)


if __name__ == "__main__":
    app()
