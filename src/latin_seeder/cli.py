"""Command-line interface for seeding the Church Latin PocketBase backend."""

from pathlib import Path

import click
from pocketbase.utils import ClientResponseError

from . import schema
from .backend import get_backend
from .config import clear_backend_url, load_settings, set_backend_url
from .errors import BackendAuthError, ConfigError, FixtureError
from .generator import generate_course_data
from .log import log_error, log_info, log_verbose
from .models import SeedOptions, SeedResult, SeedSummary
from .paths import CONFIG_TOML, COURSE_DATA_PATH, PROJECT_ROOT, SEED_DATA_DIR
from .seeders import SEEDER_CLASSES, build_seeders, run_seeders

STATUS_STYLES = {
    "ok": ("OK  ", "green"),
    "skipped": ("WARN", "yellow"),
    "failed": ("FAIL", "red"),
}


def _connect():
    """Connect to the configured backend, turning setup failures into CLI errors."""
    try:
        return get_backend()
    except (ConfigError, BackendAuthError) as e:
        raise click.ClickException(str(e)) from e


def print_header(options: SeedOptions, data_dir: Path) -> None:
    click.echo()
    click.echo(click.style("=== Church Latin Seeder ===", bold=True))
    click.echo()
    if options.dry_run:
        click.echo(click.style("DRY RUN - no changes will be committed", fg="cyan"))
    if options.reset:
        click.echo(click.style("RESET - collections will be cleared first", fg="yellow"))
    if options.collection:
        click.echo(f"Single collection mode: {options.collection}")
    click.echo(f"Data source: {data_dir}")
    click.echo()


def print_summary(results: list[SeedResult], options: SeedOptions) -> None:
    summary = SeedSummary.from_results(results)

    click.echo()
    click.echo(click.style("=== Final Report ===", bold=True))
    click.echo()
    click.echo(click.style("Summary:", bold=True))
    click.echo(f"  Added:   {summary.total_added}")
    click.echo(f"  Updated: {summary.total_updated}")
    click.echo(f"  Skipped: {summary.total_skipped}")
    if summary.total_errors:
        click.echo(click.style(f"  Errors:  {summary.total_errors}", fg="red"))
    click.echo(f"  Time:    {summary.total_duration:.2f}s")
    click.echo()

    click.echo(click.style("Per-collection details:", bold=True))
    for result in results:
        label, color = STATUS_STYLES[result.status]
        click.echo(
            f"  {click.style(label, fg=color)} {result.collection}: "
            f"+{result.added} ~{result.updated} skipped {result.skipped}"
        )
        if result.errors:
            click.echo(f"       First error: {result.errors[0].message}")
            for error in result.errors[1:]:
                log_verbose(f"{result.collection}: {error.message}", options)

    if options.dry_run:
        click.echo()
        click.echo("This was a DRY RUN. No changes were made. Run without --dry-run to apply.")
    if options.reset:
        click.echo()
        click.echo("Collections were reset before seeding.")
    click.echo()


@click.group()
@click.version_option()
def cli() -> None:
    """Seed the Church Latin course into PocketBase.

    Reads fixture files from data/seed/ and reconciles each course
    collection with them: missing records are created, existing ones
    (matched on resourceId) are updated.
    """
    pass


@cli.command()
@click.option("--dry-run", is_flag=True, help="Validate and show what would happen without committing.")
@click.option("--reset", is_flag=True, help="Clear collections and reseed from scratch.")
@click.option("--verbose", "-v", is_flag=True, help="Show a log line per record.")
@click.option(
    "--collection",
    "-c",
    type=str,
    default=None,
    help="Run only seeders whose collection name contains this (e.g. vocabulary).",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding the fixture files (default: data/seed).",
)
@click.option("--no-generate", is_flag=True, help="Skip generating the course data bundle.")
def seed(
    dry_run: bool,
    reset: bool,
    verbose: bool,
    collection: str | None,
    data_dir: Path | None,
    no_generate: bool,
) -> None:
    """Seed all course collections from the fixture files.

    Examples:

        latin-seeder seed                      # Normal seed

        latin-seeder seed --dry-run            # Validate without changes

        latin-seeder seed --reset --verbose    # Full reset with logging

        latin-seeder seed -c vocabulary        # Vocabulary only
    """
    options = SeedOptions(dry_run=dry_run, reset=reset, verbose=verbose, collection=collection)
    source_dir = data_dir or SEED_DATA_DIR
    print_header(options, source_dir)

    # Seeders connect lazily, so matching does not touch the backend
    if not build_seeders(collection):
        raise click.ClickException(
            f"No seeder matches collection: {collection}\n"
            f"Run 'latin-seeder list' to see available seeders."
        )

    seeders = build_seeders(collection, backend=_connect(), data_dir=data_dir)
    results = run_seeders(seeders, options)
    click.echo()

    if no_generate:
        pass
    elif dry_run:
        log_verbose("[DRY RUN] Would generate course data", options)
    else:
        log_info("Generating course data...")
        try:
            generate_course_data(source_dir / COURSE_DATA_PATH.name, options, data_dir=data_dir)
        except FixtureError as e:
            log_error(f"Failed to generate course data: {e}")

    print_summary(results, options)


@cli.command()
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Output path (default: data/seed/course_data.json).",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Directory holding the fixture files (default: data/seed).",
)
@click.option("--dry-run", is_flag=True, help="Build the bundle without writing it.")
def generate(output_path: Path | None, data_dir: Path | None, dry_run: bool) -> None:
    """Generate the course data bundle from the fixture files.

    Does not contact the backend.
    """
    options = SeedOptions(dry_run=dry_run, verbose=True)
    output = output_path or (data_dir / COURSE_DATA_PATH.name if data_dir else COURSE_DATA_PATH)

    try:
        stats = generate_course_data(output, options, data_dir=data_dir)
    except FixtureError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"{stats['modules']} modules, {stats['lessons']} lessons, "
        f"{stats['templates']} question templates"
    )
    if stats["written"]:
        click.echo(click.style(f"Written to: {stats['output']}", fg="green"))


@cli.command("list")
def list_seeders() -> None:
    """List seeders in the order they run."""
    click.echo(click.style("=== Seeders ===", bold=True))
    click.echo()
    for cls in SEEDER_CLASSES:
        note = "" if cls.resets_collection else " (never reset)"
        click.echo(f"  {cls.name:20} {cls.collection_name:30} <- {cls.fixture}{note}")


@cli.command()
def info() -> None:
    """Show backend settings and record counts per course collection."""
    try:
        settings = load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    click.echo(click.style("=== Backend Info ===", bold=True))
    click.echo()
    click.echo(f"URL: {settings.url}")
    click.echo(f"Admin: {settings.admin_email or '(not configured)'}")
    click.echo()

    backend = _connect()
    click.echo(click.style("Records:", bold=True))
    for name in schema.COURSE_COLLECTIONS:
        try:
            count = backend.count(name)
        except ClientResponseError as e:
            click.echo(f"  {name:30} " + click.style(f"error ({e.status})", fg="red"))
            continue
        click.echo(f"  {name:30} {count}")


@cli.command()
@click.argument("url")
def use(url: str) -> None:
    """Switch the seeder to a different PocketBase backend.

    Writes the URL to config.toml, which takes priority over environment
    variables. Use 'default' to remove the override.

    Examples:

        latin-seeder use http://localhost:8090

        latin-seeder use default
    """
    if url == "default":
        if clear_backend_url(CONFIG_TOML):
            click.echo("Removed backend override from config.toml")
        else:
            click.echo("No backend override in config.toml")
        return

    try:
        url = set_backend_url(url, CONFIG_TOML)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    click.echo(click.style(f"Switched to: {url}", fg="green"))
    click.echo(f"Config: {CONFIG_TOML.relative_to(PROJECT_ROOT)}")
