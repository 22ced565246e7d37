"""NEO analyzer CLI tool.

Fetches one NEO per date from NASA NeoWs (falling back to a saved JSON feed)
and prints its physical properties, combines two of them, or lists the
planets.
"""

import sys

import click

from ..bodies import bodies_table, combine_asteroids, load_planets
from ..configs import DEFAULT_FALLBACK_FILE
from ..exceptions import NeoRecordError
from ..logging import set_log_level
from ..neorecord import parse_neo_record, select_neo
from ..neows import get_api_key, get_neo_feed


def _fail(msg):
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_asteroid(date, api_key, fallback, index=0):
    """Fetch, select and parse the NEO of `date`; exit with status 1 on failure."""
    try:
        feed = get_neo_feed(date, api_key, fallback=fallback)
        record = select_neo(feed, date, index=index)
    except (RuntimeError, ValueError, OSError) as e:
        _fail(e)

    if not record:
        _fail(f"No asteroid found for {date}.")

    try:
        return parse_neo_record(record)
    except NeoRecordError as e:
        _fail(f"Error creating Asteroid object: {e}")


@click.group(name="neo-analyzer")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level of the neoanalyzer package.",
)
@click.option(
    "--env-file",
    default=".env",
    show_default=True,
    type=click.Path(dir_okay=False),
    help="dotenv file providing API_KEY.",
)
@click.pass_context
def cli(ctx, log_level, env_file):
    """Analyze near-Earth objects and planets."""
    set_log_level(log_level.upper())
    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file


def _api_key(ctx):
    api_key = get_api_key(ctx.obj["env_file"])
    if not api_key:
        _fail("API key is missing. Please set the API_KEY environment variable.")
    return api_key


@cli.command(name="info")
@click.argument("date")
@click.option("--index", default=0, show_default=True, help="Which NEO of the date to use.")
@click.option(
    "--fallback",
    default=DEFAULT_FALLBACK_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Saved NeoWs feed used when the API cannot be reached.",
)
@click.pass_context
def info_cli(ctx, date, index, fallback):
    """Print all information about the NEO of DATE (YYYY-MM-DD).

    Examples::

        neo-analyzer info 2024-06-01
        neo-analyzer --log-level INFO info 2024-06-01 --index 2
    """
    asteroid = _load_asteroid(date, _api_key(ctx), fallback, index=index)
    click.echo("--- Asteroid Information ---")
    click.echo(asteroid.format_info())


@cli.command(name="combine")
@click.argument("date1")
@click.argument("date2")
@click.option(
    "--fallback",
    default=DEFAULT_FALLBACK_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Saved NeoWs feed used when the API cannot be reached.",
)
@click.pass_context
def combine_cli(ctx, date1, date2, fallback):
    """Combine the NEOs of DATE1 and DATE2 into one synthetic asteroid.

    Identity fields (ID, URL, H, date) come from the DATE1 asteroid.
    """
    api_key = _api_key(ctx)
    first = _load_asteroid(date1, api_key, fallback)
    second = _load_asteroid(date2, api_key, fallback)

    click.echo("--- Asteroid Information ---")
    click.echo(first.format_info())
    click.echo("\n--- Second Asteroid Information ---")
    click.echo(second.format_info())
    click.echo("\n--- Combined Asteroid Information ---")
    click.echo(combine_asteroids(first, second).format_info())


@cli.command(name="planets")
def planets_cli():
    """Print the predefined planets with surface gravity and escape velocity."""
    table = bodies_table(load_planets())
    click.echo(table.to_string(index=False))


if __name__ == "__main__":
    cli()
