"""
Simple CLI to scrape a note without running the API server.
"""
from __future__ import annotations

import logging
import sys

import click

from app_utils import error_payload, pretty_json, success_payload
from rednote import PageFetcher, RedNoteError, RedNoteScraper, is_valid_rednote_url, load_settings


@click.group()
@click.option("--verbose", is_flag=True, help="Log fetch details to stderr.")
def cli(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@cli.command()
@click.argument("url")
@click.option("--timeout", type=click.IntRange(min=1), default=None, help="Fetch timeout in seconds.")
def scrape(url: str, timeout):
    """Fetch URL and print the extracted metadata as JSON."""
    fetcher_settings = load_settings().fetcher
    if timeout is not None:
        fetcher_settings.timeout = timeout
    fetcher = PageFetcher(fetcher_settings)
    try:
        result = RedNoteScraper(fetcher).scrape(url)
    except RedNoteError as exc:
        click.echo(pretty_json(error_payload(str(exc))))
        sys.exit(1)
    finally:
        fetcher.close()
    click.echo(pretty_json(success_payload(result)))


@cli.command()
@click.argument("url")
def validate(url: str):
    """Print whether URL would be accepted by the API."""
    click.echo("true" if is_valid_rednote_url(url) else "false")


if __name__ == "__main__":  # pragma: no cover
    cli()
