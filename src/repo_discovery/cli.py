"""CLI for repo-discovery."""

import asyncio
import json
import sys

import click
import structlog

from repo_discovery.config.logging import configure_logging
from repo_discovery.core.exceptions import RepoDiscoveryError

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


def _fail(error: RepoDiscoveryError) -> None:
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """repo-discovery: resolve the repositories a run operates on."""
    from repo_discovery.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.argument("config_path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--platform", "-p", help="Platform name (github, static, local)")
@click.option("--autodiscover/--no-autodiscover", default=None, help="Enable autodiscovery")
@click.option("--filter", "-f", "filters", multiple=True, help="Include pattern (glob or /regex/)")
@click.option("--exclude", "-e", multiple=True, help="Exclude pattern (glob or /regex/)")
@click.option("--topic", "-t", multiple=True, help="Only repositories with this topic")
@click.option("--namespace", "-n", multiple=True, help="Only repositories in this namespace")
@click.option("--include-mirrors/--no-include-mirrors", default=None, help="Include mirrors")
@click.option(
    "--from-file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the repository listing from a JSON file instead of the platform",
)
def discover(
    config_path: str | None,
    platform: str | None,
    autodiscover: bool | None,
    filters: tuple[str, ...],
    exclude: tuple[str, ...],
    topic: tuple[str, ...],
    namespace: tuple[str, ...],
    include_mirrors: bool | None,
    from_file: str | None,
) -> None:
    """Resolve and print the repositories to operate on.

    CONFIG_PATH is an optional JSON run configuration. Command line options
    take precedence over values from the file.
    """
    from repo_discovery.config.loader import load_run_config
    from repo_discovery.config.settings import get_settings
    from repo_discovery.discovery import autodiscover_repositories
    from repo_discovery.platforms import StaticPlatform, create_platform

    settings = get_settings()

    async def _discover():
        config = load_run_config(
            config_path,
            platform=platform,
            autodiscover=autodiscover,
            autodiscover_filter=list(filters) or None,
            autodiscover_exclusions=list(exclude) or None,
            autodiscover_topics=list(topic) or None,
            autodiscover_namespaces=list(namespace) or None,
            include_mirrors=include_mirrors,
            defaults={"platform": settings.platform},
        )

        if from_file:
            listing = StaticPlatform.from_file(from_file)
        else:
            listing = create_platform(settings, platform=config.platform)

        return await autodiscover_repositories(config, listing)

    try:
        result = run_async(_discover())
    except RepoDiscoveryError as e:
        _fail(e)

    click.echo(json.dumps(result.dump_repositories(), indent=2))


@cli.command()
@click.argument("pattern")
@click.argument("names", nargs=-1, required=True)
def match(pattern: str, names: tuple[str, ...]) -> None:
    """Show which NAMES a single filter PATTERN selects."""
    from repo_discovery.filters import apply_filter, is_regex_pattern

    try:
        selected = apply_filter(list(names), pattern)
    except RepoDiscoveryError as e:
        _fail(e)

    kind = "regex" if is_regex_pattern(pattern) else "glob"
    click.echo(f"Pattern {pattern!r} ({kind}) matched {len(selected)} of {len(names)}:")
    for name in selected:
        click.echo(f"  - {name}")


if __name__ == "__main__":
    cli()
