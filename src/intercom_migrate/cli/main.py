"""Main CLI entry point for the Intercom migration tool."""

import sys
import json
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config.config import Config
from ..differ import IntercomZendeskDiffer
from ..models.action import Action
from ..models.intercom import SourceEntity, parse_source_entity
from ..models.zendesk import ZendeskRecord
from ..utils.logging import setup_logging

console = Console()

DEFAULT_CONFIG_PATHS = ['intercom-migrate.yaml', '.intercom-migrate.yaml']


@click.group()
@click.version_option(version=__version__, prog_name='intercom-migrate')
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=True),
    help='Path to configuration file',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose logging',
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], verbose: bool) -> None:
    """Intercom Migration Tool - Work out the Zendesk actions needed to migrate Intercom users, admins and conversations."""
    ctx.ensure_object(dict)

    if config:
        ctx.obj['config_path'] = config
    ctx.obj['verbose'] = verbose

    # Basic logging until the config file is read
    setup_logging('DEBUG' if verbose else 'WARNING')


@cli.command()
@click.option(
    '--output',
    '-o',
    default='intercom-migrate.yaml',
    help='Output configuration file path',
)
@click.pass_context
def init(ctx: click.Context, output: str) -> None:
    """Initialize a new configuration file."""
    console.print(
        Panel.fit(
            '[bold green]Intercom Migration Tool[/bold green]\n'
            'Initializing configuration...',
            border_style='green',
        )
    )

    try:
        Config.create_template(output)

        console.print(f'[green]✓[/green] Configuration template created at: {output}')

    except Exception as e:
        console.print(f'[red]✗[/red] Failed to create configuration: {e}')
        sys.exit(1)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--format',
    '-f',
    'output_format',
    type=click.Choice(['json', 'table']),
    default=None,
    help='Output format (defaults to the configured one)',
)
@click.pass_context
def diff(ctx: click.Context, input_file: str, output_format: Optional[str]) -> None:
    """Print the actions needed for each comparison in INPUT_FILE.

    INPUT_FILE is YAML or JSON holding either a single ``source`` /
    ``destination`` pair or a list of them under ``comparisons``.
    """
    try:
        config = _load_config(ctx)
        _setup_logging_with_config(ctx, config)

        comparisons = _load_comparisons(input_file)
        differ = IntercomZendeskDiffer()
        results = [
            (source, differ.diff(source, destination))
            for source, destination in comparisons
        ]

        if (output_format or config.output.format) == 'table':
            _display_actions(results)
        else:
            payload = [action.to_dict() for _, actions in results for action in actions]
            click.echo(json.dumps(payload, indent=config.output.indent, default=str))

    except Exception as e:
        console.print(f'[red]✗[/red] Diff failed: {e}')
        if ctx.obj.get('verbose'):
            console.print_exception()
        sys.exit(1)


def _load_config(ctx: click.Context) -> Config:
    """Load configuration from file or environment."""
    config_path = ctx.obj.get('config_path')

    if config_path:
        return Config.from_file(config_path)

    for path in DEFAULT_CONFIG_PATHS:
        if Path(path).exists():
            return Config.from_file(path)

    return Config.from_env()


def _setup_logging_with_config(ctx: click.Context, config: Config) -> None:
    """Setup logging with configuration from config file."""
    verbose = ctx.obj.get('verbose', False)

    # Verbose flag overrides the configured level
    log_level = 'DEBUG' if verbose else config.logging.level

    setup_logging(
        level=log_level, log_file=config.logging.file, log_format=config.logging.format
    )


def _load_comparisons(
    input_file: str,
) -> List[Tuple[SourceEntity, Optional[ZendeskRecord]]]:
    """Read source/destination pairs from a YAML or JSON file."""
    with open(input_file, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict) and 'comparisons' in data:
        entries = data['comparisons'] or []
    elif isinstance(data, dict) and 'source' in data:
        entries = [data]
    else:
        raise ValueError(
            f'{input_file} must contain "source" or a "comparisons" list'
        )

    comparisons = []
    for entry in entries:
        destination: Optional[Dict[str, Any]] = entry.get('destination')
        comparisons.append(
            (
                parse_source_entity(entry['source']),
                ZendeskRecord(**destination) if destination else None,
            )
        )
    return comparisons


def _display_actions(results: List[Tuple[SourceEntity, List[Action]]]) -> None:
    """Display actions as a table."""
    table = Table(title='Migration Actions')
    table.add_column('Kind', style='cyan')
    table.add_column('Intercom ID', style='blue')
    table.add_column('Action', style='green')
    table.add_column('Details', style='white')

    for source, actions in results:
        if not actions:
            table.add_row(source.kind, source.reference.value, '-', 'up to date')
        for action in actions:
            table.add_row(
                source.kind,
                source.reference.value,
                action.name,
                _summarize(action),
            )

    console.print(table)


def _summarize(action: Action) -> str:
    if action.name == 'reference':
        return f'zendesk id {action.details}'
    if action.name == 'import_user':
        return f'{action.details.name} <{action.details.email}>'
    return (
        f'{action.details.status}, {len(action.details.comments)} comments: '
        f'{action.details.subject}'
    )


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print('\n[red]Interrupted by user[/red]')
        sys.exit(1)
    except Exception as e:
        console.print(f'[red]Error: {e}[/red]')
        sys.exit(1)


if __name__ == '__main__':
    main()
