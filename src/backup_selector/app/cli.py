"""Command-line interface for backup-selector."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import click
from pydantic import ValidationError

from backup_selector.config import AppConfig, load_config
from backup_selector.core.collection import ItemCollection
from backup_selector.core.engine import EnumerationEngine
from backup_selector.core.options import FilterMode, SelectionOptions
from backup_selector.exceptions import BackupSelectorError
from backup_selector.utils.formatting import format_size, parse_size
from backup_selector.utils.logging import configure_logging, scan_context

try:
    __version__ = version("backup-selector")
except PackageNotFoundError:
    __version__ = "unknown"


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Args:
        ctx: Click context (required by Click callback signature)
        param: Click parameter (required by Click callback signature)
        value: Log level value to validate

    Returns:
        Normalized log level (uppercase)

    Raises:
        click.BadParameter: If validation fails
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()

    valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    if normalized_value not in valid_levels:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(valid_levels))}'
        )

    return normalized_value


def validate_size(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> int | None:
    """Parse a size option such as ``10M`` into bytes."""
    if value is None:
        return value

    try:
        return parse_size(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def build_options(
    config: AppConfig,
    root: Path | None,
    overrides: dict[str, object],
) -> SelectionOptions:
    """Merge configuration defaults with command-line overrides.

    Args:
        config: Loaded configuration (may carry default selection options)
        root: Scan root given on the command line
        overrides: Options given on the command line, None values ignored

    Returns:
        Validated selection options

    Raises:
        click.UsageError: If no root is available or the merged options are invalid
    """
    values: dict[str, object] = (
        config.selection.model_dump(exclude_none=True) if config.selection is not None else {}
    )
    if root is not None:
        values["root"] = root
    values.update({key: value for key, value in overrides.items() if value is not None})

    if values.get("root") is None:
        raise click.UsageError("ROOT is required when the configuration has no selection.root")

    try:
        return SelectionOptions.model_validate(values)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e


@click.command()
@click.argument('root', required=False, type=click.Path(path_type=Path))
@click.option(
    '--config', '-c',
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help='YAML configuration file with default selection options.'
)
@click.option(
    '--archive/--directory',
    default=None,
    help='Treat ROOT as a zip archive or as a directory tree.'
)
@click.option(
    '--recursive/--no-recursive', '-r',
    default=None,
    help='Include files in subfolders.'
)
@click.option(
    '--extensions', '-e',
    type=str,
    default=None,
    help='Comma separated extension list, e.g. ".txt,.md". Empty text disables the filter.'
)
@click.option(
    '--exclude/--include',
    default=None,
    help='Drop the listed extensions instead of keeping only them.'
)
@click.option(
    '--size-limit', '-s',
    type=str,
    default=None,
    callback=validate_size,
    help='Skip files larger than this size (e.g. 500K, 10M). 0 means unlimited.'
)
@click.option(
    '--count-limit', '-n',
    type=click.IntRange(min=0),
    default=None,
    help='Stop after this many files. 0 means unlimited.'
)
@click.option(
    '--log-level', '-l',
    type=str,
    default=None,
    callback=validate_log_level,
    help='Logging verbosity level (DEBUG, INFO, WARNING, ERROR, CRITICAL).'
)
@click.version_option(version=__version__, prog_name='backup-selector')
def cli(
    root: Path | None,
    config: Path | None,
    archive: bool | None,
    recursive: bool | None,
    extensions: str | None,
    exclude: bool | None,
    size_limit: int | None,
    count_limit: int | None,
    log_level: str | None,
) -> None:
    """List the files of ROOT that would be selected for a backup.

    Files are printed as they are found, followed by a summary line.

    Examples:

        # Text and markdown files of a folder tree
        backup-selector ~/notes --recursive --extensions ".txt,.md"

        # Top-level entries of an archive, at most 100 files of up to 10 MB
        backup-selector photos.zip --archive --count-limit 100 --size-limit 10M
    """
    try:
        app_config = load_config(config) if config is not None else AppConfig()
    except BackupSelectorError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(log_level=log_level or app_config.application.log_level)

    overrides: dict[str, object] = {
        "archive_root": archive,
        "include_subfolders": recursive,
        "extension_filters": extensions,
        "filter_mode": None if exclude is None else (FilterMode.EXCLUDE if exclude else FilterMode.INCLUDE),
        "size_limit": size_limit,
        "count_limit": count_limit,
    }
    options = build_options(app_config, root, overrides)

    collection = ItemCollection()
    engine = EnumerationEngine(collection)
    with scan_context():
        try:
            for item in engine.enumerate(options):
                click.echo(f"{format_size(item.size):>12}  {item.full_name}")
        except BackupSelectorError as e:
            raise click.ClickException(str(e)) from e

    click.echo(f"{collection.count} file(s) selected, {format_size(collection.total_size)} total")


def main() -> None:
    """Console script entry point."""
    cli()
