# Copyright 2026 Pennyworth Technologies, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""counterkit CLI - count items and aggregate weighted pairs."""

import json
import logging
from pathlib import Path
from typing import IO, Any

import click
from rich.console import Console
from rich.markup import escape

from counterkit import __version__
from counterkit.arithmetic import CounterOp, apply
from counterkit.config import (
    ConfigLoadError,
    ConfigValidationError,
    CounterkitConfig,
    VALID_COUNT_TYPES,
    VALID_LOG_LEVELS,
    VALID_OUTPUT_FORMATS,
    get_config,
)
from counterkit.counter import Counter
from counterkit.numeric import resolve_count_type
from counterkit.renderers import OutputFormat, render_result
from counterkit.results import CountResult
from counterkit.sources import (
    DOCUMENT_SUFFIXES,
    VALID_SPLIT_MODES,
    SourceError,
    iter_items,
    load_pairs_text,
)

logger = logging.getLogger(__name__)

console = Console()

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _error(message: str) -> None:
    """Print an error line and exit with status 1."""
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(1)


def _configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("counterkit").setLevel(numeric_level)


def _load_config(ctx: click.Context) -> CounterkitConfig:
    """Return the validated configuration, exiting on config errors."""
    if ctx.obj.get("config_error"):
        _error(ctx.obj["config_error"])
    config = ctx.obj["config"]
    try:
        config.validate()
    except ConfigValidationError as e:
        _error(str(e))
    return config


def output_result(result: CountResult, ctx: click.Context) -> None:
    """Output a result in the selected format.

    JSON goes to stdout for piping; text is a rich table.
    """
    output_format = OutputFormat(ctx.obj["output_format"])
    rendered = render_result(result, format=output_format)
    if output_format == OutputFormat.JSON:
        print(rendered)
    else:
        print(rendered, end="")


def _read_text(source: IO[str]) -> str:
    try:
        return source.read()
    except UnicodeDecodeError as e:
        _error(f"{source.name}: not valid UTF-8 text ({e.reason} at byte {e.start})")


def _read_pairs(source: IO[str], count_type: Any, document: bool = False) -> list:
    is_document = document or Path(source.name).suffix.lower() in DOCUMENT_SUFFIXES
    try:
        pairs = load_pairs_text(_read_text(source), count_type, document=is_document)
    except SourceError as e:
        _error(f"{source.name}: {e}")
    logger.info(f"Read {len(pairs)} pairs from {source.name}")
    return pairs


@click.group()
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(VALID_OUTPUT_FORMATS),
    default=None,
    help="Output format: json (default) or text",
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: WARNING)",
)
@click.pass_context
def main(
    ctx: click.Context,
    quiet: bool,
    output_format: str | None,
    log_level: str | None,
) -> None:
    """counterkit - count items and sum weighted pairs."""
    ctx.ensure_object(dict)

    try:
        config = get_config()
        ctx.obj["config_error"] = None
    except (ConfigLoadError, ConfigValidationError) as e:
        config = CounterkitConfig()
        ctx.obj["config_error"] = str(e)

    # CLI flags beat every config source
    if quiet:
        config.defaults.quiet = True
    if output_format is not None:
        config.defaults.output_format = output_format
    if log_level is not None:
        config.defaults.log_level = log_level.upper()

    ctx.obj["config"] = config
    ctx.obj["quiet"] = config.defaults.quiet
    ctx.obj["output_format"] = (
        config.defaults.output_format
        if config.defaults.output_format in VALID_OUTPUT_FORMATS
        else "json"
    )

    level = config.defaults.log_level
    level = level.upper() if isinstance(level, str) else ""
    _configure_logging(level if level in VALID_LOG_LEVELS else "WARNING")


@main.command()
def version() -> None:
    """Show version."""
    console.print(f"counterkit {__version__}")


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--split", type=click.Choice(VALID_SPLIT_MODES), default=None, help="How to split input into items")
@click.option("--ignore-case", "-i", is_flag=True, help="Case-fold items before counting")
@click.option("--top", "-n", type=click.IntRange(min=1), default=None, help="Only report the N most common items")
@click.option("--count-type", "-t", type=click.Choice(VALID_COUNT_TYPES), default=None, help="Numeric type of counts")
@click.pass_context
def count(
    ctx: click.Context,
    source: IO[str],
    split: str | None,
    ignore_case: bool,
    top: int | None,
    count_type: str | None,
) -> None:
    """Count occurrences of each item in SOURCE (stdin by default)."""
    config = _load_config(ctx)

    split = split or config.counting.split
    case_sensitive = config.counting.case_sensitive and not ignore_case
    number_type = resolve_count_type(count_type or config.defaults.count_type)

    items = iter_items(_read_text(source), split=split, case_sensitive=case_sensitive)
    counter = Counter.from_items(items, number_type)
    logger.info(f"Counted {len(counter)} distinct items from {source.name}")

    result = CountResult.from_counter(
        counter,
        operation="count",
        source=source.name,
        top=top or config.counting.top,
        ordered=config.counting.ordered,
    )
    output_result(result, ctx)


@main.command("sum")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--yaml", "as_document", is_flag=True, help="Parse SOURCE as a YAML/JSON document")
@click.option("--top", "-n", type=click.IntRange(min=1), default=None, help="Only report the N largest totals")
@click.option("--count-type", "-t", type=click.Choice(VALID_COUNT_TYPES), default=None, help="Numeric type of counts")
@click.pass_context
def sum_pairs(
    ctx: click.Context,
    source: IO[str],
    as_document: bool,
    top: int | None,
    count_type: str | None,
) -> None:
    """Sum (item, count) pairs from SOURCE (stdin by default).

    Text input has one "item count" pair per line. Files ending in .yaml,
    .yml or .json (or any input with --yaml) hold a list of pairs.
    """
    config = _load_config(ctx)
    number_type = resolve_count_type(count_type or config.defaults.count_type)

    pairs = _read_pairs(source, number_type, document=as_document)
    counter = Counter.from_pairs(pairs, number_type)

    result = CountResult.from_counter(
        counter,
        operation="sum",
        source=source.name,
        top=top or config.counting.top,
        ordered=config.counting.ordered,
    )
    output_result(result, ctx)


@main.command()
@click.argument("left", type=click.File("r", encoding="utf-8"))
@click.argument("right", type=click.File("r", encoding="utf-8"))
@click.option(
    "--op", "op",
    type=click.Choice([op.value for op in CounterOp]),
    required=True,
    help="add: sum, sub: positive difference, and: minimum, or: maximum",
)
@click.option("--top", "-n", type=click.IntRange(min=1), default=None, help="Only report the N largest results")
@click.option("--count-type", "-t", type=click.Choice(VALID_COUNT_TYPES), default=None, help="Numeric type of counts")
@click.pass_context
def combine(
    ctx: click.Context,
    left: IO[str],
    right: IO[str],
    op: str,
    top: int | None,
    count_type: str | None,
) -> None:
    """Combine two pair files with a counter operation."""
    config = _load_config(ctx)
    number_type = resolve_count_type(count_type or config.defaults.count_type)

    left_counter = Counter.from_pairs(_read_pairs(left, number_type), number_type)
    right_counter = Counter.from_pairs(_read_pairs(right, number_type), number_type)
    combined = apply(CounterOp(op), left_counter, right_counter)
    logger.info(f"{op}: {len(left_counter)} and {len(right_counter)} items -> {len(combined)}")

    result = CountResult.from_counter(
        combined,
        operation=op,
        source=f"{left.name} {op} {right.name}",
        top=top or config.counting.top,
        ordered=config.counting.ordered,
    )
    output_result(result, ctx)


@main.group()
def config() -> None:
    """Configuration management."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show effective configuration (merged from all sources).

    Output is JSON format for easy parsing.
    """
    effective = _load_config(ctx)
    print(json.dumps(effective.to_dict(), indent=2))


@config.command("init")
@click.option("--global", "is_global", is_flag=True, help="Create global config at ~/.counterkit_config.json")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config file")
@click.pass_context
def config_init(ctx: click.Context, is_global: bool, force: bool) -> None:
    """Initialize a configuration file with template.

    By default, creates project config .counterkit.json in the current
    directory. Use --global to create ~/.counterkit_config.json instead.
    """
    from counterkit.config import (
        generate_config_template_string,
        get_global_config_path,
        get_project_config_path,
    )

    config_path = get_global_config_path() if is_global else get_project_config_path()

    if config_path.exists() and not force:
        console.print(f"[red]Error:[/red] Config file already exists: {config_path}", soft_wrap=True)
        console.print("Use --force to overwrite")
        raise SystemExit(1)

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_template_string())

    if not ctx.obj["quiet"]:
        console.print(f"[green]Created config file:[/green] {config_path}")


@config.command("validate")
@click.pass_context
def config_validate(ctx: click.Context) -> None:
    """Validate configuration files.

    Checks both global and project config files for:
    - Valid JSON syntax
    - Valid field names (no unknown fields)
    - Valid values (count types, formats, etc.)

    Exits with code 0 if valid, non-zero if errors found.
    """
    from counterkit.config import (
        get_global_config_path,
        get_project_config_path,
        load_config_file,
    )

    errors = []
    validated = []

    for label, path in (
        ("Global config", get_global_config_path()),
        ("Project config", get_project_config_path()),
    ):
        if not path.exists():
            continue
        try:
            loaded = load_config_file(path, strict=True)
            loaded.validate()
            validated.append(f"{label}: {path}")
        except (ConfigLoadError, ConfigValidationError) as e:
            errors.append(f"{label} ({path}): {e}")

    for v in validated:
        console.print(f"[green]Valid:[/green] {escape(v)}", soft_wrap=True)

    if errors:
        for e in errors:
            console.print(f"[red]Error:[/red] {escape(e)}", soft_wrap=True)
        raise SystemExit(1)

    if ctx.obj["quiet"]:
        return
    if not validated:
        console.print("[dim]No config files found to validate[/dim]")
    else:
        console.print("\n[green]All config files are valid![/green]")


if __name__ == "__main__":
    main()
