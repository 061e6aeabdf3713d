"""Command-line interface for lifecycle-timeline.

# Configuration
Every option can also be given as an environment variable:
- CATALOG: Path or URL of the component catalog JSON (required)
- SITE_MAPPING: Path or URL of the site mapping JSON (optional)
- SECTION / FILTER / SITE: View selection
- WINDOW_START / WINDOW_END: Timeline span (default 2025-01-01 .. 2031-12-31)
- NOW: Reference date for status classification (default: today)
- OUTPUT_FORMAT / OUTPUT_FILE / CLAMP: Rendering
- LOG_LEVEL: Logging level (default: INFO)
- TELEMETRY / SENTRY_DSN: Opt-in error reporting
"""

import os
import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

import click
import sentry_sdk
from rich.table import Table
from rich.text import Text

from .. import __version__
from .._render import VALID_SINKS, OutputFormat
from ..catalog import load_catalog, load_site_mapping
from ..console import console, gha_error, gha_warning, print_banner, print_status_summary
from ..dates import coerce_date
from ..exceptions import CatalogLoadError, ConfigurationError, LifecycleTimelineError
from ..logging_config import logger, set_log_level
from ..models import (
    ALL_SITES,
    DEFAULT_WINDOW_END,
    DEFAULT_WINDOW_START,
    VALID_FILTERS,
    Catalog,
    SiteMapping,
    SupportWindow,
    ViewState,
)
from ..render import render_view
from ..view import build_view, default_section, site_summary

TOOL_VERSION = __version__

STATUS_STYLES = {
    "supported": "green",
    "extended": "yellow",
    "unsupported": "bold red",
}


def evaluate_boolean(value: str) -> bool:
    """
    Evaluate string values as boolean.

    Args:
        value: String value to evaluate

    Returns:
        Boolean result
    """
    return value.lower() in ["true", "yes", "yeah", "1"]


@dataclass
class Config:
    """Configuration settings for one CLI run."""

    catalog: str
    site_mapping: Optional[str] = None
    section: Optional[str] = None
    filter: str = "all"
    site: str = ALL_SITES
    output_format: OutputFormat = "html"
    output_file: Optional[str] = None
    window_start: str = DEFAULT_WINDOW_START.isoformat()
    window_end: str = DEFAULT_WINDOW_END.isoformat()
    now: Optional[str] = None
    clamp: bool = True

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not self.catalog:
            raise ConfigurationError("Catalog is not defined (use --catalog or CATALOG)")
        if self.filter not in VALID_FILTERS:
            raise ConfigurationError(f"Invalid filter '{self.filter}'. Expected one of: {', '.join(VALID_FILTERS)}")
        if self.output_format not in VALID_SINKS:
            raise ConfigurationError(
                f"Invalid output format '{self.output_format}'. Expected one of: {', '.join(sorted(VALID_SINKS))}"
            )
        # Surfaces date and ordering problems early
        self.support_window()
        self.reference_date()

    def support_window(self) -> SupportWindow:
        """
        Build the support window from the configured dates.

        Raises:
            ConfigurationError: If a date is invalid or the window is empty
        """
        try:
            return SupportWindow(coerce_date(self.window_start), coerce_date(self.window_end))
        except ValueError as e:
            raise ConfigurationError(f"Invalid support window: {e}")

    def reference_date(self) -> date:
        """
        Date statuses are computed against, captured once per run.

        Raises:
            ConfigurationError: If NOW is not a valid date
        """
        if not self.now:
            return date.today()
        try:
            return coerce_date(self.now)
        except ValueError as e:
            raise ConfigurationError(f"Invalid reference date: {e}")


def initialize_sentry() -> bool:
    """
    Initialize Sentry error reporting when explicitly enabled.

    Requires TELEMETRY=true and SENTRY_DSN. Returns whether Sentry was initialized.
    """
    if not evaluate_boolean(os.getenv("TELEMETRY", "false")):
        return False
    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        logger.debug("TELEMETRY is enabled but SENTRY_DSN is not set; skipping Sentry")
        return False

    def before_send(event, hint):
        """
        Filter events before sending to Sentry.
        Don't send configuration or catalog errors - these are user input errors.
        """
        if "exc_info" in hint:
            exc_type, exc_value, tb = hint["exc_info"]
            if isinstance(exc_value, (ConfigurationError, CatalogLoadError)):
                return None
        return event

    sentry_sdk.init(
        dsn=sentry_dsn,
        send_default_pii=False,
        traces_sample_rate=0.0,
        before_send=before_send,
    )
    return True


def _load_inputs(config: Config) -> tuple[Catalog, SiteMapping, ViewState]:
    """Load the catalog and mapping and resolve the view selection."""
    catalog = load_catalog(config.catalog)
    site_mapping = load_site_mapping(config.site_mapping)

    section = config.section or default_section(catalog)
    if section is None:
        raise ConfigurationError("Catalog has no sections")
    if section not in catalog:
        raise ConfigurationError(f"Unknown section '{section}'. Available sections: {', '.join(catalog)}")
    if config.site != ALL_SITES and config.site not in site_mapping:
        gha_warning(f"Site '{config.site}' is not in the site mapping; no components will match", title="Unknown site")

    return catalog, site_mapping, ViewState(section=section, filter=config.filter, site=config.site)


def run_render(config: Config) -> str:
    """
    Load inputs, build the view and render it.

    Returns:
        The rendered document (also written to config.output_file when set)

    Raises:
        LifecycleTimelineError: On configuration, loading or rendering failures
    """
    catalog, site_mapping, state = _load_inputs(config)
    view = build_view(
        catalog,
        site_mapping,
        state,
        window=config.support_window(),
        now=config.reference_date(),
        clamp=config.clamp,
    )
    document = render_view(view, config.output_format)

    if config.output_file:
        output_path = Path(config.output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        logger.info(f"Wrote {config.output_format} output to {output_path}")

    print_status_summary(view.counts, title=f"Support Status: {state.section}")
    return document


def _fail(error: LifecycleTimelineError) -> None:
    gha_error(str(error), title=type(error).__name__)
    sys.exit(1)


# ---------------------------------------------------------------------------
# Click commands
# ---------------------------------------------------------------------------

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

section_option = click.option("--section", envvar="SECTION", default=None, help="Catalog section to show.")
filter_option = click.option(
    "--filter",
    "status_filter",
    envvar="FILTER",
    default="all",
    show_default=True,
    type=click.Choice(VALID_FILTERS),
    help="Only list components with this status.",
)
site_option = click.option("--site", envvar="SITE", default=ALL_SITES, show_default=True, help="Restrict to one site.")


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(TOOL_VERSION, "--version", message="lifecycle-timeline %(version)s")
@click.option("--catalog", envvar="CATALOG", default=None, help="Path or URL of the component catalog JSON.")
@click.option("--site-mapping", envvar="SITE_MAPPING", default=None, help="Path or URL of the site mapping JSON.")
@click.option(
    "--window-start",
    envvar="WINDOW_START",
    default=DEFAULT_WINDOW_START.isoformat(),
    show_default=True,
    help="First day of the timeline.",
)
@click.option(
    "--window-end",
    envvar="WINDOW_END",
    default=DEFAULT_WINDOW_END.isoformat(),
    show_default=True,
    help="Last day of the timeline.",
)
@click.option("--now", envvar="NOW", default=None, help="Reference date for status (default: today).")
@click.option("--log-level", envvar="LOG_LEVEL", default="INFO", show_default=True, help="Logging level.")
@click.pass_context
def cli(ctx, catalog, site_mapping, window_start, window_end, now, log_level):
    """Render support-lifecycle timelines for infrastructure components."""
    try:
        set_log_level(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    ctx.ensure_object(dict)
    ctx.obj.update(
        catalog=catalog,
        site_mapping=site_mapping,
        window_start=window_start,
        window_end=window_end,
        now=now,
    )

    if ctx.invoked_subcommand is None:
        print_banner(TOOL_VERSION)
        click.echo(ctx.get_help())
        return

    initialize_sentry()


def build_config(obj: dict, **overrides) -> Config:
    """Merge group-level options with command options and validate."""
    config = Config(
        catalog=obj.get("catalog") or "",
        site_mapping=obj.get("site_mapping"),
        window_start=obj.get("window_start") or DEFAULT_WINDOW_START.isoformat(),
        window_end=obj.get("window_end") or DEFAULT_WINDOW_END.isoformat(),
        now=obj.get("now"),
        **overrides,
    )
    config.validate()
    return config


@cli.command()
@section_option
@filter_option
@site_option
@click.option(
    "--format",
    "output_format",
    envvar="OUTPUT_FORMAT",
    default="html",
    show_default=True,
    type=click.Choice(sorted(VALID_SINKS)),
    help="Output format.",
)
@click.option("--output", "-o", "output_file", envvar="OUTPUT_FILE", default=None, help="Write output to this file.")
@click.option(
    "--clamp/--no-clamp",
    default=None,
    help="Keep timeline bars inside the window when support ends outside it. [env: CLAMP, default: clamp]",
)
@click.pass_obj
def render(obj, section, status_filter, site, output_format, output_file, clamp):
    """Render the timeline for a section as HTML, a terminal table or JSON."""
    if clamp is None:
        clamp = evaluate_boolean(os.getenv("CLAMP", "True"))
    try:
        config = build_config(
            obj,
            section=section,
            filter=status_filter,
            site=site,
            output_format=output_format,
            output_file=output_file,
            clamp=clamp,
        )
        document = run_render(config)
    except LifecycleTimelineError as e:
        _fail(e)
        return

    if not config.output_file:
        click.echo(document)


@cli.command()
@section_option
@filter_option
@site_option
@click.pass_obj
def status(obj, section, status_filter, site):
    """List components of a section with their current support status."""
    try:
        config = build_config(obj, section=section, filter=status_filter, site=site)
        catalog, site_mapping, state = _load_inputs(config)
        view = build_view(catalog, site_mapping, state, window=config.support_window(), now=config.reference_date())
    except LifecycleTimelineError as e:
        _fail(e)
        return

    table = Table(title=f"{state.section} as of {view.now.isoformat()}", show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Component")
    table.add_column("Status")
    for group in view.groups:
        for row in group.rows:
            label = Text(row.status.value, style=STATUS_STYLES[row.status.value])
            table.add_row(group.label, row.component.component, label)

    console.print(table)
    print_status_summary(view.counts)


@cli.command()
@click.pass_obj
def sites(obj):
    """List the sites of the site mapping with component counts per section."""
    try:
        config = build_config(obj)
        catalog = load_catalog(config.catalog)
        site_mapping = load_site_mapping(config.site_mapping)
    except LifecycleTimelineError as e:
        _fail(e)
        return

    if not site_mapping:
        gha_warning("No sites defined", title="Site mapping")
        return

    table = Table(title="Sites", show_header=True, header_style="bold")
    table.add_column("Site", style="cyan")
    table.add_column("Section")
    table.add_column("Components", justify="right")
    for site_name, per_section in site_summary(catalog, site_mapping).items():
        if not per_section:
            table.add_row(site_name, "-", "0")
        for section_name, count in per_section.items():
            table.add_row(site_name, section_name, str(count))

    console.print(table)


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
