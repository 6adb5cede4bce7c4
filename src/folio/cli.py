"""Folio CLI interface.

Commands:
- init: Write folio.yaml and the default portfolio configuration
- render: Render the portfolio configuration to a standalone HTML document
- feedback: Append an event to the feedback log and print its reward
- themes: List theme palettes
- sections: List section ids in display order

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Any

import typer

from folio import __version__
from folio.config import FolioConfig, create_default_config, load_config
from folio.exceptions import ConfigValidationError, FolioError
from folio.utils.logging import configure_from_cli, get_logger

if TYPE_CHECKING:
    from folio.models import PortfolioConfig

app = typer.Typer(
    name="folio",
    help="Configuration-driven portfolio preview renderer",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: FolioConfig | None = None
_logger = get_logger()

CONFIG_FILE_NAME = "folio.yaml"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"folio {__version__}")
        raise typer.Exit()


def _get_config() -> FolioConfig:
    return _config if _config is not None else FolioConfig()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON log output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Folio - portfolio preview renderer.

    Renders a portfolio configuration (theme, sections, animations and
    content) into one standalone HTML document.
    """
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (OSError, ValueError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing files",
        ),
    ] = False,
) -> None:
    """Initialize Folio configuration.

    Creates folio.yaml and writes the default portfolio configuration to the
    configured store path.
    """
    from folio.models import default_config
    from folio.storage import ConfigStore

    config_file = Path(CONFIG_FILE_NAME)
    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    store_path = Path(_get_config().storage.config_path)
    if store_path.exists() and not force:
        _logger.info(f"Keeping existing portfolio configuration: {store_path}")
    else:
        try:
            ConfigStore(store_path).save(default_config())
        except FolioError as e:
            _logger.error(str(e))
            raise typer.Exit(1)

    typer.echo("\n✅ Folio configuration initialized")
    typer.echo(f"   Config: {config_file}")
    typer.echo(f"   Portfolio: {store_path}")


# =============================================================================
# render command
# =============================================================================


def _load_portfolio(input_path: Path | None, store_path: Path) -> "PortfolioConfig":
    """Load the portfolio configuration to render.

    An explicit input file must be valid; the store falls back to the default.
    """
    from folio.models import PortfolioConfig
    from folio.storage import ConfigStore

    if input_path is None:
        return ConfigStore(store_path).load()

    try:
        data = json.loads(input_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        _logger.error(f"Failed to read {input_path}: {e}")
        raise typer.Exit(1)

    try:
        return PortfolioConfig.from_dict(data)
    except ConfigValidationError as e:
        _logger.error(f"Invalid portfolio configuration: {input_path}")
        for problem in e.problems:
            _logger.error(f"  {problem}")
        raise typer.Exit(1)


@app.command()
def render(
    input: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="Portfolio configuration JSON (defaults to the configured store)",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output file path (overrides config)",
        ),
    ] = None,
    source: Annotated[
        Path | None,
        typer.Option(
            "--source",
            help="Also write the escaped source listing to this path",
        ),
    ] = None,
    code_view: Annotated[
        bool,
        typer.Option(
            "--code-view",
            help="Write the code view page instead of the visual document",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Preview output without writing files",
        ),
    ] = False,
) -> None:
    """Render a portfolio configuration to HTML.

    Exit codes:
        0: Document rendered successfully
        1: Invalid input or rendering error
    """
    from folio.templates import DocumentAssembler

    config = _get_config()
    portfolio = _load_portfolio(input, Path(config.storage.config_path))

    output_path = output or Path(config.output.path)
    source_path = source or (Path(config.output.source_path) if config.output.source_path else None)

    assembler = DocumentAssembler(config.render)

    try:
        if dry_run:
            preview = assembler.preview(portfolio, max_lines=40)
            typer.echo("\n--- Portfolio Preview ---\n")
            typer.echo(preview)
            typer.echo("\n--- End Preview ---")
            _logger.info("Dry run complete - no files written")
        else:
            rendered_path = assembler.render_to_file(
                portfolio,
                output_path,
                source_path=source_path,
                code_view=code_view,
            )
            typer.echo(f"\n📄 Portfolio written to: {rendered_path}")
            if source_path is not None:
                typer.echo(f"   Source: {source_path}")
    except FolioError as e:
        _logger.error(f"Rendering failed: {e}")
        raise typer.Exit(1)
    except OSError as e:
        _logger.error(f"Failed to write output: {e}")
        raise typer.Exit(1)


# =============================================================================
# feedback command
# =============================================================================


def _parse_details(pairs: list[str]) -> dict[str, Any]:
    """Parse key=value pairs; values are decoded as JSON when possible."""
    details: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got: {pair}", param_hint="--detail")
        try:
            details[key] = json.loads(raw)
        except json.JSONDecodeError:
            details[key] = raw
    return details


@app.command()
def feedback(
    event: Annotated[
        str,
        typer.Argument(help="Event name (e.g. like, keep_theme, publish)"),
    ],
    session: Annotated[
        str | None,
        typer.Option(
            "--session",
            "-s",
            help="Editing session id",
        ),
    ] = None,
    detail: Annotated[
        list[str] | None,
        typer.Option(
            "--detail",
            "-d",
            help="Event detail as key=value (repeatable, JSON values allowed)",
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output result as JSON",
        ),
    ] = False,
) -> None:
    """Log a feedback event and print its reward."""
    from folio.models import FeedbackEvent
    from folio.storage import FeedbackLog

    details = _parse_details(detail or [])

    try:
        feedback_event = FeedbackEvent.from_dict(
            {"event": event, "sessionId": session, "details": details}
        )
        reward = FeedbackLog(Path(_get_config().storage.feedback_path)).append(feedback_event)
    except FolioError as e:
        _logger.error(f"Failed to log feedback: {e}")
        raise typer.Exit(1)

    if json_output:
        result = {
            "success": True,
            "reward": reward,
            "message": f"Feedback logged: {feedback_event.event}",
        }
        typer.echo(json.dumps(result, indent=2))
    else:
        typer.echo(f"✅ Feedback logged: {feedback_event.event} (reward {reward:+d})")


# =============================================================================
# themes / sections commands
# =============================================================================


@app.command()
def themes(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output palettes as JSON",
        ),
    ] = False,
) -> None:
    """List available themes and their palettes."""
    from dataclasses import asdict

    from folio.engine.themes import DEFAULT_THEME, THEMES

    if json_output:
        data = {theme_id.value: asdict(palette) for theme_id, palette in THEMES.items()}
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo("\n🎨 Themes\n")
    for theme_id, palette in THEMES.items():
        marker = " (default)" if theme_id == DEFAULT_THEME else ""
        typer.echo(f"  {theme_id.value}{marker}")
        typer.echo(f"     └─ text {palette.text}, accent {palette.accent}, background {palette.background}")


@app.command()
def sections() -> None:
    """List section ids in display order."""
    from folio.models import SectionId

    typer.echo("\n📑 Sections (display order)\n")
    for index, section in enumerate(SectionId, start=1):
        typer.echo(f"  {index:2d}. {section.value:<13} {section.display_name} - {section.description}")


if __name__ == "__main__":
    app()
