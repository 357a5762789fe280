"""Create the crawlls Typer app."""

from pathlib import Path

import typer

from ._build_config import _build_config
from ._run_server import _run_server


def _create_app() -> typer.Typer:
    """Create and configure the CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="crawlls - go to definition on a link opens a cached markdown copy of the page",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def serve(
        cache_dir: Path | None = typer.Option(None, "--cache-dir", help="Directory for cached markdown"),
        config_file: Path | None = typer.Option(None, "--config", help="JSON configuration file"),
        log_level: str | None = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
        log_file: Path | None = typer.Option(None, "--log-file", help="Rotating log file"),
    ) -> None:
        """Run the language server over stdin/stdout."""
        try:
            config = _build_config(cache_dir, config_file, log_level, log_file)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2) from e
        _run_server(config)

    return app
