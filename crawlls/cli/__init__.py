"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from ._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        sys.stderr.write("\ncrawlls stopped.\n")
        return 0
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0
