"""Command-line entry points; the typer application is ``cli.app.app``."""
