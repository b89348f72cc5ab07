import importlib.metadata

import typer

from devinfo.internal.logging import get_logger

logger = get_logger(__name__)


def version():
    """
    Show the devinfo version.
    """
    try:
        package_version = importlib.metadata.version("devinfo")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("devinfo is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("devinfo package version not found.")
        raise typer.Exit(1)
    typer.echo(f"devinfo version: {package_version}")


if __name__ == "__main__":
    typer.run(version)
