import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of ktlocate."""
    try:
        ver = importlib.metadata.version("ktlocate")
        click.echo(f"ktlocate version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of ktlocate. Is it installed correctly?")
