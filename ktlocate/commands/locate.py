import click
from .. import config as config_module
from ..classpath import ArtifactCoordinate, BackupClassPathResolver, KOTLIN_STDLIB
from ..cli_logger import logger
from ..decorators import handle_exceptions

@click.command()
@click.option("--group", "-g", default=KOTLIN_STDLIB.group, show_default=True, help="Group of the artifact to look for.")
@click.option("--artifact", "-a", default=KOTLIN_STDLIB.artifact_name, show_default=True, help="Name of the artifact to look for.")
@click.pass_context
@handle_exceptions
def locate(ctx, group, artifact):
    """Find a library jar in the local Maven/Gradle caches or next to kotlinc."""
    settings = config_module.load_settings(path=ctx.obj["path"])
    resolver = BackupClassPathResolver(settings)
    coordinate = ArtifactCoordinate(group, artifact)

    logger.info(f"Looking for {coordinate}...")
    resolved = resolver.find_library(coordinate)
    if resolved is None:
        logger.warning(f"{coordinate} was not found. Install kotlinc or build a project that depends on it once.")
        ctx.exit(1)

    logger.success(f"Found {coordinate}")
    click.echo(resolved)
