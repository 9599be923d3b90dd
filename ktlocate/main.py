import click
from .commands import classpath, config, doctor, locate, log, version


@click.group()
@click.option("--path", "-p", default=".", help="Directory holding ktlocate.toml.")
@click.pass_context
def cli(ctx, path):
    """Locate the Kotlin standard library without a build file."""
    ctx.obj = {"path": path}

cli.add_command(locate)
cli.add_command(classpath)
cli.add_command(doctor)
cli.add_command(config)
cli.add_command(log)
cli.add_command(version)

if __name__ == '__main__':
    cli()
