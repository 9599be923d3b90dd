import click
import json
from .. import config as config_module
from ..classpath import BackupClassPathResolver
from ..decorators import handle_exceptions

@click.command()
@click.pass_context
@handle_exceptions
def classpath(ctx):
    """Print the backup classpath as JSON."""
    settings = config_module.load_settings(path=ctx.obj["path"])
    resolver = BackupClassPathResolver(settings)
    result = resolver.classpath
    click.echo(json.dumps({
        "resolver": resolver.resolver_type,
        "entries": result.to_list(),
    }, indent=4))
