import click
import os
from .. import config as config_module
from ..classpath import BackupClassPathResolver, KOTLIN_STDLIB
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..utils import find_command_on_path, run_shell_command, try_resolving

def _report_location(label, path):
    if os.path.isdir(path):
        logger.step_info(f"{label}: {path}", indent=2)
    else:
        logger.warning(f"{label}: {path} (missing)")

def _report_kotlinc():
    kotlinc = find_command_on_path("kotlinc")
    if kotlinc is None:
        logger.warning("kotlinc: not found on PATH")
        return
    logger.step_info(f"kotlinc: {os.path.realpath(kotlinc)}", indent=2)
    stdout, stderr, return_code = run_shell_command([kotlinc, "-version"])
    # kotlinc prints its version banner on stderr.
    banner = (stderr or stdout).strip()
    if return_code == 0 and banner:
        logger.step_info(banner, indent=4)
    else:
        logger.warning(f"'kotlinc -version' exited with code {return_code}")

@click.command()
@click.pass_context
@handle_exceptions
def doctor(ctx):
    """Show where the standard library can be found, trying every strategy."""
    settings = config_module.load_settings(path=ctx.obj["path"])
    resolver = BackupClassPathResolver(settings)

    logger.info("Search locations:")
    _report_location("Maven repository", settings.maven_repository)
    _report_location("Gradle home", settings.gradle_home)
    if os.environ.get(config_module.GRADLE_HOME_ENV):
        logger.step_info(f"({config_module.GRADLE_HOME_ENV} is set)", indent=4)
    _report_kotlinc()

    logger.info(f"Checking every strategy for {KOTLIN_STDLIB}...")
    found = 0
    for label, strategy in resolver.strategies(KOTLIN_STDLIB):
        resolved = try_resolving(label, strategy)
        if resolved is None:
            logger.step_info(f"✖ {label}", indent=2)
        else:
            found += 1
            logger.step_info(f"✓ {label}: {resolved}", indent=2)

    if found:
        logger.success(f"{found} strategy(ies) can locate {KOTLIN_STDLIB}.")
    else:
        logger.error(f"No strategy could locate {KOTLIN_STDLIB}.")
        ctx.exit(1)
