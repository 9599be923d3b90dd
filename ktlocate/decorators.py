import functools
import sys
import click
from .cli_logger import logger

# Exit statuses used by every command wrapped with handle_exceptions.
EXIT_ABORTED = 130
EXIT_FAILURE = 2

def handle_exceptions(func):
    """Log failures of a CLI command and turn them into a non-zero exit status.

    ``click.exceptions.Exit`` (raised by ``ctx.exit``) passes through untouched
    so commands can still choose their own status.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.exceptions.Exit:
            raise
        except click.Abort:
            logger.warning("Command aborted by user.")
            sys.exit(EXIT_ABORTED)
        except (FileNotFoundError, PermissionError) as e:
            logger.error(f"Error: Cannot access {e.filename} - {e.strerror}")
            logger.exception(*sys.exc_info())
            sys.exit(EXIT_FAILURE)
        except click.ClickException as e:
            logger.error(f"CLI Error: {e.format_message()}")
            sys.exit(e.exit_code)
        except Exception as e:
            logger.error(f"An unexpected error occurred: {e}")
            logger.info("Please check the log file for more details.")
            logger.exception(*sys.exc_info())
            sys.exit(EXIT_FAILURE)
    return wrapper
