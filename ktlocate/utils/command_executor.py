import os
import shutil
import subprocess
from ..cli_logger import logger

def find_command_on_path(name, path=None):
    """
    Looks up an executable on PATH.

    Args:
        name (str): The bare executable name, e.g. "kotlinc".
        path (str, optional): A PATH-style string to search instead of the
            process environment.

    Returns:
        The path of the executable as found on PATH (symlinks are not
        resolved), or None if it is not there. On Windows the PATHEXT
        extensions are tried as well.
    """
    found = shutil.which(name, path=path)
    if found is None:
        logger.debug(f"{name} not found on PATH")
        return None
    return os.path.abspath(found)

def run_shell_command(command, env=None, cwd=None, timeout=30):
    """
    Executes a command and captures its output.

    Args:
        command (list): The command to execute as a list of strings.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.
        timeout (int): Seconds to wait before giving up.

    Returns:
        A tuple (stdout, stderr, return_code). A missing command or a timeout
        is reported with return code -1.
    """
    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            env=env,
            check=False,
            cwd=cwd,
            timeout=timeout,
        )
        return result.stdout, result.stderr, result.returncode

    except FileNotFoundError as e:
        logger.error(f"Command not found: {e.filename}")
        return "", str(e), -1
    except subprocess.TimeoutExpired as e:
        logger.error(f"Command timed out after {timeout}s: {' '.join(command)}")
        return "", str(e), -1
    except OSError as e:
        logger.error(f"Could not run {command[0]}: {e}")
        return "", str(e), -1
