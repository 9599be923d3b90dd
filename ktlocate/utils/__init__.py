from .command_executor import find_command_on_path, run_shell_command
from .resolving import OnceCell, try_resolving
