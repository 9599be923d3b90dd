import toml
import os
from dataclasses import dataclass, field
from .cli_logger import logger

CONFIG_FILE = "ktlocate.toml"

GRADLE_HOME_ENV = "GRADLE_HOME"

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    if os.path.exists(config_path):
        try:
            with open(config_path, "r") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False


def default_maven_repository():
    return os.path.join(os.path.expanduser("~"), ".m2", "repository")

def default_gradle_home(environ=None):
    """GRADLE_HOME replaces the default ``~/.gradle`` when it is set."""
    environ = os.environ if environ is None else environ
    override = environ.get(GRADLE_HOME_ENV)
    if override:
        return os.path.expanduser(override)
    return os.path.join(os.path.expanduser("~"), ".gradle")


@dataclass(frozen=True)
class LocatorSettings:
    """Filesystem roots the backup resolver is allowed to look at."""
    maven_repository: str
    gradle_home: str
    alternative_paths: tuple = field(default_factory=tuple)


def load_settings(path=".", environ=None):
    """Build LocatorSettings from ``ktlocate.toml`` and the environment.

    Values in the ``[locations]`` table win over GRADLE_HOME, which wins over
    the defaults under the user's home directory.
    """
    locations = load_config(path).get("locations", {})
    if not isinstance(locations, dict):
        logger.warning(f"Ignoring [locations] in {CONFIG_FILE}: expected a table.")
        locations = {}

    maven_repository = locations.get("maven_repository") or default_maven_repository()
    gradle_home = locations.get("gradle_home") or default_gradle_home(environ)

    alternative_paths = locations.get("alternative_paths", [])
    if isinstance(alternative_paths, str):
        alternative_paths = [alternative_paths]

    return LocatorSettings(
        maven_repository=os.path.expanduser(maven_repository),
        gradle_home=os.path.expanduser(gradle_home),
        alternative_paths=tuple(alternative_paths),
    )
