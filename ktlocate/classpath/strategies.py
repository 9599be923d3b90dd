import os

from ..cli_logger import logger
from ..utils import find_command_on_path
from .jar_matcher import find_jar
from .layout import BuildTool, resolve_artifact_directory

KOTLINC = "kotlinc"

# Fixed install locations that are checked last. Each entry is formatted with
# the library name; snap is the only one known so far.
ALTERNATIVE_LIBRARY_LOCATIONS = (
    "/snap/kotlin/current/lib/{name}.jar",
)


def find_local_artifact(coordinate, layout_root, build_tool):
    """Locate the artifact directory for ``build_tool`` and pick the jar inside it."""
    resolution = resolve_artifact_directory(coordinate, layout_root, build_tool)
    logger.debug(f"Resolved {resolution} for {coordinate}")
    return find_jar(resolution.directory, coordinate.artifact_name, resolution.build_tool)


def find_local_artifact_using_maven(coordinate, maven_repository):
    return find_local_artifact(coordinate, maven_repository, BuildTool.MAVEN)


def find_local_artifact_using_gradle(coordinate, gradle_caches):
    return find_local_artifact(coordinate, gradle_caches, BuildTool.GRADLE)


def find_kotlin_cli_compiler_library(name, search_path=None):
    """Find ``<name>.jar`` in the lib directory of the kotlinc found on PATH.

    kotlinc normally lives in ``<root>/bin`` with the jars in ``<root>/lib``;
    Homebrew style installs keep them in ``<root>/libexec/lib`` instead.
    """
    kotlinc = find_command_on_path(KOTLINC, path=search_path)
    if kotlinc is None:
        return None

    bin_dir = os.path.dirname(os.path.realpath(kotlinc))
    installation_root = os.path.dirname(bin_dir)

    lib_dir = os.path.join(installation_root, "lib")
    if not os.path.exists(lib_dir):
        lib_dir = os.path.join(installation_root, "libexec", "lib")
    if not os.path.isdir(lib_dir):
        logger.debug(f"kotlinc at {kotlinc} has no lib directory")
        return None

    expected = f"{name}.jar"
    for entry in sorted(os.listdir(lib_dir)):
        if entry == expected:
            return os.path.join(lib_dir, entry)
    return None


def find_alternative_library_location(name, extra_locations=()):
    """First existing path among the fixed install locations, then ``extra_locations``."""
    for template in ALTERNATIVE_LIBRARY_LOCATIONS + tuple(extra_locations):
        candidate = os.path.expanduser(template.format(name=name))
        if os.path.exists(candidate):
            return candidate
    return None
