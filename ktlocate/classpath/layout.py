import enum
import errno
import os
from dataclasses import dataclass
from typing import Optional

from ..cli_logger import logger


class DirectoryNotFoundError(FileNotFoundError):
    """A directory the layout requires is missing, e.g. no ``modules-*`` cache."""


class BuildTool(enum.Enum):
    """On-disk layout conventions of the local artifact caches we understand."""
    MAVEN = "Maven"
    GRADLE = "Gradle"

    def artifact_directory(self, coordinate, layout_root):
        """Where ``coordinate`` lives below ``layout_root``, whether or not it exists.

        For Maven ``layout_root`` is the local repository, for Gradle it is the
        ``files-*`` directory returned by ``find_gradle_caches``.
        """
        if self is BuildTool.MAVEN:
            return os.path.join(layout_root, coordinate.group.replace(".", os.sep), coordinate.artifact_name)
        return os.path.join(layout_root, coordinate.group, coordinate.artifact_name)

    def is_correct_artifact(self, file_path, artifact_name):
        """Whether ``file_path`` is the binary jar of ``artifact_name`` in this layout."""
        name = os.path.basename(file_path)
        if self is BuildTool.MAVEN:
            # The version comes from this candidate's own parent directory,
            # not from the best version picked by list_version_directories.
            version = os.path.basename(os.path.dirname(file_path))
            return name == f"{artifact_name}-{version}.jar"
        return name.startswith(artifact_name) and "-sources" not in name and name.endswith(".jar")


@dataclass(frozen=True)
class ArtifactDirectoryResolution:
    directory: Optional[str]
    build_tool: BuildTool

    def __str__(self):
        return f"{self.build_tool.value} artifact directory {self.directory or '<missing>'}"


def locate_artifact_directory(coordinate, layout_root, build_tool):
    """Return the artifact's directory under ``layout_root``, or None if it does not exist."""
    if layout_root is None:
        return None
    directory = build_tool.artifact_directory(coordinate, layout_root)
    if not os.path.isdir(directory):
        logger.debug(f"No {build_tool.value} directory for {coordinate} at {directory}")
        return None
    return directory


def resolve_artifact_directory(coordinate, layout_root, build_tool):
    return ArtifactDirectoryResolution(
        locate_artifact_directory(coordinate, layout_root, build_tool), build_tool)


def resolve_starting_with(path, prefix):
    """First child directory of ``path`` whose name starts with ``prefix``.

    Raises DirectoryNotFoundError when there is none.
    """
    with os.scandir(path) as entries:
        names = sorted(entry.name for entry in entries
                       if entry.is_dir() and entry.name.startswith(prefix))
    if not names:
        raise DirectoryNotFoundError(
            errno.ENOENT, f"Directory starting with {prefix} not found", path)
    return os.path.join(path, names[0])


def find_gradle_caches(gradle_home):
    """The ``caches/modules-*/files-*`` directory of a Gradle home.

    Returns None when the home has no ``caches`` directory at all. A
    ``caches`` directory without the expected children raises
    DirectoryNotFoundError.
    """
    caches = os.path.join(gradle_home, "caches")
    if not os.path.isdir(caches):
        logger.info(f"No Gradle caches at {caches}")
        return None
    modules = resolve_starting_with(caches, "modules")
    return resolve_starting_with(modules, "files")
