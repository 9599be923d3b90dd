import os

from ..cli_logger import logger
from .versions import list_version_directories

# How far below an artifact directory a jar may sit. Gradle's
# files-*/<group>/<artifact>/<version>/<hash>/<jar> needs all three levels.
MAX_SEARCH_DEPTH = 3


def walk_files(root, max_depth=MAX_SEARCH_DEPTH):
    """Yield non-directory entries below ``root`` depth first, at most ``max_depth`` levels down.

    Entries directly inside ``root`` are at depth 1. Symlinked directories are
    not followed. There is no time limit, so a huge cache directory makes this
    slow.
    """
    def visit(directory, depth):
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if depth + 1 < max_depth:
                    yield from visit(entry.path, depth + 1)
            else:
                yield entry.path

    yield from visit(root, 0)


def find_jar(artifact_directory, artifact_name, build_tool):
    """Find the jar of ``artifact_name`` below ``artifact_directory`` for ``build_tool``'s layout.

    The sorted version directories only gate the search: if there is at least
    one, the first file accepted by ``build_tool.is_correct_artifact`` wins,
    which is not necessarily a jar from the best version directory.
    """
    if artifact_directory is None:
        logger.info(f"No {build_tool.value} artifact directory for {artifact_name}")
        return None

    versions = list_version_directories(artifact_directory)
    logger.info(f"Looking for {artifact_name} in {artifact_directory} ({build_tool.value})")
    logger.info(f"Versions found: {[os.path.basename(v) for v in versions]}")
    if not versions:
        return None

    # FIXME: the jar is matched independently of versions[0]; the two can disagree.
    for candidate in walk_files(artifact_directory):
        if build_tool.is_correct_artifact(candidate, artifact_name):
            return candidate
    return None
