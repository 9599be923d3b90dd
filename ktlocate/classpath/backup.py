import os
import threading

from ..cli_logger import logger
from ..utils import OnceCell, try_resolving
from .entries import ArtifactCoordinate, ClassPathEntry, ClassPathResult
from .layout import find_gradle_caches
from .strategies import (
    find_alternative_library_location,
    find_kotlin_cli_compiler_library,
    find_local_artifact_using_gradle,
    find_local_artifact_using_maven,
)

KOTLIN_STDLIB = ArtifactCoordinate("org.jetbrains.kotlin", "kotlin-stdlib")

# One caches root per Gradle home for the lifetime of the process.
_gradle_caches_cells = {}
_gradle_caches_lock = threading.Lock()


def gradle_caches_cell(gradle_home):
    """The process-wide OnceCell holding the caches root of ``gradle_home``."""
    key = os.path.abspath(gradle_home)
    with _gradle_caches_lock:
        return _gradle_caches_cells.setdefault(key, OnceCell())


class BackupClassPathResolver:
    """Finds the Kotlin standard library in the user's Maven or Gradle caches,
    next to kotlinc, or in a known install location.

    Used when no build file could be read. Strategies run in that order and
    the first one that produces a path wins; a strategy that fails is logged
    and skipped. The Gradle caches directory is looked up once per process
    for each Gradle home and shared by every resolver.
    """

    resolver_type = "Backup"

    def __init__(self, settings, search_path=None):
        self.settings = settings
        self.search_path = search_path

    @property
    def classpath(self):
        stdlib = self.find_kotlin_stdlib()
        if stdlib is None:
            return ClassPathResult()
        return ClassPathResult(frozenset({ClassPathEntry(stdlib)}))

    def gradle_caches(self):
        cell = gradle_caches_cell(self.settings.gradle_home)
        return cell.get(lambda: find_gradle_caches(self.settings.gradle_home))

    def find_using_maven(self, coordinate):
        return find_local_artifact_using_maven(coordinate, self.settings.maven_repository)

    def find_using_gradle(self, coordinate):
        return find_local_artifact_using_gradle(coordinate, self.gradle_caches())

    def find_using_kotlinc(self, coordinate):
        return find_kotlin_cli_compiler_library(coordinate.artifact_name, search_path=self.search_path)

    def find_in_alternative_locations(self, coordinate):
        return find_alternative_library_location(
            coordinate.artifact_name, self.settings.alternative_paths)

    def strategies(self, coordinate):
        """(label, thunk) pairs in the order they are tried."""
        name = coordinate.artifact_name
        return [
            (f"{name} using Maven", lambda: self.find_using_maven(coordinate)),
            (f"{name} using Gradle", lambda: self.find_using_gradle(coordinate)),
            (f"{name} using kotlinc", lambda: self.find_using_kotlinc(coordinate)),
            (f"{name} in alternative locations", lambda: self.find_in_alternative_locations(coordinate)),
        ]

    def find_library(self, coordinate):
        """Path of the first jar any strategy finds for ``coordinate``, or None."""
        for label, strategy in self.strategies(coordinate):
            resolved = try_resolving(label, strategy)
            if resolved is not None:
                return resolved
        logger.warning(f"Could not find {coordinate} with any backup strategy.")
        return None

    def find_kotlin_stdlib(self):
        return self.find_library(KOTLIN_STDLIB)
