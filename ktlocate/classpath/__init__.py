from .entries import ArtifactCoordinate, ClassPathEntry, ClassPathResult
from .layout import BuildTool, ArtifactDirectoryResolution, DirectoryNotFoundError
from .backup import BackupClassPathResolver, KOTLIN_STDLIB
