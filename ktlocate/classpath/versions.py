"""Ordering of version-named artifact directories.

The ordering is intentionally not semantic versioning. Each dot-separated
component is reversed character by character and the reversed strings are
compared lexicographically, with the result negated, so that "9" sorts before
"10" and "1.9.20" before "1.9.0". When every compared component ties, the
name with more components sorts first.

Nobody has recorded why the components are compared reversed. Keep the rule
as it is; switching to packaging.version would change which directory is
reported as the best one.
"""
import functools
import os


def extract_version(artifact_version_dir):
    """Split the final path component of a version directory on dots."""
    name = os.path.basename(os.path.normpath(artifact_version_dir))
    return name.split(".")


def compare_versions(left, right):
    """cmp-style comparison of two version directories; negative sorts ``left`` first."""
    left_version = extract_version(left)
    right_version = extract_version(right)

    for left_part, right_part in zip(left_version, right_version):
        left_rev = left_part[::-1]
        right_rev = right_part[::-1]
        if left_rev != right_rev:
            return -1 if left_rev > right_rev else 1

    if len(left_version) == len(right_version):
        return 0
    return -1 if len(left_version) > len(right_version) else 1


def sort_versions(version_dirs):
    return sorted(version_dirs, key=functools.cmp_to_key(compare_versions))


def list_version_directories(artifact_dir):
    """Immediate subdirectories of an artifact directory, in ``compare_versions`` order."""
    with os.scandir(artifact_dir) as entries:
        dirs = [entry.path for entry in entries if entry.is_dir()]
    return sort_versions(dirs)
