import os
import tempfile
import unittest
from ktlocate.classpath.versions import compare_versions, extract_version, list_version_directories, sort_versions

class TestCompareVersions(unittest.TestCase):

    def test_extract_version_uses_last_path_component(self):
        self.assertEqual(extract_version(os.path.join("repo", "lib", "1.9.20")), ["1", "9", "20"])
        self.assertEqual(extract_version("1.9.20" + os.sep), ["1", "9", "20"])

    def test_single_components_compare_reversed(self):
        # "9" vs "01": "9" is the greater string, negated -> "9" sorts first.
        self.assertEqual(compare_versions("9", "10"), -1)
        self.assertEqual(compare_versions("10", "9"), 1)

    def test_first_differing_component_decides(self):
        self.assertEqual(compare_versions("2.0", "1.9"), -1)
        self.assertEqual(compare_versions("1.8.22", "1.9.0"), 1)
        # "02" vs "01"
        self.assertEqual(compare_versions("1.9.20", "1.9.10"), -1)
        self.assertEqual(compare_versions("1.9.10", "1.9.20"), 1)

    def test_reversal_is_not_numeric_ordering(self):
        # "9" vs "01" again, one level down: 1.9.0 beats 1.10.0.
        self.assertEqual(compare_versions("1.9.0", "1.10.0"), -1)
        # "02" vs "3": "3" is greater, so 1.3 sorts before 1.20.
        self.assertEqual(compare_versions("1.20", "1.3"), 1)

    def test_more_components_sort_first_on_tie(self):
        self.assertEqual(compare_versions("1.9.0", "1.9"), -1)
        self.assertEqual(compare_versions("1.9", "1.9.0"), 1)

    def test_equal_versions(self):
        self.assertEqual(compare_versions("1.9.0", "1.9.0"), 0)

    def test_paths_are_compared_by_directory_name(self):
        self.assertEqual(compare_versions(os.path.join("a", "9"), os.path.join("b", "10")), -1)

    def test_sort_versions(self):
        self.assertEqual(
            sort_versions(["1.10.0", "1.9.0", "2.0"]),
            ["2.0", "1.9.0", "1.10.0"],
        )
        # "0" vs "CR-0": the suffixed one has the greater reversed string.
        self.assertEqual(sort_versions(["1.9.0", "1.9.0-RC"]), ["1.9.0-RC", "1.9.0"])


class TestListVersionDirectories(unittest.TestCase):

    def test_only_directories_are_listed(self):
        with tempfile.TemporaryDirectory() as artifact_dir:
            for version in ("1.10.0", "1.9.0"):
                os.makedirs(os.path.join(artifact_dir, version))
            with open(os.path.join(artifact_dir, "maven-metadata-local.xml"), "w") as f:
                f.write("<metadata/>")

            versions = list_version_directories(artifact_dir)

        self.assertEqual([os.path.basename(v) for v in versions], ["1.9.0", "1.10.0"])

    def test_empty_artifact_directory(self):
        with tempfile.TemporaryDirectory() as artifact_dir:
            self.assertEqual(list_version_directories(artifact_dir), [])

if __name__ == '__main__':
    unittest.main()
