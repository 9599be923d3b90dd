import os
import shutil
import tempfile
import toml
import unittest
from click.testing import CliRunner
from ktlocate import config
from ktlocate.commands.config import config as config_command
import json

class TestConfig(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, config.CONFIG_FILE)
        self.sample_config = {
            "locations": {
                "maven_repository": "/data/m2",
                "gradle_home": "/data/gradle",
            },
        }
        config.save_config(self.sample_config, path=self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_load_config_not_found(self):
        """Loading a non-existent config returns an empty dict."""
        os.remove(self.config_path)
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_load_config_malformed(self):
        with open(self.config_path, "w") as f:
            f.write("[locations\nmaven_repository = ")
        self.assertEqual(config.load_config(path=self.test_dir), {})

    def test_save_and_load_config(self):
        loaded_config = config.load_config(path=self.test_dir)
        self.assertEqual(loaded_config, self.sample_config)
        with open(self.config_path, "r") as f:
            self.assertEqual(toml.load(f), self.sample_config)

    def test_get_nested_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'locations.gradle_home'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), '/data/gradle')

    def test_get_non_existent_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['get', 'locations.nonexistent'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Error: Key 'locations.nonexistent' not found", result.output)

    def test_set_creates_config(self):
        os.remove(self.config_path)
        runner = CliRunner()
        result = runner.invoke(config_command, ['set', 'locations.gradle_home', '/srv/gradle'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(config.load_config(path=self.test_dir), {"locations": {"gradle_home": "/srv/gradle"}})

    def test_unset_nested_value(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['unset', 'locations.maven_repository'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertNotIn('maven_repository', config.load_config(path=self.test_dir)['locations'])

    def test_list_config(self):
        runner = CliRunner()
        result = runner.invoke(config_command, ['list'], obj={"path": self.test_dir})
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(json.loads(result.output.strip()), self.sample_config)


class TestLoadSettings(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_defaults_under_home(self):
        settings = config.load_settings(path=self.test_dir, environ={})
        home = os.path.expanduser("~")
        self.assertEqual(settings.maven_repository, os.path.join(home, ".m2", "repository"))
        self.assertEqual(settings.gradle_home, os.path.join(home, ".gradle"))
        self.assertEqual(settings.alternative_paths, ())

    def test_gradle_home_environment_override(self):
        settings = config.load_settings(path=self.test_dir, environ={"GRADLE_HOME": "/opt/gradle-home"})
        self.assertEqual(settings.gradle_home, "/opt/gradle-home")

    def test_config_file_wins_over_environment(self):
        config.save_config({"locations": {
            "gradle_home": "/data/gradle",
            "maven_repository": "/data/m2",
            "alternative_paths": "/opt/kotlin/lib/{name}.jar",
        }}, path=self.test_dir)

        settings = config.load_settings(path=self.test_dir, environ={"GRADLE_HOME": "/opt/gradle-home"})

        self.assertEqual(settings.gradle_home, "/data/gradle")
        self.assertEqual(settings.maven_repository, "/data/m2")
        self.assertEqual(settings.alternative_paths, ("/opt/kotlin/lib/{name}.jar",))

if __name__ == "__main__":
    unittest.main()
