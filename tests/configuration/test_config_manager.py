"""
Tests for ConfigManager (YAML loading, fallbacks, validation)
"""

import math

import pytest

from managers.config_manager import ConfigManager
from models.config import SpiralConfig
from models.enums import LogLevel, SpiralType
from models.errors import ConfigError
from models.spiral import SpiralProperties
from utils.logger import get_logger


@pytest.fixture
def write_yaml(tmp_path):
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def missing(tmp_path):
    return tmp_path / "missing.yaml"


class TestLoad:
    """Main file, factory defaults and built-in fallback."""

    def test_bundled_config_matches_builtin_defaults(self):
        config = ConfigManager().load()
        assert config == SpiralConfig()

    def test_main_config_values(self, write_yaml, missing):
        path = write_yaml("config.yaml", """
fps:
  buffer_size: 40
render:
  resolution_degrees: 2
  sampling_density: 1000
canvas:
  background: "#ABCDEF"
logging:
  level: error
  colors: false
""")
        config = ConfigManager(path, missing).load()

        assert config.fps_buffer_size == 40
        assert config.resolution == pytest.approx(math.pi / 90)
        assert config.sampling_density == 1000
        assert config.coordinate_extent == 4
        assert config.default_background == "#abcdef"
        assert config.log_level is LogLevel.ERROR
        assert config.log_colors is False

    def test_logger_configured_from_file(self, write_yaml, missing):
        path = write_yaml("config.yaml", "logging:\n  level: warn\n  colors: false\n")
        ConfigManager(path, missing).load()
        assert get_logger().min_level is LogLevel.WARN
        assert get_logger().use_colors is False

    def test_empty_file_uses_defaults(self, write_yaml, missing):
        path = write_yaml("config.yaml", "")
        assert ConfigManager(path, missing).load() == SpiralConfig(log_level=LogLevel.INFO)

    def test_missing_main_falls_back_to_factory_defaults(self, write_yaml, missing):
        defaults = write_yaml("defaults.yaml", "fps:\n  buffer_size: 12\n")
        config = ConfigManager(missing, defaults).load()
        assert config.fps_buffer_size == 12

    def test_invalid_main_falls_back_to_factory_defaults(self, write_yaml):
        path = write_yaml("config.yaml", "default_spiral:\n  type: cardioid\n")
        defaults = write_yaml("defaults.yaml", "fps:\n  buffer_size: 12\n")
        assert ConfigManager(path, defaults).load().fps_buffer_size == 12

    def test_malformed_yaml_falls_back(self, write_yaml):
        path = write_yaml("config.yaml", "fps: [unclosed\n")
        defaults = write_yaml("defaults.yaml", "fps:\n  buffer_size: 12\n")
        assert ConfigManager(path, defaults).load().fps_buffer_size == 12

    def test_non_mapping_root_falls_back(self, write_yaml):
        path = write_yaml("config.yaml", "- just\n- a list\n")
        defaults = write_yaml("defaults.yaml", "fps:\n  buffer_size: 12\n")
        assert ConfigManager(path, defaults).load().fps_buffer_size == 12

    @pytest.mark.parametrize("text", [
        "fps: [1, 2]\n",
        "render: oops\n",
        "default_spiral: 5\n",
        "default_spiral:\n  properties: [0.5]\n",
    ])
    def test_non_mapping_section_falls_back(self, write_yaml, text):
        path = write_yaml("config.yaml", text)
        defaults = write_yaml("defaults.yaml", "fps:\n  buffer_size: 12\n")
        assert ConfigManager(path, defaults).load().fps_buffer_size == 12

    def test_both_missing_uses_builtin(self, tmp_path):
        manager = ConfigManager(tmp_path / "a.yaml", tmp_path / "b.yaml")
        assert manager.load() == SpiralConfig()
        assert manager.data == {}


class TestParse:
    """Section parsing and validation."""

    @pytest.fixture
    def manager(self):
        return ConfigManager()

    def test_default_spiral_section(self, manager):
        config = manager.parse({
            "default_spiral": {
                "type": "EPITROCHOID",
                "properties": {"static_size": 0.3, "offset": 0.4},
                "velocities": {"streak_length": 0.001},
                "colors": ["#FF0000", "#00ff00"],
            }
        })
        spiral = config.new_spiral()
        assert spiral.type is SpiralType.EPITROCHOID
        assert spiral.properties == SpiralProperties(0.3, 0.8, 0.4, 0.1)
        assert spiral.velocities == SpiralProperties(streak_length=0.001)
        assert spiral.colors == ["#ff0000", "#00ff00"]

    def test_new_spiral_is_a_copy(self, manager):
        config = manager.parse({})
        first = config.new_spiral()
        first.properties.offset = 0.9
        assert config.new_spiral().properties.offset == 0.2

    @pytest.mark.parametrize("data,key", [
        ({"default_spiral": {"type": "cardioid"}}, "default_spiral.type"),
        ({"default_spiral": {"properties": {"radius": 1}}}, "default_spiral.properties"),
        ({"default_spiral": {"velocities": {"offset": "fast"}}}, "default_spiral.velocities.offset"),
        ({"default_spiral": {"colors": []}}, "default_spiral.colors"),
        ({"default_spiral": {"colors": ["red"]}}, "default_spiral.colors"),
        ({"canvas": {"background": "#fff"}}, "canvas.background"),
        ({"fps": {"buffer_size": 0}}, "fps.buffer_size"),
        ({"render": {"resolution_degrees": -1}}, "render.resolution_degrees"),
        ({"render": {"sampling_density": "dense"}}, "render.sampling_density"),
        ({"logging": {"level": "loud"}}, "logging.level"),
        ({"fps": [1, 2]}, "fps"),
        ({"render": "oops"}, "render"),
        ({"canvas": 5}, "canvas"),
        ({"logging": True}, "logging"),
        ({"default_spiral": 5}, "default_spiral"),
        ({"default_spiral": {"velocities": "fast"}}, "default_spiral.velocities"),
    ])
    def test_invalid_values(self, manager, data, key):
        with pytest.raises(ConfigError) as exc_info:
            manager.parse(data)
        assert exc_info.value.code == "INVALID_CONFIG"
        assert exc_info.value.details == {"key": key}

    def test_relative_paths_resolve_against_src(self):
        resolved = ConfigManager._resolve(ConfigManager().config_path)
        assert resolved.name == "config.yaml"
        assert resolved.parent.name == "config"
        assert resolved.exists()
