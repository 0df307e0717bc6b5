"""
Config Manager

Loads config.yaml (falling back to factory_defaults.yaml, then to built-in
defaults) and turns it into an immutable SpiralConfig.
"""

import math
import yaml
from pathlib import Path
from typing import Any, Dict

from models.color import Color
from models.config import SpiralConfig
from models.enums import LogLevel, SpiralType, SpiralProperty
from models.errors import ConfigError
from models.spiral import Spiral, SpiralProperties, DEFAULT_SPIRAL
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, configure_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Kernel configuration manager

    Example:
        config_manager = ConfigManager()
        config = config_manager.load()

        store = CanvasStateStore(config)
        renderer = SpiralRenderer(config)

    YAML layout (every key optional):
        fps:
          buffer_size: 80
        render:
          resolution_degrees: 1
          sampling_density: 2000
          coordinate_extent: 4
        canvas:
          background: "#ffffff"
        default_spiral:
          type: hypotrochoid
          properties: {static_size: 0.5, dynamic_size: 0.8, offset: 0.2, streak_length: 0.1}
          velocities: {static_size: 0, dynamic_size: 0, offset: 0, streak_length: 0}
          colors: ["#000000"]
        logging:
          level: INFO
          colors: true
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/ unless absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.config: SpiralConfig = SpiralConfig()

    @staticmethod
    def _resolve(path: Path) -> Path:
        if path.is_absolute():
            return path
        src_dir = Path(__file__).parent.parent
        return src_dir / path

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")
        return data

    def load(self) -> SpiralConfig:
        """
        Load YAML configuration

        Process:
        1. Load main config.yaml
        2. Fallback to factory_defaults.yaml on failure
        3. Fallback to built-in defaults if that fails too
        4. Apply logging settings

        Returns:
            Parsed SpiralConfig
        """
        try:
            self.data = self._read_yaml(self._resolve(self.config_path))
            self.config = self.parse(self.data)
            log.info("Configuration loaded", path=str(self.config_path))
        except (OSError, yaml.YAMLError, ConfigError) as ex:
            log.error("Failed to load config", path=str(self.config_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            try:
                self.data = self._read_yaml(self._resolve(self.factory_defaults_path))
                self.config = self.parse(self.data)
            except (OSError, yaml.YAMLError, ConfigError) as ex:
                log.error("Failed to load factory defaults, using built-in defaults", error=str(ex))
                self.data = {}
                self.config = SpiralConfig()

        configure_logger(self.config.log_level, self.config.log_colors)
        log.info(
            "Spiral config ready",
            fps_buffer_size=self.config.fps_buffer_size,
            resolution_deg=round(math.degrees(self.config.resolution), 4),
            sampling_density=self.config.sampling_density,
        )
        return self.config

    # ===== Parsing =====

    def parse(self, data: Dict[str, Any]) -> SpiralConfig:
        """
        Convert raw YAML data into SpiralConfig

        Raises:
            ConfigError: Invalid values (unknown spiral type, bad colors, ...)
        """
        fps = self._section(data, "fps")
        render = self._section(data, "render")
        canvas = self._section(data, "canvas")
        logging_cfg = self._section(data, "logging")

        buffer_size = self._positive_number(fps.get("buffer_size", 80), "fps.buffer_size")
        resolution_deg = self._positive_number(render.get("resolution_degrees", 1), "render.resolution_degrees")
        sampling_density = self._positive_number(render.get("sampling_density", 2000), "render.sampling_density")
        extent = self._positive_number(render.get("coordinate_extent", 4), "render.coordinate_extent")

        try:
            log_level = EnumHelper.from_string(LogLevel, logging_cfg.get("level", "INFO"))
        except ValueError as ex:
            raise ConfigError(str(ex), key="logging.level") from ex

        return SpiralConfig(
            fps_buffer_size=int(buffer_size),
            resolution=math.radians(resolution_deg),
            sampling_density=sampling_density,
            coordinate_extent=extent,
            default_background=self._parse_color(canvas.get("background", "#ffffff"), "canvas.background"),
            default_spiral=self._parse_spiral(self._section(data, "default_spiral")),
            log_level=log_level,
            log_colors=bool(logging_cfg.get("colors", True)),
        )

    def _parse_spiral(self, data: Dict[str, Any]) -> Spiral:
        try:
            spiral_type = EnumHelper.from_string(SpiralType, data.get("type", "hypotrochoid"))
        except ValueError as ex:
            raise ConfigError(str(ex), key="default_spiral.type") from ex

        colors = data.get("colors", DEFAULT_SPIRAL.colors)
        if not isinstance(colors, list) or not colors:
            raise ConfigError("default_spiral.colors must be a non-empty list", key="default_spiral.colors")

        return Spiral(
            type=spiral_type,
            properties=self._parse_properties(self._section(data, "properties", "default_spiral."), DEFAULT_SPIRAL.properties, "properties"),
            velocities=self._parse_properties(self._section(data, "velocities", "default_spiral."), DEFAULT_SPIRAL.velocities, "velocities"),
            colors=[self._parse_color(c, "default_spiral.colors") for c in colors],
        )

    @staticmethod
    def _section(data: Dict[str, Any], name: str, prefix: str = "") -> Dict[str, Any]:
        """Sub-mapping of data; missing or empty sections read as {}"""
        section = data.get(name)
        if section is None:
            return {}
        if not isinstance(section, dict):
            raise ConfigError(f"{prefix}{name} must be a mapping, got {type(section).__name__}", key=f"{prefix}{name}")
        return section

    @staticmethod
    def _parse_properties(data: Dict[str, Any], fallback: SpiralProperties, section: str) -> SpiralProperties:
        unknown = set(data) - {prop.value for prop in SpiralProperty}
        if unknown:
            raise ConfigError(f"Unknown spiral {section}: {sorted(unknown)}", key=f"default_spiral.{section}")

        result = fallback.copy()
        for prop in SpiralProperty:
            if prop.value in data:
                try:
                    result.set(prop, float(data[prop.value]))
                except (TypeError, ValueError) as ex:
                    raise ConfigError(
                        f"default_spiral.{section}.{prop.value} must be a number",
                        key=f"default_spiral.{section}.{prop.value}",
                    ) from ex
        return result

    @staticmethod
    def _parse_color(value: Any, key: str) -> str:
        try:
            return Color.from_hex(value).to_hex()
        except ValueError as ex:
            raise ConfigError(str(ex), key=key) from ex

    @staticmethod
    def _positive_number(value: Any, key: str) -> float:
        try:
            number = float(value)
        except (TypeError, ValueError) as ex:
            raise ConfigError(f"{key} must be a number, got {value!r}", key=key) from ex
        if not math.isfinite(number) or number <= 0:
            raise ConfigError(f"{key} must be positive, got {value!r}", key=key)
        return number
