"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and initializes sub-managers.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from managers.parameter_manager import ParameterManager
from utils.logger import get_logger
from models.enums import LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Initializes the ParameterManager and exposes raw sections for DataAssembler.

    Example:
        config = ConfigManager()
        config.load()

        defaults = config.animation_defaults       # dict from animation.yaml
        tension = config.parameter_manager.get_parameter(ParamID.SPRING_TENSION)
    """

    def __init__(self, config_path: Union[str, Path] = "config/config.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/, or absolute)
        """
        self.config_path = Path(config_path)
        self.data: Dict[str, Any] = {}

        # Sub-managers (initialized in load())
        self.parameter_manager: ParameterManager

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        src_dir = Path(__file__).parent.parent
        return src_dir / path

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fall back to built-in defaults (empty config) on failure
        5. Initialize sub-managers

        Returns:
            Merged config data dict
        """
        full_path = self._resolve(self.config_path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config", path=str(full_path), error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to built-in defaults")
            self.data = {}

        self._initialize_managers()
        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["animation.yaml", "canvas.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict (later files win on key clashes)
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except yaml.YAMLError as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _initialize_managers(self) -> None:
        """Initialize sub-managers with loaded config data"""
        self.parameter_manager = ParameterManager(self.data)

    # ===== Section access =====

    @property
    def animation_defaults(self) -> Dict[str, Any]:
        """Raw animation_defaults section (empty dict if missing)"""
        return self.data.get("animation_defaults") or {}

    @property
    def canvas(self) -> Dict[str, Any]:
        """Raw canvas section (empty dict if missing)"""
        return self.data.get("canvas") or {}

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)
