"""
Parameter Manager - Processes parameter definitions

Processes parameter metadata from ConfigManager (does NOT load files).
Single responsibility: Parse and provide access to parameter definitions with validation.
"""

from typing import Dict, Optional
from models.domain.parameter import ParameterConfig
from models.enums import ParamID, ParameterType, LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


class ParameterManager:
    """
    Parameter metadata manager (data processor only)

    Responsibilities:
    - Parse parameter definitions from config data
    - Build ParameterConfig objects with validation rules
    - Provide parameter lookup for callers that pre-validate user input

    Does NOT load files - receives data from ConfigManager.

    Example:
        param_mgr = ParameterManager(config_data)

        tension = param_mgr.get_parameter(ParamID.SPRING_TENSION)
        if tension.validate(value):
            service.update_cursor_animation({"tension": value})
    """

    SECTIONS = ('spring_parameters', 'motion_blur_parameters')

    def __init__(self, config_data: dict):
        """
        Initialize ParameterManager with parsed config data

        Args:
            config_data: Config dict with 'spring_parameters' and
                         'motion_blur_parameters' sections
        """
        self.parameters: Dict[ParamID, ParameterConfig] = {}
        self._process_data(config_data)

    def _process_data(self, data: dict):
        """Build ParameterConfig objects, skipping unknown ids/types with a warning"""
        param_count = 0
        for section in self.SECTIONS:
            section_data = data.get(section) or {}

            for param_name, param_data in section_data.items():
                try:
                    param_id = ParamID[param_name]
                except KeyError:
                    log.warn(f"Unknown parameter in {section}", param_name=param_name)
                    continue

                try:
                    param_type = ParameterType[param_data['type']]
                except KeyError:
                    log.warn("Unknown ParameterType", param=param_name, type=param_data.get('type'))
                    continue

                self.parameters[param_id] = ParameterConfig(
                    id=param_id,
                    type=param_type,
                    default=param_data.get('default'),
                    min=param_data.get('min'),
                    max=param_data.get('max'),
                    step=param_data.get('step'),
                    unit=param_data.get('unit'),
                    description=param_data.get('description', '')
                )
                param_count += 1

        log.info(
            "Parameters loaded",
            total=param_count,
            spring=len(data.get('spring_parameters') or {}),
            motion_blur=len(data.get('motion_blur_parameters') or {}),
        )

    def get_parameter(self, param_id: ParamID) -> Optional[ParameterConfig]:
        """Get parameter definition by ID (None if not configured)"""
        return self.parameters.get(param_id)

    def get_all_parameters(self) -> Dict[ParamID, ParameterConfig]:
        """Get a copy of all parameter definitions"""
        return self.parameters.copy()

    def get_spring_parameters(self) -> Dict[ParamID, ParameterConfig]:
        """Get only spring parameters (SPRING_*)"""
        return {
            pid: param for pid, param in self.parameters.items()
            if pid.name.startswith('SPRING_')
        }

    def get_motion_blur_parameters(self) -> Dict[ParamID, ParameterConfig]:
        """Get only motion blur parameters (MOTION_BLUR_*)"""
        return {
            pid: param for pid, param in self.parameters.items()
            if pid.name.startswith('MOTION_BLUR_')
        }
