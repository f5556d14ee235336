"""Parameter domain models"""

from dataclasses import dataclass
from typing import Any, Optional
from models.enums import ParamID, ParameterType


@dataclass(frozen=True)
class ParameterConfig:
    """
    Immutable parameter configuration from YAML

    Describes the slider range a caller validates against before handing
    a value to the settings service (the service itself never clamps).
    """
    id: ParamID
    type: ParameterType
    default: Any
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    unit: Optional[str] = None
    description: str = ""

    def validate(self, value: Any) -> bool:
        """Check if value is a number within configured constraints"""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.min is not None and value < self.min:
            return False
        if self.max is not None and value > self.max:
            return False
        return True
