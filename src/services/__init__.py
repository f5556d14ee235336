"""Services layer"""

from .data_assembler import DataAssembler
from .event_bus import EventBus
from .animation_settings_service import AnimationSettingsService
from .canvas_service import CanvasService
from .service_container import ServiceContainer, create_services

__all__ = [
    "DataAssembler",
    "EventBus",
    "AnimationSettingsService",
    "CanvasService",
    "ServiceContainer",
    "create_services",
]
