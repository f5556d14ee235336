"""Service Container - Dependency injection container for all core services"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union
from managers.config_manager import ConfigManager
from services.animation_settings_service import AnimationSettingsService
from services.canvas_service import CanvasService
from services.data_assembler import DataAssembler
from services.event_bus import EventBus
from services.middleware import log_middleware
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


@dataclass
class ServiceContainer:
    """
    Centralized container for the core services and managers.

    The settings aggregate is owned by animation_settings_service; consumers
    get it from there instead of reaching for a global.

    Usage:
        services = create_services()
        services.animation_settings_service.update_zoom_animation(style="stiff")
        ease = services.animation_settings_service.create_easing(AnimationTarget.ZOOM, 1.0, 2.0)
    """

    config_manager: ConfigManager
    event_bus: EventBus
    animation_settings_service: AnimationSettingsService
    canvas_service: CanvasService


def create_services(config_path: Union[str, Path] = "config/config.yaml") -> ServiceContainer:
    """Load config and wire every service (dependency injection entry point)"""
    config_manager = ConfigManager(config_path)
    config_manager.load()

    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    assembler = DataAssembler(config_manager)
    services = ServiceContainer(
        config_manager=config_manager,
        event_bus=event_bus,
        animation_settings_service=AnimationSettingsService(assembler, event_bus),
        canvas_service=CanvasService(assembler, event_bus),
    )
    log.info("Services initialized")
    return services
