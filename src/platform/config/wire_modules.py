"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.webinar.app.command import change_seats_use_case, organize_webinar_use_case


WIRE_MODULES: list[ModuleType] = [
    organize_webinar_use_case,
    change_seats_use_case,
]
