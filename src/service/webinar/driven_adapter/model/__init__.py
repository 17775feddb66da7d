"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.webinar.driven_adapter.model.webinar_model import WebinarModel

__all__ = [
    'WebinarModel',
]
