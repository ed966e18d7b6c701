"""Generic utility modules for hostglow.

- persistence: Pydantic model JSON load/save with backups
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
