"""Shared base classes for entities and their tables."""

from ._base import Entity, EntityTable

__all__ = ["Entity", "EntityTable"]
