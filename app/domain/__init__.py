# app/domain/__init__.py

from .entity import EntityDomain, EntitySnapshot


__all__ = [
    "EntityDomain",
    "EntitySnapshot"
]
