"""
Custom exceptions raised at the boundary where customer data enters the system.
"""

class EntityError(Exception):
    """Base class for customer entity errors."""
    pass


class EntityPayloadError(EntityError, ValueError):
    """Raised when a wire payload or stored row cannot be mapped to an entity."""
    pass
