"""Domain layer - Core value types and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    HydrationError,
    KinrouteError,
    StoreAccessError,
    ValidationError,
)
from .models import (
    Connection,
    GraphStatistics,
    HydratedPerson,
    MarriageRecord,
    ParentChildRecord,
    PersonId,
    RouteResult,
)

__all__ = [
    # Models
    "PersonId",
    "ParentChildRecord",
    "MarriageRecord",
    "Connection",
    "GraphStatistics",
    "HydratedPerson",
    "RouteResult",
    # Errors
    "KinrouteError",
    "ValidationError",
    "StoreAccessError",
    "HydrationError",
    "ConfigurationError",
]
