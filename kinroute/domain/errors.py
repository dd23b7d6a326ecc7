"""Typed domain errors for kinroute.

All errors inherit from KinrouteError and can optionally wrap a root
cause exception for debugging. A missing path or an id that is absent
from the graph is a normal outcome and is never raised as an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class KinrouteError(Exception):
    """Base error for the kinroute domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ValidationError(KinrouteError):
    """Malformed or out-of-range input (non-integer id, bad degree bound).

    Attributes:
        field_name: Name of the offending input
        value: The rejected value
    """

    field_name: str = ""
    value: Any = None


@dataclass
class StoreAccessError(KinrouteError):
    """Reading relation or person records failed.

    Attributes:
        source: Which record source failed (e.g. 'parent_child', 'marriages')
    """

    source: str = ""


@dataclass
class HydrationError(StoreAccessError):
    """Fetching the display record of a person failed.

    Attributes:
        person_id: The person whose record could not be fetched
    """

    person_id: Optional[int] = None


@dataclass
class ConfigurationError(KinrouteError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
