"""Nominal marker base classes for model standardization.

`DomainModel` is the base for Pydantic-based configuration models;
`InternalDTO` marks plain dataclass value objects.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainModel(BaseModel):
    """Nominal marker for Pydantic-based domain models."""


class InternalDTO:
    """Nominal marker for internal dataclass DTOs."""
