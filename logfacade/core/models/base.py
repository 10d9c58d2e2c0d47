"""
Base Pydantic models for logfacade.

Provides common configuration and base classes for all logfacade models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class LogFacadeBaseModel(BaseModel):
    """Base model for all logfacade Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(LogFacadeBaseModel):
    """Immutable base model for values that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        arbitrary_types_allowed=True,
        revalidate_instances="never",
    )
