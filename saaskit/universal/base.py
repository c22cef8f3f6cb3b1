"""Shared protocol for objects that expose the model they wrap."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

M_co = TypeVar("M_co", covariant=True)


@runtime_checkable
class ModelAware(Protocol[M_co]):
    """Anything that can hand out its underlying model."""

    def model(self) -> M_co:
        """Return the model held by this object."""
        raise NotImplementedError