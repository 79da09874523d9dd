"""Linear algebra over generic fields."""

from .matrix import Matrix

__all__ = ["Matrix"]
