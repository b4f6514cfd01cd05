"""Validation errors raised before a projection runs."""

from __future__ import annotations

from typing import List, Union


class ProjectionError(ValueError):
    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            errors = [errors]
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidInputError(ProjectionError):
    """A monetary amount or rate is non-finite or outside its domain."""


class InvalidDurationError(ProjectionError):
    """The projection horizon is not a whole number of years >= 1."""
