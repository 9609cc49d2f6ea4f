"""Error hierarchy shared by the rotlist subsystems.

Every failure is raised synchronously by the call that violated a
precondition. The concrete classes also derive from the matching builtin
(``ValueError``/``IndexError``) so generic handlers keep working.
"""
from __future__ import annotations


class RotatingListError(Exception):
    """Base class for all custom exceptions in the package."""


class EmptyInputError(RotatingListError, ValueError):
    """Raised when a rotating list is built from zero elements."""


class InvalidPointerError(RotatingListError, IndexError):
    """Raised when a pointer falls outside ``[1, size]``."""


class ConfigurationError(RotatingListError):
    """Raised when settings files are missing or invalid."""
