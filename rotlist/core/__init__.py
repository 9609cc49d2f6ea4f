"""Core primitives shared by the rotation, config and telemetry packages.

Error classes and type aliases live here so higher level packages can import
them without introducing circular dependencies.
"""

from . import errors, types

__all__ = ["errors", "types"]
