"""Which kinds of local socket names the current platform accepts."""

from __future__ import annotations

import enum
import sys

__all__ = ["NameTypeSupport", "ALWAYS_AVAILABLE"]


def _has_linux_namespace() -> bool:
    return sys.platform.startswith("linux") or sys.platform == "android"


class NameTypeSupport(enum.Enum):
    """Kinds of identifiers usable as a local socket name on a platform."""

    ONLY_PATHS = "only_paths"
    """Only filesystem paths can be used (Unix-like systems other than Linux)."""
    ONLY_NAMESPACED = "only_namespaced"
    """Only names in a dedicated namespace can be used."""
    BOTH = "both"
    """Both filesystem paths and namespaced names can be used (Linux)."""

    @classmethod
    def query(cls) -> NameTypeSupport:
        """Return the name types supported in the current environment."""
        return cls.BOTH if _has_linux_namespace() else cls.ONLY_PATHS

    def paths_supported(self) -> bool:
        """Whether filesystem-based local socket names are supported."""
        return self in (NameTypeSupport.ONLY_PATHS, NameTypeSupport.BOTH)

    def namespace_supported(self) -> bool:
        """Whether namespaced local socket names are supported."""
        return self in (NameTypeSupport.ONLY_NAMESPACED, NameTypeSupport.BOTH)


ALWAYS_AVAILABLE: NameTypeSupport = NameTypeSupport.query()
"""The name types supported on this platform regardless of OS version."""