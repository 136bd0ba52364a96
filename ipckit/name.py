"""Local socket names and their conversion from strings, bytes and paths."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from .name_type_support import ALWAYS_AVAILABLE, NameTypeSupport

__all__ = ["LocalSocketName", "to_local_socket_name"]

NameLike = Union["LocalSocketName", str, bytes, bytearray, "os.PathLike[str]", "os.PathLike[bytes]"]

_NAMESPACE_PREFIX = b"@"


@dataclass(frozen=True)
class LocalSocketName:
    """A local socket name: either a filesystem path or a namespaced name.

    Support for the name type is not enforced on creation; binding or
    connecting with an unsupported name fails instead.
    """

    inner: bytes
    namespaced: bool = False

    def is_supported(self) -> bool:
        """Whether the OS supports this type of name, checked at runtime."""
        return self.is_supported_in_nts_type(NameTypeSupport.query())

    def is_always_supported(self) -> bool:
        """Whether this type of name is supported on every version of this OS."""
        return self.is_supported_in_nts_type(ALWAYS_AVAILABLE)

    def is_supported_in_nts_type(self, nts: NameTypeSupport) -> bool:
        """Whether this type of name is supported under the given support class."""
        return (self.is_namespaced() and nts.namespace_supported()) or (
            self.is_path() and nts.paths_supported()
        )

    def is_namespaced(self) -> bool:
        """Whether the name lives in the socket namespace."""
        return self.namespaced

    def is_path(self) -> bool:
        """Whether the name is a filesystem path."""
        return not self.namespaced

    def to_address(self) -> bytes:
        """Return the Unix domain socket address for this name.

        Namespaced names become abstract addresses (leading NUL byte) where
        the platform has an abstract namespace, and plain paths elsewhere.
        A single trailing NUL byte is accepted and dropped; any other NUL
        byte raises ValueError.
        """
        raw = self.inner
        if raw.endswith(b"\0"):
            raw = raw[:-1]
        if b"\0" in raw:
            raise ValueError(f"local socket name contains a nul byte: {self.inner!r}")
        if self.namespaced and NameTypeSupport.query().namespace_supported():
            return b"\0" + raw
        return raw

    def __str__(self) -> str:
        text = os.fsdecode(self.inner)
        return "@" + text if self.namespaced else text


def _from_os_bytes(raw: bytes) -> LocalSocketName:
    if raw.startswith(_NAMESPACE_PREFIX):
        return LocalSocketName(raw[len(_NAMESPACE_PREFIX):], namespaced=True)
    return LocalSocketName(raw, namespaced=False)


def to_local_socket_name(value: NameLike) -> LocalSocketName:
    """Convert a string, bytes or path to a LocalSocketName.

    Strings and bytes starting with ``@`` yield a namespaced name with the
    ``@`` removed; anything else is a filesystem path. Path objects are
    always filesystem paths and are never given the ``@`` treatment.
    """
    if isinstance(value, LocalSocketName):
        return value
    if isinstance(value, str):
        return _from_os_bytes(os.fsencode(value))
    if isinstance(value, (bytes, bytearray)):
        return _from_os_bytes(bytes(value))
    if isinstance(value, os.PathLike):
        return LocalSocketName(os.fsencode(os.fspath(value)), namespaced=False)
    raise TypeError(f"cannot convert {type(value).__name__} to a local socket name")