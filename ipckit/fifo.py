"""Creation of FIFO files: one-directional named byte channels on the filesystem."""

from __future__ import annotations

import os
from typing import Union

__all__ = ["create_fifo"]

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def create_fifo(path: PathLike, mode: int = 0o777) -> None:
    """Create a FIFO file at ``path`` with permissions ``mode``.

    The mode is masked with the process umask. Opening the FIFO works through
    ordinary file objects opened for reading only or writing only; removing it
    works like removing any other file. Raises OSError on failure and
    ValueError if the path contains a NUL byte.
    """
    os.mkfifo(path, mode)