"""Interprocess communication on Unix: local sockets, FIFO files and descriptor helpers."""

__version__ = "0.1.0"