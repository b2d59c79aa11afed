"""Exceptions raised while sampling and rendering bandwidth."""

from __future__ import annotations


class NetbarError(Exception):
    """Base class for all netbar failures."""


class CounterSourceError(NetbarError):
    """The counter source could not be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path


class CounterParseError(NetbarError, ValueError):
    """A selected interface carries a byte field that is not a u64."""

    def __init__(self, interface: str, value: str):
        super().__init__(f"bad byte counter for {interface!r}: {value!r}")
        self.interface = interface
        self.value = value


class ElapsedTimeError(NetbarError):
    """Two snapshots are not strictly ordered in time."""

    def __init__(self, elapsed: float):
        super().__init__(f"non-positive elapsed time between samples: {elapsed:g}s")
        self.elapsed = elapsed
