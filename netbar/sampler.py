"""Two-slot snapshot state owned by the loop driver."""

from __future__ import annotations

import time
from collections.abc import Callable

from netbar import netdev
from netbar.netdev import CounterSnapshot, InterfaceFilter


class Sampler:
    """Holds the previous snapshot and rotates each new one into its place."""

    def __init__(self, interfaces: InterfaceFilter = (), path: str = netdev.PROC_NET_DEV,
                 clock: Callable[[], float] = time.time):
        self.interfaces = interfaces
        self.path = path
        self.clock = clock
        self._prev: CounterSnapshot | None = None

    @property
    def previous(self) -> CounterSnapshot | None:
        return self._prev

    def read(self) -> CounterSnapshot:
        return netdev.sample(self.interfaces, path=self.path, clock=self.clock)

    def prime(self) -> CounterSnapshot:
        self._prev = self.read()
        return self._prev

    def step(self) -> tuple[CounterSnapshot, CounterSnapshot]:
        """Return (previous, current); current becomes previous."""
        if self._prev is None:
            self.prime()
        prev, curr = self._prev, self.read()
        self._prev = curr
        return prev, curr
