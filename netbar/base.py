"""BaseView — shared sampling loop for every netbar output surface.

Handles: argparse, DisplayConfig construction, the two-slot snapshot
rotation, deadline-based tick loop and the error policy around it.

Subclasses implement: name, description, add_args(), setup(), show().
"""

from __future__ import annotations

import logging
import sys
import time
from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from collections.abc import Callable, Mapping
from typing import TextIO

from netbar.config import DisplayConfig, add_display_args, build_config
from netbar.errors import CounterParseError, CounterSourceError, ElapsedTimeError
from netbar.log import setup_logging
from netbar.netdev import PROC_NET_DEV, CounterSnapshot
from netbar.sampler import Sampler


class BaseView(ABC):
    """Abstract base for all views.

    Lifecycle:
        1. __init__() parses args, builds the config, calls setup()
        2. run() primes the sampler and enters the blocking loop
        3. show() is called each tick with (previous, current) snapshots
        4. cleanup() is called on exit
    """

    name: str = ""                # e.g. "bar" — used by registry & cli
    description: str = ""

    def __init__(self, argv: list[str] | None = None, *,
                 stream: TextIO | None = None,
                 env: Mapping[str, str] | None = None,
                 source: str = PROC_NET_DEV,
                 clock: Callable[[], float] = time.time,
                 sleep: Callable[[float], None] = time.sleep):
        parser = ArgumentParser(prog=f"netbar {self.name}".strip(),
                                description=self.description or None)
        add_display_args(parser, env)
        # Subclass-specific flags
        self.add_args(parser)
        self.args = parser.parse_args(argv)

        self.config: DisplayConfig = build_config(self.args)
        self.stream = stream if stream is not None else sys.stdout
        self.sampler = Sampler(self.config.interfaces, path=source, clock=clock)
        self.log = logging.getLogger(f"netbar.{self.name or 'view'}")
        self._sleep = sleep

        self.setup(self.args)

    # ---- subclass interface ----

    def add_args(self, parser: ArgumentParser) -> None:
        """Override to add view-specific CLI flags."""

    def setup(self, args: Namespace) -> None:
        """Called once after arg parsing."""

    @abstractmethod
    def show(self, prev: CounterSnapshot, curr: CounterSnapshot) -> None:
        """Called each tick. May raise ElapsedTimeError to skip the cycle."""

    def cleanup(self) -> None:
        """Called on exit. Override to release resources."""

    # ---- main loop ----

    def tick(self) -> bool:
        """Sample once and show it. Returns False when the cycle was skipped."""
        prev, curr = self.sampler.step()
        try:
            self.show(prev, curr)
        except ElapsedTimeError as exc:
            self.log.warning("skipping sample: %s", exc)
            return False
        return True

    def run(self) -> int:
        """Blocking main loop. Returns a process exit status."""
        setup_logging(self.args.log_level)
        self.log.debug("starting with %s", self.config)
        try:
            self.sampler.prime()
            next_tick = time.monotonic()
            while True:
                next_tick += self.config.interval
                self._sleep(max(0, next_tick - time.monotonic()))
                self.tick()
        except (CounterSourceError, CounterParseError) as exc:
            self.log.error("%s", exc)
            return 1
        except KeyboardInterrupt:
            return 0
        finally:
            self.cleanup()
