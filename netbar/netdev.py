"""Interface byte counters — reads /proc/net/dev."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from netbar.errors import CounterParseError, CounterSourceError

PROC_NET_DEV = "/proc/net/dev"
LOOPBACK = "lo"
U64_MAX = 2**64 - 1

# 1-indexed positions after the colon
RX_FIELD = 1
TX_FIELD = 9

InterfaceFilter = tuple[str, ...]


@dataclass(frozen=True)
class CounterSnapshot:
    """Aggregate rx/tx byte totals captured at one point in time."""
    received_bytes: int
    transmitted_bytes: int
    timestamp: int


def make_filter(names: Iterable[str]) -> InterfaceFilter:
    """Build an InterfaceFilter: trimmed, blanks dropped, first occurrence wins."""
    seen: dict[str, None] = {}
    for name in names:
        name = name.strip()
        if name:
            seen.setdefault(name, None)
    return tuple(seen)


def _parse_u64(interface: str, field: str) -> int:
    if not (field.isascii() and field.isdigit()):
        raise CounterParseError(interface, field)
    value = int(field)
    if value > U64_MAX:
        raise CounterParseError(interface, field)
    return value


def read_counters(lines: Iterable[str], interfaces: InterfaceFilter = ()) -> tuple[int, int]:
    """Sum RX/TX bytes across matching interfaces.

    Lines without a colon (the two headers) are ignored, ``lo`` is always
    skipped, and a non-empty ``interfaces`` keeps only exact name matches.
    """
    wanted = set(interfaces)
    rx_total, tx_total = 0, 0
    for line in lines:
        if ":" not in line:
            continue
        iface, data = line.split(":", 1)
        iface = iface.strip()
        if iface == LOOPBACK:
            continue
        if wanted and iface not in wanted:
            continue
        parts = data.split()
        if len(parts) >= RX_FIELD:
            rx_total += _parse_u64(iface, parts[RX_FIELD - 1])   # receive bytes
        if len(parts) >= TX_FIELD:
            tx_total += _parse_u64(iface, parts[TX_FIELD - 1])   # transmit bytes
    return rx_total, tx_total


def sample(interfaces: InterfaceFilter = (), path: str = PROC_NET_DEV,
           clock: Callable[[], float] = time.time) -> CounterSnapshot:
    """Take one snapshot of the counter source."""
    try:
        # interface names are raw bytes; keep undecodable ones as distinct names
        with open(path, encoding="ascii", errors="surrogateescape") as f:
            lines = f.readlines()
    except OSError as exc:
        raise CounterSourceError(path, exc.strerror or str(exc)) from exc
    rx, tx = read_counters(lines, interfaces)
    return CounterSnapshot(received_bytes=rx, transmitted_bytes=tx, timestamp=int(clock()))
