"""Rate computation, threshold classification and pango markup output."""

from __future__ import annotations

import enum

from netbar.config import BITS, DisplayConfig, ThresholdSet
from netbar.errors import ElapsedTimeError
from netbar.netdev import CounterSnapshot

SUFFIXES = ["", "K", "M", "G"]


class Level(enum.IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2


def elapsed(prev: CounterSnapshot, curr: CounterSnapshot) -> float:
    dt = float(curr.timestamp - prev.timestamp)
    if dt <= 0:
        raise ElapsedTimeError(dt)
    return dt


def compute_rates(prev: CounterSnapshot, curr: CounterSnapshot) -> tuple[float, float]:
    """Bytes/s per direction. Counter resets clamp to zero instead of going negative.

    Only the aggregate is tracked, so an interface that starts matching
    between two samples shows up as a jump, and one that disappears as a
    reset (0 B/s for that tick).
    """
    dt = elapsed(prev, curr)
    rx = max(0, curr.received_bytes - prev.received_bytes) / dt
    tx = max(0, curr.transmitted_bytes - prev.transmitted_bytes) / dt
    return rx, tx


def classify(bytes_per_sec: float, thresholds: ThresholdSet) -> Level:
    """Compare against the byte rate, whatever the display unit."""
    if thresholds.critical and bytes_per_sec > thresholds.critical:
        return Level.CRITICAL
    if thresholds.warning and bytes_per_sec > thresholds.warning:
        return Level.WARNING
    return Level.OK


def level_color(level: Level, thresholds: ThresholdSet) -> str | None:
    if level is Level.CRITICAL:
        return thresholds.critical_color
    if level is Level.WARNING:
        return thresholds.warning_color
    return None


def scale(value: float, base: int) -> tuple[float, str]:
    """Pick the largest suffix whose unit does not exceed ``value``."""
    for power in range(len(SUFFIXES) - 1, 0, -1):
        divisor = base ** power
        if value >= divisor:
            return value / divisor, SUFFIXES[power]
    return value, SUFFIXES[0]


def format_value(bytes_per_sec: float, cfg: DisplayConfig) -> str:
    """Plain text form, e.g. ``1.0KB/s`` or ``5.0 B/s``."""
    value = bytes_per_sec * 8 if cfg.unit == BITS else bytes_per_sec
    value, suffix = scale(value, cfg.base)
    return f"{value:.1f}{suffix or ' '}{cfg.unit}/s"


def format_rate(bytes_per_sec: float, cfg: DisplayConfig, thresholds: ThresholdSet) -> str:
    color = level_color(classify(bytes_per_sec, thresholds), thresholds)
    if color:
        opening = f"<span fallback='true' color='{color}'>"
    else:
        opening = "<span fallback='true'>"
    return f"{opening}{format_value(bytes_per_sec, cfg)}</span>"


def render(prev: CounterSnapshot, curr: CounterSnapshot, cfg: DisplayConfig) -> tuple[str, str]:
    """Receive and transmit tokens, each classified against its own thresholds."""
    rx, tx = compute_rates(prev, curr)
    return format_rate(rx, cfg, cfg.rx), format_rate(tx, cfg, cfg.tx)


def render_line(prev: CounterSnapshot, curr: CounterSnapshot, cfg: DisplayConfig) -> str:
    rx, tx = render(prev, curr, cfg)
    return f"{cfg.label}{rx} {tx}"
