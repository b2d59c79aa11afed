"""Display configuration and the flag/environment layer that builds it.

Flags mirror the classic bandwidth blocklet: ``-b``/``-B`` pick the unit,
``-w``/``-c`` take ``RX:TX`` thresholds in bytes/s (independent of the
display unit), ``-s`` switches to SI scaling. ``USE_BITS``, ``USE_BYTES``
and ``USE_SI`` set the defaults that flags then override.
"""

from __future__ import annotations

import argparse
import os
import re
from argparse import ArgumentParser, Namespace
from collections.abc import Mapping
from dataclasses import dataclass, field

from netbar.netdev import U64_MAX, InterfaceFilter, make_filter

ORANGE = "#FFA500"
RED = "#FF7373"

BITS = "b"
BYTES = "B"

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class ThresholdSet:
    """Warning/critical limits for one direction. 0 disables a limit."""
    warning: int = 0
    critical: int = 0
    warning_color: str = ORANGE
    critical_color: str = RED


@dataclass(frozen=True)
class DisplayConfig:
    unit: str = BYTES
    use_si: bool = False
    rx: ThresholdSet = field(default_factory=ThresholdSet)
    tx: ThresholdSet = field(default_factory=ThresholdSet)
    interval: int = 1
    interfaces: InterfaceFilter = ()
    label: str = ""

    @property
    def base(self) -> int:
        return 1000 if self.use_si else 1024


# ---- argument types ----

def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {raw!r}")
    return value


def _threshold(raw: str, whole: str) -> int:
    raw = raw.strip()
    if not raw:
        return 0
    if not (raw.isascii() and raw.isdigit()) or int(raw) > U64_MAX:
        raise argparse.ArgumentTypeError(f"invalid threshold {whole!r}, expected RX:TX in bytes/s")
    return int(raw)


def parse_pair(raw: str) -> tuple[int, int]:
    """Parse ``RX:TX`` (or a bare ``RX``) into two byte/s limits."""
    parts = raw.split(":")
    if len(parts) > 2:
        raise argparse.ArgumentTypeError(f"invalid threshold {raw!r}, expected RX:TX in bytes/s")
    rx = _threshold(parts[0], raw)
    tx = _threshold(parts[1], raw) if len(parts) == 2 else 0
    return rx, tx


def parse_color(raw: str) -> str:
    if not _COLOR_RE.match(raw):
        raise argparse.ArgumentTypeError(f"invalid color {raw!r}, expected #RRGGBB")
    return raw


def parse_interfaces(raw: str) -> InterfaceFilter:
    return make_filter(raw.split(","))


# ---- environment ----

def _env_flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "")[:1] == "1"


def env_defaults(env: Mapping[str, str] | None = None) -> dict[str, object]:
    """Defaults taken from USE_BITS / USE_BYTES / USE_SI."""
    if env is None:
        env = os.environ
    unit = BYTES
    if _env_flag(env, "USE_BITS"):
        unit = BITS
    if _env_flag(env, "USE_BYTES"):
        unit = BYTES
    return {"unit": unit, "si": _env_flag(env, "USE_SI")}


# ---- parser ----

def add_display_args(parser: ArgumentParser, env: Mapping[str, str] | None = None) -> None:
    """Register the display flags shared by every view."""
    defaults = env_defaults(env)
    units = parser.add_mutually_exclusive_group()
    units.add_argument("-b", "--bits", dest="unit", action="store_const", const=BITS,
                       help="use bits/s")
    units.add_argument("-B", "--bytes", dest="unit", action="store_const", const=BYTES,
                       help="use bytes/s (default)")
    parser.add_argument("-t", "--seconds", type=positive_int, default=1,
                        help="refresh time in seconds (default: 1)")
    parser.add_argument("-i", "--interfaces", type=parse_interfaces, default=(),
                        help="interfaces to monitor, comma separated (default: all except lo)")
    parser.add_argument("-w", "--warning", type=parse_pair, default=(0, 0), metavar="RX:TX",
                        help="warning threshold for Rx:Tx bandwidth in bytes/s")
    parser.add_argument("-W", "--warningcolor", type=parse_color, default=ORANGE,
                        help=f"warning color, #RRGGBB (default: {ORANGE})")
    parser.add_argument("-c", "--critical", type=parse_pair, default=(0, 0), metavar="RX:TX",
                        help="critical threshold for Rx:Tx bandwidth in bytes/s")
    parser.add_argument("-C", "--criticalcolor", type=parse_color, default=RED,
                        help=f"critical color, #RRGGBB (default: {RED})")
    parser.add_argument("-s", "--si", action="store_true",
                        help="use SI units (default is IEC)")
    parser.add_argument("-l", "--label", default="",
                        help="text printed before the rates")
    parser.add_argument("--log-level", default="WARNING",
                        help="logging level written to stderr (default: WARNING)")
    parser.set_defaults(unit=defaults["unit"], si=defaults["si"])


def build_config(args: Namespace) -> DisplayConfig:
    warn_rx, warn_tx = args.warning
    crit_rx, crit_tx = args.critical
    colors = {"warning_color": args.warningcolor, "critical_color": args.criticalcolor}
    return DisplayConfig(
        unit=args.unit,
        use_si=args.si,
        rx=ThresholdSet(warning=warn_rx, critical=crit_rx, **colors),
        tx=ThresholdSet(warning=warn_tx, critical=crit_tx, **colors),
        interval=args.seconds,
        interfaces=args.interfaces,
        label=args.label,
    )
