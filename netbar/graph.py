"""Terminal graph view — rolling Rx/Tx chart drawn with plotext."""

from __future__ import annotations

import math
import signal
from argparse import ArgumentParser, Namespace
from collections import deque

import plotext as plt

from netbar import register
from netbar.base import BaseView
from netbar.config import BITS, ThresholdSet
from netbar.netdev import CounterSnapshot
from netbar.render import SUFFIXES, Level, classify, compute_rates, format_value, level_color, scale

OK_COLORS = {"rx": "green", "tx": "yellow"}


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    """'#FFA500' → (255, 165, 0), the form plotext takes for custom colors."""
    color = color.lstrip("#")
    return int(color[0:2], 16), int(color[2:4], 16), int(color[4:6], 16)


def pick_divisor(peak: float, base: int) -> tuple[str, int]:
    """Choose the axis unit so the peak value is readable."""
    _, suffix = scale(peak, base)
    return suffix, base ** SUFFIXES.index(suffix)


@register
class GraphView(BaseView):
    name = "graph"
    description = "Draw Rx/Tx bandwidth as a rolling terminal graph."

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument("--window", type=float, default=60.0,
                            help="Rolling history window in seconds (default: 60)")

    def setup(self, args: Namespace) -> None:
        interval = self.config.interval
        self.window_seconds = max(interval * 4, args.window)
        self.max_points = max(2, int(self.window_seconds / interval))
        self.xs = [i * interval - self.window_seconds for i in range(self.max_points)]
        self.history = {
            "rx": deque([0.0] * self.max_points, maxlen=self.max_points),
            "tx": deque([0.0] * self.max_points, maxlen=self.max_points),
        }
        self.current = {"rx": 0.0, "tx": 0.0}

    def run(self) -> int:
        self._hide_cursor()
        signal.signal(signal.SIGWINCH, self._on_resize)
        return super().run()

    def show(self, prev: CounterSnapshot, curr: CounterSnapshot) -> None:
        rx, tx = compute_rates(prev, curr)
        for key, rate in (("rx", rx), ("tx", tx)):
            self.current[key] = rate
            self.history[key].append(rate)
        self.stream.write("\033[H" + self.build().rstrip() + "\033[J")
        self.stream.flush()

    def cleanup(self) -> None:
        self.stream.write("\033[?25h")  # show cursor
        self.stream.flush()

    # ---- rendering ----

    def series_color(self, key: str) -> str | tuple[int, int, int]:
        thresholds: ThresholdSet = getattr(self.config, key)
        level = classify(self.current[key], thresholds)
        if level is Level.OK:
            return OK_COLORS[key]
        return hex_to_rgb(level_color(level, thresholds))

    def build(self) -> str:
        factor = 8 if self.config.unit == BITS else 1
        peak = max(1.0, *(v * factor for s in self.history.values() for v in s))
        suffix, divisor = pick_divisor(peak, self.config.base)

        plt.clf()
        plt.theme("clear")
        plt.plotsize(None, None)

        y_max = 0.01
        for key, arrow in (("rx", "↓"), ("tx", "↑")):
            scaled = [v * factor / divisor for v in self.history[key]]
            y_max = max(y_max, max(scaled))
            label = f"{arrow} {format_value(self.current[key], self.config)}"
            plt.plot(self.xs, scaled, label=label, color=self.series_color(key), marker="braille")
        y_max = math.ceil(y_max * 1.15)

        plt.frame(False)
        plt.xticks([])
        plt.yticks([])
        plt.ylim(0, y_max)
        plt.xlim(-self.window_seconds, 0)
        plt.grid(False, False)

        title = f"{self.config.label}Net  {suffix}{self.config.unit}/s".strip()
        plt.text(title, x=-self.window_seconds / 2, y=y_max * 0.9,
                 color="default", alignment="center")
        return plt.build()

    def _hide_cursor(self) -> None:
        self.stream.write("\033[?25l")
        self.stream.flush()

    def _on_resize(self, signum, frame) -> None:
        self.stream.write("\033[H" + self.build().rstrip() + "\033[J")
        self.stream.flush()


if __name__ == "__main__":
    raise SystemExit(GraphView().run())
