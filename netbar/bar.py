"""Status-bar view — one pango markup line per interval on stdout."""

from __future__ import annotations

from netbar import register
from netbar.base import BaseView
from netbar.netdev import CounterSnapshot
from netbar.render import render_line


@register
class StatusBarView(BaseView):
    name = "bar"
    description = "Print Rx/Tx bandwidth as pango markup, one line per interval."

    def show(self, prev: CounterSnapshot, curr: CounterSnapshot) -> None:
        line = render_line(prev, curr, self.config)
        self.stream.write(line + "\n")
        self.stream.flush()


if __name__ == "__main__":
    raise SystemExit(StatusBarView().run())
