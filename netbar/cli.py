"""netbar entry point — pick a view by name and run it."""

from __future__ import annotations

import sys

# Import all view modules so they register themselves.
import netbar
import netbar.bar
import netbar.graph


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    name = netbar.DEFAULT_VIEW
    if argv and netbar.resolve(argv[0]) in netbar.REGISTRY:
        name = netbar.resolve(argv[0])
        argv = argv[1:]
    view = netbar.REGISTRY[name](argv)
    return view.run()


if __name__ == "__main__":
    raise SystemExit(main())
