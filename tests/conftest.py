from __future__ import annotations

from pathlib import Path

import pytest

HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast"
    "|bytes    packets errs drop fifo colls carrier compressed\n"
)


def dev_line(name: str, rx: int | str, tx: int | str) -> str:
    return f"{name:>6}: {rx}       50    0    0    0     0          0         0  {tx}        60    0    0    0     0       0          0\n"


def dev_table(*rows: tuple[str, int | str, int | str]) -> str:
    return HEADER + "".join(dev_line(*row) for row in rows)


NET_DEV = dev_table(("lo", 100, 100), ("eth0", 1000, 2000), ("eth1", 500, 1500))


@pytest.fixture
def net_dev(tmp_path: Path) -> Path:
    path = tmp_path / "dev"
    path.write_text(NET_DEV)
    return path
