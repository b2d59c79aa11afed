from __future__ import annotations

import argparse
from argparse import ArgumentParser

import pytest

from netbar.config import (
    BITS,
    BYTES,
    ORANGE,
    RED,
    DisplayConfig,
    ThresholdSet,
    add_display_args,
    build_config,
    env_defaults,
    parse_color,
    parse_interfaces,
    parse_pair,
)


def config_from(argv: list[str], env: dict[str, str] | None = None) -> DisplayConfig:
    parser = ArgumentParser()
    add_display_args(parser, env or {})
    return build_config(parser.parse_args(argv))


def test_defaults() -> None:
    cfg = config_from([])
    assert cfg == DisplayConfig()
    assert cfg.unit == BYTES
    assert cfg.base == 1024
    assert cfg.interval == 1
    assert cfg.interfaces == ()
    assert cfg.rx == ThresholdSet(0, 0, ORANGE, RED)


def test_full_command_line() -> None:
    cfg = config_from([
        "-b", "-t", "5", "-i", "eth0, wlan0", "-w", "1000:2000", "-c", "5000:6000",
        "-W", "#112233", "-C", "#445566", "-s", "-l", "NET ",
    ])
    assert cfg.unit == BITS
    assert cfg.base == 1000
    assert cfg.interval == 5
    assert cfg.interfaces == ("eth0", "wlan0")
    assert cfg.rx == ThresholdSet(1000, 5000, "#112233", "#445566")
    assert cfg.tx == ThresholdSet(2000, 6000, "#112233", "#445566")
    assert cfg.label == "NET "


def test_environment_sets_defaults() -> None:
    assert env_defaults({"USE_BITS": "1"}) == {"unit": BITS, "si": False}
    assert env_defaults({"USE_BITS": "1", "USE_BYTES": "1"})["unit"] == BYTES
    assert env_defaults({"USE_SI": "1yes"})["si"] is True
    assert env_defaults({"USE_SI": "0", "USE_BITS": "true"}) == {"unit": BYTES, "si": False}


def test_flags_override_environment() -> None:
    cfg = config_from(["-B"], {"USE_BITS": "1", "USE_SI": "1"})
    assert cfg.unit == BYTES
    assert cfg.use_si is True
    assert config_from([], {"USE_BITS": "1"}).unit == BITS


def test_env_defaults_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USE_BITS", "1")
    monkeypatch.delenv("USE_BYTES", raising=False)
    assert env_defaults()["unit"] == BITS


@pytest.mark.parametrize("raw,expected", [
    ("1000:2000", (1000, 2000)),
    ("1000", (1000, 0)),
    (":500", (0, 500)),
    ("7:", (7, 0)),
    (" 1 : 2 ", (1, 2)),
])
def test_parse_pair(raw: str, expected: tuple[int, int]) -> None:
    assert parse_pair(raw) == expected


@pytest.mark.parametrize("raw", ["a:b", "1:2:3", "-1:5", "1.5:2", f"{2**64}:0", f"0:{2**64}"])
def test_parse_pair_rejects(raw: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_pair(raw)


def test_parse_color() -> None:
    assert parse_color("#aBc123") == "#aBc123"
    for bad in ["red", "#12345", "123456", "#1234567"]:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_color(bad)


def test_parse_interfaces() -> None:
    assert parse_interfaces("eth0,,wlan0 , eth0") == ("eth0", "wlan0")
    assert parse_interfaces("") == ()


@pytest.mark.parametrize("argv", [["-t", "0"], ["-t", "x"], ["-w", "oops"], ["-b", "-B"]])
def test_bad_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        config_from(argv)
    assert excinfo.value.code == 2


def test_parse_pair_accepts_u64_max() -> None:
    assert parse_pair(f"{2**64 - 1}:1") == (2**64 - 1, 1)
