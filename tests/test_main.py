"""Tests for the example program."""

import pytest

import lmutils
from lmutils.__main__ import main

NOW = 1_735_689_600  # 2025-01-01 00:00:00 UTC


@pytest.fixture
def frozen_clock(monkeypatch):
    monkeypatch.setattr("lmutils.__main__.current_time", lambda: NOW)
    monkeypatch.setattr("lmutils.relative.current_time", lambda: NOW)


def test_demo_prints_arithmetic(frozen_clock, capsys):
    """Test the arithmetic sections of the example program."""
    assert main([]) == 0
    out = capsys.readouterr().out

    assert "Addition: 15 + 7 = 22" in out
    assert "Subtraction: 15 - 7 = 8" in out
    assert "Addition: 25.75 + 12.25 = 38.00" in out
    assert "Subtraction: 25.75 - 12.25 = 13.50" in out
    assert "Addition (negative): -10 + 5 = -5" in out
    assert "Subtraction (negative): -10 - 5 = -15" in out
    assert "Large number addition: 1000000.50 + 999999.25 = 1999999.75" in out
    assert out.rstrip().endswith("=== Example completed successfully! ===")


def test_demo_prints_sample_offsets(frozen_clock, capsys):
    """Test that sample offsets cover every bucket."""
    main([])
    out = capsys.readouterr().out

    for phrase in (
        "just now",
        "45 seconds ago",
        "5 minutes ago",
        "3 hours ago",
        "2 days ago",
        "3 weeks ago",
        "3 months ago",
        "2 years ago",
        "in the future",
    ):
        assert phrase in out


def test_demo_describes_given_timestamps(frozen_clock, capsys):
    """Test that positional timestamps are described against the clock."""
    assert main([str(NOW - 300), "2000-01-01T00:00:00Z"]) == 0
    out = capsys.readouterr().out

    assert f"{NOW - 300}: 5 minutes ago" in out
    assert "2000-01-01T00:00:00Z: 25 years ago" in out


def test_demo_rejects_bad_timestamp(frozen_clock, capsys):
    """Test that an unparseable timestamp exits with status 2."""
    assert main(["last tuesday"]) == 2
    assert "must be ISO-8601" in capsys.readouterr().err


def test_bundled_docs_are_loaded():
    """Test that package docs are available programmatically."""
    assert lmutils.docs["readme"].startswith("# lmutils")
    assert "how_long_ago" in lmutils.docs["api"]
