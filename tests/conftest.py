"""Shared fixtures: small training sets in the training-file format."""

import matplotlib

matplotlib.use("Agg")

import pytest

from id3.Data import Attribute, Tuple


WEATHER_LINES = [
    "1",
    "Weather sunny rainy",
    "Play yes no",
    "sunny no",
    "sunny no",
    "rainy yes",
    "rainy yes",
]

# Temp is split at 27.5 and separates the classes on its own
OUTDOOR_LINES = [
    "3",
    "Id ignore",
    "Outlook sunny rainy",
    "Temp continuous",
    "Play yes no",
    "d1 sunny 30 no",
    "d2 sunny 20 yes",
    "d3 rainy 25 yes",
    "d4 rainy 15 yes",
    "d5 sunny 32 no",
]

# class = A xor B: both branches of A split on B
XOR_LINES = [
    "2",
    "A x y",
    "B p q",
    "C c0 c1",
    "x p c0",
    "x q c1",
    "y p c1",
    "y q c0",
]


def make_tuples(name, rows):
    """Tuples with one attribute `name`; rows are (value, class) pairs."""
    return [Tuple({name: v}, c) for v, c in rows]


@pytest.fixture
def yes_no():
    return Attribute("Play", ["yes", "no"])


@pytest.fixture
def weather_lines():
    return list(WEATHER_LINES)


@pytest.fixture
def outdoor_lines():
    return list(OUTDOOR_LINES)


@pytest.fixture
def xor_lines():
    return list(XOR_LINES)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write
