import io

import pytest

from csrgraph.printext import (
    GB,
    KB,
    MB,
    array_to_string,
    char_sequence,
    human_readable,
    print_array,
    thousands,
    title,
)


def test_human_readable_bytes():
    assert human_readable(512) == "512 B"


@pytest.mark.parametrize(
    "size,suffix",
    [(KB, " KB"), (3 * KB, " KB"), (MB, " MB"), (5 * MB + 7, " MB"), (2 * GB, " GB")],
)
def test_human_readable_units(size, suffix):
    text = human_readable(size)
    assert text.endswith(suffix)
    assert text[: -len(suffix)].isdigit()


def test_human_readable_exact_multiples():
    for n in (1, 4, 100):
        assert human_readable(n * MB) == f"{n} MB"


def test_thousands():
    assert thousands(1234567) == "1,234,567"


@pytest.mark.parametrize("value", [0, 7, 999, 1000, 123456789, -45000])
def test_thousands_round_trip(value):
    text = thousands(value)
    assert int(text.replace(",", "")) == value
    groups = text.lstrip("-").split(",")
    assert all(len(g) == 3 for g in groups[1:])


def test_char_sequence():
    assert char_sequence("=", 10) == "=" * 10
    assert char_sequence("-", 0) == ""


@pytest.mark.parametrize("text", ["Graph", "Analysis", "x"])
def test_title_layout(text):
    line = title(text, "-", 40)
    assert f" {text} " in line
    left, right = line.split(f" {text} ")
    assert set(left) <= {"-"} and set(right) <= {"-"}
    assert len(right) - len(left) == len(text) % 2


def test_title_too_long_text():
    line = title("a long heading text", "*", 5)
    assert line.strip("*") == " a long heading text "


def test_array_to_string():
    assert array_to_string([1, 2, 3], "Out-Edges  ", " ") == "Out-Edges  1 2 3 \n"
    assert array_to_string([], "Degrees ") == "Degrees empty\n"


def test_print_array_writes_blank_line_after():
    out = io.StringIO()
    print_array([4, 5], "Offsets ", ",", file=out)
    assert out.getvalue() == array_to_string([4, 5], "Offsets ", ",") + "\n"


def test_array_to_string_bytes_as_integers():
    data = bytes([65, 0, 255])
    assert array_to_string(data, "", " ").split() == [str(b) for b in data]