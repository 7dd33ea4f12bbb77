import io
from pathlib import Path

import pytest

from mtie_analysis.errors import InputReadError, ParseError
from mtie_analysis.reader import parse_tie_lines, read_samples


def test_parse_well_formed_lines() -> None:
    assert parse_tie_lines("1.0\n2.0\n3.0".splitlines()) == [1.0, 2.0, 3.0]
    assert parse_tie_lines("1.0\n2.0\n3.0\n".splitlines()) == [1.0, 2.0, 3.0]


def test_parse_skips_blank_and_whitespace_lines() -> None:
    assert parse_tie_lines(["1.0", "", "", "2.0"]) == [1.0, 2.0]
    assert parse_tie_lines(["1.0", "    ", "2.0"]) == [1.0, 2.0]


def test_parse_skips_comments() -> None:
    lines = ["# header", "1.5", "  // note", "-2e-9", "#", "//"]
    assert parse_tie_lines(lines) == [1.5, -2e-9]


def test_parse_reports_line_number_of_bad_value() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_tie_lines(["1", "# comment", "not_a_number"])
    assert excinfo.value.line_number == 3
    assert excinfo.value.line == "not_a_number"
    assert "line 3 'not_a_number'" in str(excinfo.value)


@pytest.mark.parametrize("text", ["nan", "inf", "-Infinity"])
def test_parse_rejects_non_finite_values(text: str) -> None:
    with pytest.raises(ParseError):
        parse_tie_lines([text])


def test_read_samples_from_file() -> None:
    path = Path(__file__).parent / "data" / "tie_sample.txt"
    series = read_samples(path)
    assert list(series) == [0.0, 1.5, -0.5, 2.0, 3.5, 1.0, -1.0, 0.5]


def test_read_samples_from_stream() -> None:
    series = read_samples(stream=io.StringIO("1.0\n2.1\n3.2\n"))
    assert list(series) == [1.0, 2.1, 3.2]


def test_read_samples_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputReadError) as excinfo:
        read_samples(tmp_path / "missing")
    assert "No such file or directory" in str(excinfo.value)
    assert isinstance(excinfo.value, OSError)


def test_read_samples_invalid_utf8_stream() -> None:
    stream = io.TextIOWrapper(io.BytesIO(b"1.0\n\xff\xfe\n2.0\n"), encoding="utf-8")
    with pytest.raises(InputReadError) as excinfo:
        read_samples(stream=stream)
    assert "standard input" in str(excinfo.value)
