import pytest

from mtie_analysis.series import SampleSeries


def test_series_exposes_length_and_indexing() -> None:
    series = SampleSeries([1, 2.5, -3])
    assert len(series) == 3
    assert series[0] == 1.0
    assert series[-1] == -3.0
    assert isinstance(series[0], float)
    assert list(series) == [1.0, 2.5, -3.0]


def test_series_is_a_snapshot_of_its_input() -> None:
    source = [0.1, 0.2]
    series = SampleSeries(source)
    source.append(0.3)
    assert len(series) == 2
    with pytest.raises(TypeError):
        series[0] = 5.0  # type: ignore[index]


def test_series_may_hold_fewer_than_two_samples() -> None:
    assert len(SampleSeries()) == 0
    assert len(SampleSeries([4.0])) == 1


def test_series_equality() -> None:
    assert SampleSeries([1.0, 2.0]) == SampleSeries((1, 2))
    assert SampleSeries([1.0]) != SampleSeries([2.0])
