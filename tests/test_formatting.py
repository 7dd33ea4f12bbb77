import io

from mtie_analysis.algorithms import MtieResult
from mtie_analysis.formatting import format_result, write_results


def test_format_result_keeps_full_precision() -> None:
    assert format_result(MtieResult(1, 0.1 + 0.2)) == "1 0.30000000000000004"
    assert format_result(MtieResult(7, 1e-12)) == "7 1e-12"
    assert format_result(MtieResult(3, 0.0)) == "3 0.0"


def test_write_results_one_line_per_interval() -> None:
    stream = io.StringIO()
    write_results([MtieResult(1, 0.5), MtieResult(3, 1.25)], stream)
    assert stream.getvalue() == "1 0.5\n3 1.25\n"
