import json
import logging
from pathlib import Path

import pytest

from mtie_analysis.config import LoggingConfig
from mtie_analysis.errors import InvalidConfiguration
from mtie_analysis.logging_utils import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("mtie_analysis.engine", logging.INFO, __file__, 1, "mtie_algorithm_selected", None, None)
    record.algorithm = "dyadic"
    record.samples = 200_000
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "mtie_algorithm_selected"
    assert payload["level"] == "INFO"
    assert payload["algorithm"] == "dyadic"
    assert payload["samples"] == 200_000
    assert "pathname" not in payload


def test_configure_logging_rejects_unusable_log_file(tmp_path: Path) -> None:
    config = LoggingConfig(log_file=str(tmp_path / "nodir" / "mtie.log"))
    with pytest.raises(InvalidConfiguration):
        configure_logging(config)
