import io
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tle_decoder import try_decode
from tle_decoder.logging import configure_logging, get_logger, log_context

LINE1 = "1 25544U 98067A   20344.91719907  .00001264  00000-0  29621-4 0  9993"
LINE2 = "2 25544  51.6466 223.8666 0002416  90.3778  30.6140 15.48970462256430"


def _setup_logger(level="INFO", fmt="json"):
    stream = io.StringIO()
    configure_logging(level=level, stream=stream, force=True, fmt=fmt)
    return get_logger("tests"), stream


def test_json_logging_includes_context_and_extras():
    logger, stream = _setup_logger()
    with log_context(satellite_number="25544", attempt=1):
        logger.info("decode_complete", extra={"field": "bstar", "value": 0.42})
    payload = json.loads(stream.getvalue())
    assert payload["message"] == "decode_complete"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tle_decoder.tests"
    assert payload["context"] == {"satellite_number": "25544", "attempt": 1}
    assert payload["extra"] == {"field": "bstar", "value": 0.42}


def test_context_is_unbound_after_block():
    logger, stream = _setup_logger()
    with log_context(satellite_number="25544", ignored=None):
        pass
    logger.info("after")
    payload = json.loads(stream.getvalue())
    assert "context" not in payload


def test_try_decode_logs_rejection():
    _, stream = _setup_logger()
    assert try_decode(LINE1) is None
    payload = json.loads(stream.getvalue().splitlines()[-1])
    assert payload["message"] == "tle_rejected"
    assert payload["context"] == {"error": "StructuralError"}
    assert "expected 2 or 3 lines" in payload["extra"]["reason"]


def test_successful_decode_logs_at_debug():
    _, stream = _setup_logger(level="DEBUG")
    assert try_decode(f"{LINE1}\n{LINE2}") is not None
    payload = json.loads(stream.getvalue())
    assert payload["message"] == "tle_decoded"
    assert payload["extra"]["satellite_number"] == "25544"


def test_text_format():
    logger, stream = _setup_logger(fmt="text")
    logger.warning("plain message")
    assert stream.getvalue().rstrip().endswith("WARNING tle_decoder.tests: plain message")


def test_get_logger_namespacing():
    assert get_logger().name == "tle_decoder"
    assert get_logger("tle_decoder.decoder").name == "tle_decoder.decoder"
    assert get_logger("x").name == "tle_decoder.x"


def test_format_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("TLE_DECODER_LOG_FORMAT", "text")
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream, force=True)
    get_logger("tests").info("from env")
    assert stream.getvalue().rstrip().endswith("INFO tle_decoder.tests: from env")

    monkeypatch.setenv("TLE_DECODER_LOG_FORMAT", "json")
    stream = io.StringIO()
    configure_logging(level="INFO", stream=stream, force=True)
    get_logger("tests").info("from env")
    assert json.loads(stream.getvalue())["message"] == "from env"
