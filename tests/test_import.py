import importlib
import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))


def test_importable() -> None:
    module = importlib.import_module("tle_decoder")
    assert hasattr(module, "decode")
    assert hasattr(module, "TleRecord")


def test_named_constants() -> None:
    module = importlib.import_module("tle_decoder")
    assert module.MINUTES_PER_DAY == 1440.0
    assert module.XPDOTP == 1440.0 / (2.0 * 3.141592653589793)
    assert module.DEG2RAD == 3.141592653589793 / 180.0
    assert module.EPOCH_YEAR_PIVOT == 57
