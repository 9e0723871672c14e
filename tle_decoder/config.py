"""Environment-driven settings for tle_decoder."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = ["DecoderSettings", "LOG_FORMATS", "load_config"]

LOG_FORMATS = ("json", "text")
_DEFAULT_LEVEL = "WARNING"
_DEFAULT_FORMAT = "json"


@dataclass(frozen=True)
class DecoderSettings:
    """Logging options picked up from the environment."""

    log_level: str = _DEFAULT_LEVEL
    log_format: str = _DEFAULT_FORMAT

    @property
    def json_logs(self) -> bool:
        return self.log_format == "json"


def _normalise_level(value: Optional[str]) -> str:
    if not value:
        return _DEFAULT_LEVEL
    candidate = value.strip().upper()
    if candidate.isdigit():
        return candidate
    if isinstance(logging.getLevelName(candidate), int):
        return candidate
    return _DEFAULT_LEVEL


def _normalise_format(value: Optional[str]) -> str:
    if not value:
        return _DEFAULT_FORMAT
    lowered = value.strip().lower()
    return lowered if lowered in LOG_FORMATS else _DEFAULT_FORMAT


def load_config(env: Optional[Mapping[str, str]] = None) -> DecoderSettings:
    """Load settings from ``TLE_DECODER_*`` environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    return DecoderSettings(
        log_level=_normalise_level(env_map.get("TLE_DECODER_LOG_LEVEL")),
        log_format=_normalise_format(env_map.get("TLE_DECODER_LOG_FORMAT")),
    )
