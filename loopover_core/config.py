from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_SIZE = '5x5'
DEFAULT_MAX_DIMENSION = 64
DEFAULT_MAX_STEPS = 10000


def _truthy(value: str) -> bool:
    return value.lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    size: str
    log_level: int
    port: int
    flask_debug: bool
    max_dimension: int
    max_steps: int


def load_settings() -> Settings:
    """
    Reads settings from the environment:
    LOOPOVER_SIZE, LOOPOVER_LOG_LEVEL, LOOPOVER_DEBUG, PORT, FLASK_DEBUG/DEBUG,
    and the HTTP request limits LOOPOVER_MAX_DIMENSION and LOOPOVER_MAX_STEPS.
    """
    level_name = os.getenv('LOOPOVER_LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    if _truthy(os.getenv('LOOPOVER_DEBUG', '0')):
        level = logging.DEBUG
    return Settings(
        size=os.getenv('LOOPOVER_SIZE', DEFAULT_SIZE) or DEFAULT_SIZE,
        log_level=level,
        port=int(os.getenv('PORT', '5000')),
        flask_debug=_truthy(os.getenv('FLASK_DEBUG', os.getenv('DEBUG', '0'))),
        max_dimension=int(os.getenv('LOOPOVER_MAX_DIMENSION', str(DEFAULT_MAX_DIMENSION))),
        max_steps=int(os.getenv('LOOPOVER_MAX_STEPS', str(DEFAULT_MAX_STEPS))),
    )
