from enum import IntEnum
from typing import Any

from sentry_protocol.consts import (
    JSON_ELEM_LEVEL,
    LEVEL_TYPE_DEBUG,
    LEVEL_TYPE_ERROR,
    LEVEL_TYPE_FATAL,
    LEVEL_TYPE_INFO,
    LEVEL_TYPE_WARNING,
)


class Level(IntEnum):
    """
    Severity of an event. Ordered from least to most severe, with UNDEFINED below
    everything so that any real level compares greater than an unset one.
    """

    UNDEFINED = -1
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    FATAL = 4

    @classmethod
    def from_string(cls, value: Any) -> "Level":
        if not isinstance(value, str):
            return cls.UNDEFINED
        return _LEVELS_BY_NAME.get(value, cls.UNDEFINED)

    @classmethod
    def from_json(cls, doc: Any) -> "Level":
        if not isinstance(doc, dict):
            return cls.UNDEFINED
        return cls.from_string(doc.get(JSON_ELEM_LEVEL))

    def to_string(self) -> str:
        return _NAMES_BY_LEVEL.get(self, "")

    def is_valid(self) -> bool:
        return self > Level.UNDEFINED

    def add_to_json(self, doc: dict[str, Any]) -> None:
        if not self.is_valid():
            return
        doc[JSON_ELEM_LEVEL] = self.to_string()


_LEVELS_BY_NAME = {
    LEVEL_TYPE_DEBUG: Level.DEBUG,
    LEVEL_TYPE_INFO: Level.INFO,
    LEVEL_TYPE_WARNING: Level.WARNING,
    LEVEL_TYPE_ERROR: Level.ERROR,
    LEVEL_TYPE_FATAL: Level.FATAL,
}
_NAMES_BY_LEVEL = {level: name for name, level in _LEVELS_BY_NAME.items()}
