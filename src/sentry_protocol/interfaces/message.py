from typing import Annotated, Any, ClassVar

from pydantic import Field, StrictStr, field_validator

from sentry_protocol.consts import JSON_ELEM_FORMAT_PARAMS, JSON_ELEM_LEVEL, JSON_ELEM_MESSAGE
from sentry_protocol.interfaces.base import REQUIRED, SentryInterface
from sentry_protocol.level import Level


class Message(SentryInterface):
    """
    The message interface: a log line, optional formatting params and a level.
    Unknown string members are carried through `additional_fields`.
    """

    extensible: ClassVar[bool] = True

    message: Annotated[StrictStr, REQUIRED] = Field(default="", alias=JSON_ELEM_MESSAGE)
    params: StrictStr = Field(default="", alias=JSON_ELEM_FORMAT_PARAMS)
    level: Level = Field(default=Level.UNDEFINED, alias=JSON_ELEM_LEVEL)
    additional_fields: dict[str, StrictStr] = Field(default_factory=dict)

    @field_validator("level", mode="before")
    @classmethod
    def parse_level(cls, level: Any) -> Level:
        if isinstance(level, Level):
            return level
        return Level.from_string(level)
