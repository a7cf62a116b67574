"""
Top-level attributes of an event. Unlike the interfaces these are not objects of
their own in the payload: each one writes a single member into the event document.
"""

import datetime
import logging
import math
import time
import uuid
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import Field, StrictInt, StrictStr, field_validator

from sentry_protocol.consts import (
    DEFAULT_PLATFORM,
    JSON_ELEM_ENVIRONMENT,
    JSON_ELEM_EVENT_ID,
    JSON_ELEM_LOGGER,
    JSON_ELEM_PLATFORM,
    JSON_ELEM_SERVER_NAME,
    JSON_ELEM_TIMESTAMP,
    TIMESTAMP_FORMAT,
)
from sentry_protocol.interfaces.base import REQUIRED, SentryInterface
from sentry_protocol.level import Level

logger = logging.getLogger(__name__)

_A = TypeVar("_A", bound="EventAttribute")

__all__ = [
    "EventAttribute",
    "Timestamp",
    "EventId",
    "Logger",
    "Platform",
    "Environment",
    "ServerName",
    "Level",
]


class EventAttribute(SentryInterface):
    member: ClassVar[str]

    value: Any

    @classmethod
    def from_json(cls: type[_A], doc: Any) -> _A:
        """
        Reads this attribute's member out of an event document.
        """
        if not isinstance(doc, dict) or cls.member not in doc:
            return cls()
        return cls.model_validate({"value": doc[cls.member]})

    def json_value(self) -> Any:
        return self.value

    def to_json(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        self.add_to_json(doc)
        return doc

    def add_to_json(self, doc: dict[str, Any]) -> None:
        if not self.is_valid():
            return
        doc[self.member] = self.json_value()


class Timestamp(EventAttribute):
    """
    Seconds since the epoch, rendered as an ISO 8601 UTC string without fractions.
    """

    member: ClassVar[str] = JSON_ELEM_TIMESTAMP

    value: StrictInt = Field(default_factory=lambda: int(time.time()))

    @field_validator("value", mode="before")
    @classmethod
    def parse_timestamp(cls, value: Any) -> Any:
        # Values that cannot become an int are returned as is and rejected by the
        # strict int check, which falls back to the default.
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else value
        if isinstance(value, datetime.datetime):
            try:
                return int(value.timestamp())
            except (OverflowError, OSError, ValueError):
                logger.debug("Timestamp out of range")
                return value
        if isinstance(value, str):
            try:
                parsed = datetime.datetime.strptime(value, TIMESTAMP_FORMAT)
            except ValueError:
                logger.debug("Unrecognized timestamp format")
                return value
            return int(parsed.replace(tzinfo=datetime.timezone.utc).timestamp())
        return value

    def is_valid(self) -> bool:
        # Past datetime's range the value cannot be rendered
        return self.value > 0 and self.to_string() != ""

    def to_string(self) -> str:
        try:
            moment = datetime.datetime.fromtimestamp(self.value, tz=datetime.timezone.utc)
        except (OverflowError, OSError, ValueError):
            return ""
        return moment.strftime(TIMESTAMP_FORMAT)

    def json_value(self) -> str:
        return self.to_string()


class EventId(EventAttribute):
    member: ClassVar[str] = JSON_ELEM_EVENT_ID

    value: Annotated[StrictStr, REQUIRED] = Field(default_factory=lambda: uuid.uuid4().hex)

    @classmethod
    def generate(cls) -> "EventId":
        return cls(value=uuid.uuid4().hex)


class Logger(EventAttribute):
    member: ClassVar[str] = JSON_ELEM_LOGGER

    value: Annotated[StrictStr, REQUIRED] = ""


class Platform(EventAttribute):
    member: ClassVar[str] = JSON_ELEM_PLATFORM

    value: Annotated[StrictStr, REQUIRED] = DEFAULT_PLATFORM


class Environment(EventAttribute):
    member: ClassVar[str] = JSON_ELEM_ENVIRONMENT

    value: Annotated[StrictStr, REQUIRED] = ""


class ServerName(EventAttribute):
    member: ClassVar[str] = JSON_ELEM_SERVER_NAME

    value: Annotated[StrictStr, REQUIRED] = ""
