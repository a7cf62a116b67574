import functools
from typing import Annotated, Any

from pydantic import Field, StrictBool, StrictInt, StrictStr, field_validator

from sentry_protocol.consts import (
    JSON_ELEM_STACKTRACE,
    JSON_ELEM_THREAD,
    JSON_ELEM_THREAD_CRASHED,
    JSON_ELEM_THREAD_CURRENT,
    JSON_ELEM_THREAD_NAME,
    JSON_ELEM_VALUES,
)
from sentry_protocol.interfaces.base import ALWAYS_EMIT, SentryInterface, valid_members
from sentry_protocol.interfaces.exception import parse_thread_id
from sentry_protocol.interfaces.stacktrace import Stacktrace


@functools.total_ordering
class Thread(SentryInterface):
    """
    A thread running at the time of the event. Threads are identified, compared and
    ordered by their id alone.
    """

    thread_id: StrictInt = Field(default=-1, alias=JSON_ELEM_THREAD)
    crashed: Annotated[StrictBool, ALWAYS_EMIT] = Field(default=False, alias=JSON_ELEM_THREAD_CRASHED)
    current: Annotated[StrictBool, ALWAYS_EMIT] = Field(default=False, alias=JSON_ELEM_THREAD_CURRENT)
    stacktrace: Stacktrace = Field(default_factory=Stacktrace, alias=JSON_ELEM_STACKTRACE)
    name: StrictStr = Field(default="", alias=JSON_ELEM_THREAD_NAME)

    @field_validator("thread_id", mode="before")
    @classmethod
    def validate_thread_id(cls, thread_id: Any) -> Any:
        return parse_thread_id(thread_id)

    @field_validator("stacktrace", mode="before")
    @classmethod
    def validate_stacktrace(cls, stacktrace: Any) -> Any:
        return Stacktrace.from_json(stacktrace) if isinstance(stacktrace, dict) else stacktrace

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Thread):
            return NotImplemented
        return self.thread_id == other.thread_id

    def __lt__(self, other: "Thread") -> bool:
        if not isinstance(other, Thread):
            return NotImplemented
        return self.thread_id < other.thread_id

    def is_valid(self) -> bool:
        return self.thread_id >= 0

    def set_crashed(self, crashed: bool) -> None:
        self.crashed = crashed

    def set_current(self, current: bool) -> None:
        self.current = current


class Threads(SentryInterface):
    values: Annotated[list[Thread], ALWAYS_EMIT] = Field(default_factory=list, alias=JSON_ELEM_VALUES)

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, values: Any) -> Any:
        return valid_members(Thread, values)

    def is_valid(self) -> bool:
        return bool(self.values)
