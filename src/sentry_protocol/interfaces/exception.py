from typing import Annotated, Any

from pydantic import Field, StrictInt, StrictStr, field_validator

from sentry_protocol.consts import (
    JSON_ELEM_EXCEPTION_MODULE,
    JSON_ELEM_EXCEPTION_TYPE,
    JSON_ELEM_EXCEPTION_VALUE,
    JSON_ELEM_STACKTRACE,
    JSON_ELEM_THREAD_ID,
    JSON_ELEM_VALUES,
)
from sentry_protocol.interfaces.base import ALWAYS_EMIT, REQUIRED, SentryInterface, valid_members
from sentry_protocol.interfaces.stacktrace import Stacktrace


def parse_thread_id(thread_id: Any) -> Any:
    """
    Thread ids arrive either as integers or as their decimal string form. Only
    plain ASCII digits are read; anything else is left for the int check to reject.
    """
    if isinstance(thread_id, str):
        digits = thread_id.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits)
    return thread_id


class ExceptionInterface(SentryInterface):
    type: Annotated[StrictStr, REQUIRED] = Field(default="", alias=JSON_ELEM_EXCEPTION_TYPE)
    value: Annotated[StrictStr, REQUIRED] = Field(default="", alias=JSON_ELEM_EXCEPTION_VALUE)
    module: StrictStr = Field(default="", alias=JSON_ELEM_EXCEPTION_MODULE)
    thread_id: StrictInt = Field(default=-1, alias=JSON_ELEM_THREAD_ID)
    stacktrace: Stacktrace = Field(default_factory=Stacktrace, alias=JSON_ELEM_STACKTRACE)

    @field_validator("thread_id", mode="before")
    @classmethod
    def validate_thread_id(cls, thread_id: Any) -> Any:
        return parse_thread_id(thread_id)

    @field_validator("stacktrace", mode="before")
    @classmethod
    def validate_stacktrace(cls, stacktrace: Any) -> Any:
        return Stacktrace.from_json(stacktrace) if isinstance(stacktrace, dict) else stacktrace


class Exceptions(SentryInterface):
    """
    The `exception` member of an event: chained exceptions, oldest first.
    """

    values: Annotated[list[ExceptionInterface], ALWAYS_EMIT] = Field(
        default_factory=list, alias=JSON_ELEM_VALUES
    )

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, values: Any) -> Any:
        return valid_members(ExceptionInterface, values)

    def is_valid(self) -> bool:
        return bool(self.values)
