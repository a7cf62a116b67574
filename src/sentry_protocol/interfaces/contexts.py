import logging
from typing import Annotated, Any, Literal, Union

from pydantic import Field, StrictBool, StrictStr, field_validator

from sentry_protocol.consts import (
    CONTEXT_TYPE_OS,
    CONTEXT_TYPE_RUNTIME,
    JSON_ELEM_CONTEXT_NAME,
    JSON_ELEM_CONTEXT_TYPE,
    JSON_ELEM_CONTEXT_VERSION,
    JSON_ELEM_CONTEXTS,
    JSON_ELEM_OS_BUILD,
    JSON_ELEM_OS_KERNEL_VERSION,
    JSON_ELEM_OS_ROOTED,
)
from sentry_protocol.interfaces.base import ALWAYS_EMIT, REQUIRED, SentryInterface

logger = logging.getLogger(__name__)


class ContextGeneral(SentryInterface):
    type: Annotated[StrictStr, REQUIRED] = Field(default="", alias=JSON_ELEM_CONTEXT_TYPE)
    name: Annotated[StrictStr, REQUIRED] = Field(default="", alias=JSON_ELEM_CONTEXT_NAME)


class ContextOS(ContextGeneral):
    type: Annotated[Literal["os"], REQUIRED] = Field(
        default=CONTEXT_TYPE_OS, alias=JSON_ELEM_CONTEXT_TYPE
    )
    version: StrictStr = Field(default="", alias=JSON_ELEM_CONTEXT_VERSION)
    build: StrictStr = Field(default="", alias=JSON_ELEM_OS_BUILD)
    kernel_version: StrictStr = Field(default="", alias=JSON_ELEM_OS_KERNEL_VERSION)
    rooted: Annotated[StrictBool, ALWAYS_EMIT] = Field(default=False, alias=JSON_ELEM_OS_ROOTED)


class ContextRuntime(ContextGeneral):
    type: Annotated[Literal["runtime"], REQUIRED] = Field(
        default=CONTEXT_TYPE_RUNTIME, alias=JSON_ELEM_CONTEXT_TYPE
    )
    version: StrictStr = Field(default="", alias=JSON_ELEM_CONTEXT_VERSION)


Context = Union[ContextOS, ContextRuntime, ContextGeneral]

_CONTEXTS_BY_TYPE: dict[str, type[ContextGeneral]] = {
    CONTEXT_TYPE_OS: ContextOS,
    CONTEXT_TYPE_RUNTIME: ContextRuntime,
}


def parse_context(data: Any) -> ContextGeneral:
    """
    Builds the context variant named by the `type` member. Unknown or missing types
    produce a ContextGeneral.
    """
    context_type = data.get(JSON_ELEM_CONTEXT_TYPE) if isinstance(data, dict) else None
    context_cls = _CONTEXTS_BY_TYPE.get(context_type, ContextGeneral)
    return context_cls.from_json(data)


class Contexts(SentryInterface):
    """
    The `contexts` member of an event, keyed by context name (usually its type).
    """

    values: dict[str, Context] = Field(default_factory=dict)

    @classmethod
    def of(cls, *contexts: ContextGeneral) -> "Contexts":
        return cls(values={context.type: context for context in contexts})

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values

        contexts: dict[str, ContextGeneral] = {}
        for key, value in values.items():
            context = value if isinstance(value, ContextGeneral) else parse_context(value)
            if context.is_valid():
                contexts[key] = context
            else:
                logger.debug("Dropping invalid context %r", key)
        return contexts

    @classmethod
    def from_json(cls, data: Any) -> "Contexts":
        if not isinstance(data, dict):
            return cls()
        return cls(values=data)

    def to_json(self) -> dict[str, Any]:
        return {key: context.to_json() for key, context in self.values.items() if context.is_valid()}

    def is_valid(self) -> bool:
        return any(context.is_valid() for context in self.values.values())

    def add_to_json(self, doc: dict[str, Any]) -> None:
        if self.is_valid():
            doc[JSON_ELEM_CONTEXTS] = self.to_json()
