from typing import Annotated, Any

from pydantic import Field, StrictStr, field_validator

from sentry_protocol.consts import (
    JSON_ELEM_SDK,
    JSON_ELEM_SDK_INTEGRATIONS,
    JSON_ELEM_SDK_NAME,
    JSON_ELEM_SDK_VERSION,
    SDK_NAME,
    SDK_VERSION,
)
from sentry_protocol.interfaces.base import REQUIRED, SentryInterface, string_items


class Sdk(SentryInterface):
    """
    Describes the SDK that produced the event. Defaults to this package.
    """

    name: Annotated[StrictStr, REQUIRED] = Field(default=SDK_NAME, alias=JSON_ELEM_SDK_NAME)
    version: Annotated[StrictStr, REQUIRED] = Field(default=SDK_VERSION, alias=JSON_ELEM_SDK_VERSION)
    integrations: list[StrictStr] = Field(default_factory=list, alias=JSON_ELEM_SDK_INTEGRATIONS)

    @field_validator("integrations", mode="before")
    @classmethod
    def validate_integrations(cls, integrations: Any) -> Any:
        return string_items(integrations)

    def add_to_json(self, doc: dict[str, Any]) -> None:
        if self.is_valid():
            doc[JSON_ELEM_SDK] = self.to_json()
