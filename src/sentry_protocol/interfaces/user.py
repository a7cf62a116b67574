from typing import ClassVar

from pydantic import Field, StrictStr

from sentry_protocol.consts import (
    JSON_ELEM_USER_EMAIL,
    JSON_ELEM_USER_ID,
    JSON_ELEM_USER_IP_ADDRESS,
    JSON_ELEM_USER_USERNAME,
)
from sentry_protocol.interfaces.base import SentryInterface


class User(SentryInterface):
    """
    The user affected by the event. Any additional string member (e.g. a
    subscription tier) is kept in `additional_fields` and written back unchanged.
    """

    extensible: ClassVar[bool] = True

    user_id: StrictStr = Field(default="", alias=JSON_ELEM_USER_ID)
    email: StrictStr = Field(default="", alias=JSON_ELEM_USER_EMAIL)
    username: StrictStr = Field(default="", alias=JSON_ELEM_USER_USERNAME)
    ip_address: StrictStr = Field(default="", alias=JSON_ELEM_USER_IP_ADDRESS)
    additional_fields: dict[str, StrictStr] = Field(default_factory=dict)

    def is_valid(self) -> bool:
        return bool(self.user_id or self.email or self.username or self.ip_address)
