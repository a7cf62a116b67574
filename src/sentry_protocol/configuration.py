import logging
import os
import socket
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from sentry_protocol.attributes import Environment, EventAttribute, Platform, ServerName
from sentry_protocol.consts import DEFAULT_PLATFORM, DEFAULT_TIMEOUT
from sentry_protocol.dsn import Dsn

logger = logging.getLogger(__name__)


def parse_int_from_env(data: str) -> int:
    return int(data)


def parse_bool_from_env(data: str | bool) -> bool:
    if isinstance(data, bool):
        return data
    if not str(data).lower() in ("yes", "true", "t", "y", "1", "on"):
        return False
    return True


ParseInt = Annotated[int, BeforeValidator(parse_int_from_env)]
ParseBool = Annotated[bool, BeforeValidator(parse_bool_from_env)]


class ClientConfig(BaseModel):
    """
    Client settings, typically read from the process environment with
    `load_from_environment`. Nothing in this package reads the environment on its own.
    """

    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_SERVER_NAME: str = Field(default_factory=socket.gethostname)
    SENTRY_PLATFORM: str = DEFAULT_PLATFORM
    SENTRY_TIMEOUT: ParseInt = DEFAULT_TIMEOUT
    SENTRY_DEBUG: ParseBool = False

    @property
    def dsn(self) -> Dsn:
        return Dsn.parse(self.SENTRY_DSN)

    @property
    def is_enabled(self) -> bool:
        return self.dsn.is_valid()

    def event_attributes(self) -> list[EventAttribute]:
        return [
            Environment(value=self.SENTRY_ENVIRONMENT),
            ServerName(value=self.SENTRY_SERVER_NAME),
            Platform(value=self.SENTRY_PLATFORM),
        ]

    def do_validation(self):
        if not self.SENTRY_DSN:
            logger.warning("SENTRY_DSN is not set, events will not be sent")
        elif not self.is_enabled:
            logger.warning("SENTRY_DSN could not be parsed, events will not be sent")

        if self.SENTRY_TIMEOUT <= 0:
            logger.warning("SENTRY_TIMEOUT should be a positive number of seconds")


def load_from_environment(environ: dict[str, str] | None = None) -> ClientConfig:
    return ClientConfig.model_validate(environ or os.environ)
