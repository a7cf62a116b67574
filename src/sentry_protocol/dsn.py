import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

PROTOCOL_SEPARATOR = "://"
KEY_SEPARATOR = ":"
HOST_SEPARATOR = "@"
PROJECT_SEPARATOR = "/"


class Dsn(BaseModel):
    """
    A Sentry Data Source Name:

        {protocol}://{public_key}:{secret_key}@{host}/{project_id}

    Parsing never raises. A string that does not match the format produces a DSN
    whose parts are all empty and whose is_valid() is False.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str = ""
    public_key: str = ""
    secret_key: str = ""
    host: str = ""
    project_id: str = ""

    @classmethod
    def parse(cls, raw: Any) -> "Dsn":
        if not isinstance(raw, str):
            logger.debug("Invalid DSN: expected a string, got %s", type(raw).__name__)
            return cls()

        # Each delimiter is searched for after the previous one, left to right.
        protocol, found, remainder = raw.partition(PROTOCOL_SEPARATOR)
        if not found:
            return cls._invalid(PROTOCOL_SEPARATOR)
        public_key, found, remainder = remainder.partition(KEY_SEPARATOR)
        if not found:
            return cls._invalid(KEY_SEPARATOR)
        secret_key, found, remainder = remainder.partition(HOST_SEPARATOR)
        if not found:
            return cls._invalid(HOST_SEPARATOR)
        host, found, project_id = remainder.partition(PROJECT_SEPARATOR)
        if not found:
            return cls._invalid(PROJECT_SEPARATOR)

        dsn = cls(
            protocol=protocol,
            public_key=public_key,
            secret_key=secret_key,
            host=host,
            project_id=project_id,
        )
        if not dsn.is_valid():
            logger.debug("Invalid DSN: one or more parts are empty")
            return cls()
        return dsn

    @classmethod
    def _invalid(cls, delimiter: str) -> "Dsn":
        logger.debug("Invalid DSN: missing %r", delimiter)
        return cls()

    def is_valid(self) -> bool:
        return all((self.protocol, self.host, self.public_key, self.secret_key, self.project_id))

    @property
    def url(self) -> str:
        """
        The store endpoint events are submitted to, empty for an invalid DSN.
        """
        if not self.is_valid():
            return ""
        return f"{self.protocol}://{self.host}/api/{self.project_id}/store/"


def parse_dsn(raw: Any) -> Dsn:
    return Dsn.parse(raw)
