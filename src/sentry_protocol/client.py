import dataclasses
import logging

from sentry_protocol.attributes import Timestamp
from sentry_protocol.configuration import ClientConfig
from sentry_protocol.consts import CLIENT_NAME, DEFAULT_TIMEOUT, PROTOCOL_VERSION, SDK_VERSION
from sentry_protocol.dsn import Dsn

logger = logging.getLogger(__name__)

AUTH_HEADER_NAME = "X-Sentry-Auth"


@dataclasses.dataclass(frozen=True)
class Client:
    """
    Identifies a client for one project: the parsed DSN plus the request timeout a
    transport should use. A client with an invalid DSN is disabled.
    """

    dsn: Dsn
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Client":
        return cls(dsn=config.dsn, timeout=config.SENTRY_TIMEOUT)

    def is_enabled(self) -> bool:
        return self.dsn.is_valid()

    @staticmethod
    def client_info() -> str:
        return f"{CLIENT_NAME}/{SDK_VERSION}"

    def auth_header(self, timestamp: Timestamp | None = None) -> str:
        """
        Value of the X-Sentry-Auth header for this client, or an empty string when the
        client is disabled.
        """
        if not self.is_enabled():
            logger.debug("Not building %s for a disabled client", AUTH_HEADER_NAME)
            return ""

        timestamp = timestamp or Timestamp()
        return "Sentry " + ", ".join(
            "%s=%s" % (key, value)
            for key, value in {
                "sentry_version": PROTOCOL_VERSION,
                "sentry_client": self.client_info(),
                "sentry_timestamp": timestamp.value,
                "sentry_key": self.dsn.public_key,
                "sentry_secret": self.dsn.secret_key,
            }.items()
        )
