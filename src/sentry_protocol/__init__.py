from sentry_protocol.attributes import (
    Environment,
    EventAttribute,
    EventId,
    Logger,
    Platform,
    ServerName,
    Timestamp,
)
from sentry_protocol.client import Client
from sentry_protocol.configuration import ClientConfig, load_from_environment
from sentry_protocol.consts import SDK_VERSION
from sentry_protocol.dsn import Dsn, parse_dsn
from sentry_protocol.interfaces import (
    ContextGeneral,
    ContextOS,
    ContextRuntime,
    Contexts,
    ExceptionInterface,
    Exceptions,
    Frame,
    Message,
    Sdk,
    SentryInterface,
    Stacktrace,
    Thread,
    Threads,
    User,
    parse_context,
)
from sentry_protocol.level import Level

__version__ = SDK_VERSION
