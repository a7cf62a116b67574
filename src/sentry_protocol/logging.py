import logging

from sentry_protocol.configuration import ClientConfig

PACKAGE_LOGGER = "sentry_protocol"

# Modules that report lenient parsing decisions
MODULE_LOGGERS = [
    "sentry_protocol.attributes",
    "sentry_protocol.client",
    "sentry_protocol.configuration",
    "sentry_protocol.dsn",
    "sentry_protocol.interfaces.base",
    "sentry_protocol.interfaces.contexts",
    "sentry_protocol.interfaces.stacktrace",
]


class SubstringFilter(logging.Filter):
    def __init__(self, substrings: list[str]):
        super().__init__()
        self.substrings = substrings

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(substring in message for substring in self.substrings)


def setup_logger(logger: logging.Logger, silenced: list[str]):
    # Remove existing filters to avoid duplication
    for filter in logger.filters[:]:
        if isinstance(filter, SubstringFilter):
            logger.removeFilter(filter)

    if silenced:
        logger.addFilter(SubstringFilter(silenced))


def setup_logging(config: ClientConfig | None = None, silenced: list[str] | None = None):
    """
    Opt-in configuration of the package loggers. Skipped members and invalid entries
    are reported at debug level, which is only enabled when SENTRY_DEBUG is set;
    `silenced` substrings mute matching messages even then. Handlers are left to the
    application.
    """
    debug = config.SENTRY_DEBUG if config is not None else False
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if debug else logging.INFO)

    for name in MODULE_LOGGERS:
        setup_logger(logging.getLogger(name), silenced or [])
