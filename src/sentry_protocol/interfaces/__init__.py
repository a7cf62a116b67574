from sentry_protocol.interfaces import (
    base,
    contexts,
    exception,
    message,
    sdk,
    stacktrace,
    threads,
    user,
)

SentryInterface = base.SentryInterface
ContextGeneral = contexts.ContextGeneral
ContextOS = contexts.ContextOS
ContextRuntime = contexts.ContextRuntime
Contexts = contexts.Contexts
parse_context = contexts.parse_context
ExceptionInterface = exception.ExceptionInterface
Exceptions = exception.Exceptions
Message = message.Message
Sdk = sdk.Sdk
Frame = stacktrace.Frame
Stacktrace = stacktrace.Stacktrace
Thread = threads.Thread
Threads = threads.Threads
User = user.User
