# Member names and identifiers shared by every interface of the event payload

SDK_NAME = "sentry_protocol"
SDK_VERSION = "0.1.0"
CLIENT_NAME = "sentry-protocol"

# Sent as `sentry_version` in the X-Sentry-Auth header
PROTOCOL_VERSION = "7"

DEFAULT_PLATFORM = "python"
DEFAULT_TIMEOUT = 10

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Event attributes
JSON_ELEM_TIMESTAMP = "timestamp"
JSON_ELEM_EVENT_ID = "event_id"
JSON_ELEM_LOGGER = "logger"
JSON_ELEM_PLATFORM = "platform"
JSON_ELEM_ENVIRONMENT = "environment"
JSON_ELEM_SERVER_NAME = "server_name"
JSON_ELEM_LEVEL = "level"

# Message
JSON_ELEM_MESSAGE = "message"
JSON_ELEM_FORMAT_PARAMS = "params"

# Exception
JSON_ELEM_EXCEPTION = "exception"
JSON_ELEM_EXCEPTION_TYPE = "type"
JSON_ELEM_EXCEPTION_VALUE = "value"
JSON_ELEM_EXCEPTION_MODULE = "module"
JSON_ELEM_STACKTRACE = "stacktrace"
JSON_ELEM_THREAD_ID = "thread_id"

# Containers
JSON_ELEM_VALUES = "values"

# Stacktrace and frames
JSON_ELEM_FRAMES = "frames"
JSON_ELEM_FILENAME = "filename"
JSON_ELEM_FUNCTION = "function"
JSON_ELEM_MODULE = "module"
JSON_ELEM_ABS_PATH = "abs_path"
JSON_ELEM_VARS = "vars"
JSON_ELEM_LINE_NO = "lineno"
JSON_ELEM_COL_NO = "colno"
JSON_ELEM_IN_APP = "in_app"
JSON_ELEM_CONTEXT_LINE = "context_line"
JSON_ELEM_PRE_CONTEXT = "pre_context"
JSON_ELEM_POST_CONTEXT = "post_context"
JSON_ELEM_PACKAGE = "package"
JSON_ELEM_FRAME_PLATFORM = "platform"
JSON_ELEM_IMAGE_ADDR = "image_addr"
JSON_ELEM_INSTRUCTION_ADDR = "instruction_addr"
JSON_ELEM_SYMBOL_ADDR = "symbol_addr"
JSON_ELEM_INSTRUCTION_OFFSET = "instruction_offset"

# Threads
JSON_ELEM_THREADS = "threads"
JSON_ELEM_THREAD = "id"
JSON_ELEM_THREAD_CURRENT = "current"
JSON_ELEM_THREAD_CRASHED = "crashed"
JSON_ELEM_THREAD_NAME = "name"

# User
JSON_ELEM_USER = "user"
JSON_ELEM_USER_ID = "id"
JSON_ELEM_USER_EMAIL = "email"
JSON_ELEM_USER_USERNAME = "username"
JSON_ELEM_USER_IP_ADDRESS = "ip_address"

# SDK
JSON_ELEM_SDK = "sdk"
JSON_ELEM_SDK_NAME = "name"
JSON_ELEM_SDK_VERSION = "version"
JSON_ELEM_SDK_INTEGRATIONS = "integrations"

# Contexts
JSON_ELEM_CONTEXTS = "contexts"
JSON_ELEM_CONTEXT_NAME = "name"
JSON_ELEM_CONTEXT_TYPE = "type"
JSON_ELEM_CONTEXT_VERSION = "version"
JSON_ELEM_OS_BUILD = "build"
JSON_ELEM_OS_KERNEL_VERSION = "kernel_version"
JSON_ELEM_OS_ROOTED = "rooted"

CONTEXT_TYPE_OS = "os"
CONTEXT_TYPE_RUNTIME = "runtime"

# Levels
LEVEL_TYPE_DEBUG = "debug"
LEVEL_TYPE_INFO = "info"
LEVEL_TYPE_WARNING = "warning"
LEVEL_TYPE_ERROR = "error"
LEVEL_TYPE_FATAL = "fatal"
