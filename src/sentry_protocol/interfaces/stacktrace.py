import logging
from typing import Annotated, Any

from pydantic import Field, StrictBool, StrictInt, StrictStr, field_validator

from sentry_protocol.consts import (
    JSON_ELEM_ABS_PATH,
    JSON_ELEM_COL_NO,
    JSON_ELEM_CONTEXT_LINE,
    JSON_ELEM_FILENAME,
    JSON_ELEM_FRAME_PLATFORM,
    JSON_ELEM_FRAMES,
    JSON_ELEM_FUNCTION,
    JSON_ELEM_IMAGE_ADDR,
    JSON_ELEM_IN_APP,
    JSON_ELEM_INSTRUCTION_ADDR,
    JSON_ELEM_INSTRUCTION_OFFSET,
    JSON_ELEM_LINE_NO,
    JSON_ELEM_MODULE,
    JSON_ELEM_PACKAGE,
    JSON_ELEM_POST_CONTEXT,
    JSON_ELEM_PRE_CONTEXT,
    JSON_ELEM_SYMBOL_ADDR,
    JSON_ELEM_VARS,
)
from sentry_protocol.interfaces.base import (
    ALWAYS_EMIT,
    SentryInterface,
    string_items,
    valid_members,
)

logger = logging.getLogger(__name__)


class Frame(SentryInterface):
    # Each frame must identify its location through at least one of these three
    filename: StrictStr = Field(default="", alias=JSON_ELEM_FILENAME)
    function: StrictStr = Field(default="", alias=JSON_ELEM_FUNCTION)
    module: StrictStr = Field(default="", alias=JSON_ELEM_MODULE)

    lineno: StrictInt = Field(default=-1, alias=JSON_ELEM_LINE_NO)
    colno: StrictInt = Field(default=-1, alias=JSON_ELEM_COL_NO)
    abs_path: StrictStr = Field(default="", alias=JSON_ELEM_ABS_PATH)
    context_line: StrictStr = Field(default="", alias=JSON_ELEM_CONTEXT_LINE)
    pre_context: list[StrictStr] = Field(default_factory=list, alias=JSON_ELEM_PRE_CONTEXT)
    post_context: list[StrictStr] = Field(default_factory=list, alias=JSON_ELEM_POST_CONTEXT)
    in_app: Annotated[StrictBool, ALWAYS_EMIT] = Field(default=False, alias=JSON_ELEM_IN_APP)
    vars: dict[str, StrictStr] = Field(default_factory=dict, alias=JSON_ELEM_VARS)
    package: StrictStr = Field(default="", alias=JSON_ELEM_PACKAGE)
    platform: StrictStr = Field(default="", alias=JSON_ELEM_FRAME_PLATFORM)
    image_addr: StrictStr = Field(default="", alias=JSON_ELEM_IMAGE_ADDR)
    instruction_addr: StrictStr = Field(default="", alias=JSON_ELEM_INSTRUCTION_ADDR)
    symbol_addr: StrictStr = Field(default="", alias=JSON_ELEM_SYMBOL_ADDR)
    instruction_offset: StrictStr = Field(default="", alias=JSON_ELEM_INSTRUCTION_OFFSET)

    @field_validator("pre_context", "post_context", mode="before")
    @classmethod
    def validate_context_lines(cls, lines: Any) -> Any:
        return string_items(lines)

    @field_validator("vars", mode="before")
    @classmethod
    def validate_vars(cls, frame_vars: Any) -> Any:
        if not isinstance(frame_vars, dict):
            return frame_vars

        # Variables are transported as strings; integers are rendered, anything else
        # (objects, lists, floats, null) cannot be represented and is dropped.
        values: dict[str, str] = {}
        for key, value in frame_vars.items():
            if isinstance(value, str):
                values[key] = value
            elif isinstance(value, int) and not isinstance(value, bool):
                values[key] = str(value)
            else:
                logger.debug("Dropping frame variable %r of type %s", key, type(value).__name__)
        return values

    def is_valid(self) -> bool:
        return bool(self.filename or self.function or self.module)

    def set_in_app(self, in_app: bool) -> None:
        self.in_app = in_app


class Stacktrace(SentryInterface):
    """
    An ordered list of frames, oldest call first. The order is kept as given when
    parsing and when serializing.
    """

    frames: Annotated[list[Frame], ALWAYS_EMIT] = Field(
        default_factory=list, alias=JSON_ELEM_FRAMES
    )

    @field_validator("frames", mode="before")
    @classmethod
    def validate_frames(cls, frames: Any) -> Any:
        return valid_members(Frame, frames)

    def is_valid(self) -> bool:
        if not self.frames:
            return False
        return all(frame.is_valid() for frame in self.frames)
