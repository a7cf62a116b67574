"""
Shared JSON round-trip behaviour for every interface of the event payload.

Each interface declares its schema as ordinary pydantic fields: the field alias is
the JSON member name, the type decides which JSON values are accepted, and two
markers carried in ``Annotated`` metadata complete the picture:

    class Sdk(SentryInterface):
        name: Annotated[StrictStr, REQUIRED] = SDK_NAME
        rooted: Annotated[StrictBool, ALWAYS_EMIT] = False

``from_json`` is lenient: a member that is missing, null or of the wrong type is
skipped and the field keeps its default, without affecting its siblings.
``to_json`` omits empty values ("", None, empty collections, False, and negative
ints which stand for "unset") unless the field is marked ``ALWAYS_EMIT``.
"""

import dataclasses
import logging
from typing import Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
    model_validator,
)

from sentry_protocol.level import Level
from sentry_protocol.utils import json_dumps, json_loads

logger = logging.getLogger(__name__)

_I = TypeVar("_I", bound="SentryInterface")

ADDITIONAL_FIELDS = "additional_fields"
# Validation context key set by from_json()
FROM_JSON = "from_json"


@dataclasses.dataclass(frozen=True)
class FieldMarker:
    label: str


# The field must be non-empty for the default is_valid() to pass.
REQUIRED = FieldMarker("required")
# The field is written by to_json() even when it holds an empty value.
ALWAYS_EMIT = FieldMarker("always_emit")


def is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, SentryInterface):
        return not value.is_valid()
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    if isinstance(value, int):
        return value < 0
    return False


def dump_value(value: Any) -> Any:
    if isinstance(value, SentryInterface):
        return value.to_json()
    if isinstance(value, Level):
        return value.to_string()
    if isinstance(value, (list, tuple)):
        return [
            dump_value(item)
            for item in value
            if not (isinstance(item, SentryInterface) and not item.is_valid())
        ]
    if isinstance(value, dict):
        return {key: dump_value(item) for key, item in value.items()}
    return value


def valid_members(interface: type[_I], items: Any) -> Any:
    """
    Parses each raw item of a JSON array into `interface`, dropping items that do not
    produce a valid interface. Already constructed interfaces are kept as given.
    Non-list input is returned untouched so the field falls back to its default.
    """
    if not isinstance(items, (list, tuple)):
        return items

    members: list[_I] = []
    for item in items:
        if isinstance(item, interface):
            members.append(item)
            continue
        member = interface.from_json(item)
        if member.is_valid():
            members.append(member)
        else:
            logger.debug("Dropping invalid %s entry", interface.__name__)
    return members


def string_items(items: Any) -> Any:
    if not isinstance(items, (list, tuple)):
        return items
    return [item for item in items if isinstance(item, str)]


class SentryInterface(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Unknown string members are collected into `additional_fields` and written back
    # by to_json(). Subclasses that set this must declare that field.
    extensible: ClassVar[bool] = False

    @field_validator("*", mode="wrap")
    @classmethod
    def skip_invalid_member(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            logger.debug(
                "Ignoring %s.%s: unexpected value of type %s",
                cls.__name__,
                info.field_name,
                type(value).__name__,
            )
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)

    @model_validator(mode="before")
    @classmethod
    def gather_additional_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if not cls.extensible or not isinstance(data, dict):
            return data

        # Raw JSON is matched on member names only, so that an extension member
        # spelled like a python field name is kept as an extension.
        from_json = bool(info.context and info.context.get(FROM_JSON))
        known = cls.json_member_names() if from_json else cls.member_names()
        declared: dict[str, Any] = {}
        additional: dict[str, str] = {}
        for key, value in data.items():
            if key in known:
                declared[key] = value
            elif isinstance(key, str) and key and isinstance(value, str):
                additional[key] = value
            else:
                logger.debug("Dropping non-string extension member %r of %s", key, cls.__name__)

        explicit = declared.get(ADDITIONAL_FIELDS)
        if isinstance(explicit, dict):
            additional.update(
                (key, value)
                for key, value in explicit.items()
                if isinstance(key, str) and isinstance(value, str)
            )
        if additional or ADDITIONAL_FIELDS in declared:
            declared[ADDITIONAL_FIELDS] = additional
        return declared

    @classmethod
    def json_member_names(cls) -> set[str]:
        return {field.alias or name for name, field in cls.model_fields.items()}

    @classmethod
    def member_names(cls) -> set[str]:
        return cls.json_member_names() | set(cls.model_fields)

    @classmethod
    def from_json(cls: type[_I], data: Any) -> _I:
        if not isinstance(data, dict):
            return cls()
        return cls.model_validate(data, context={FROM_JSON: True})

    @classmethod
    def from_json_string(cls: type[_I], data: str | bytes | bytearray) -> _I:
        try:
            parsed = json_loads(data)
        except (TypeError, ValueError):
            logger.debug("Could not decode %s document", cls.__name__)
            return cls()
        return cls.from_json(parsed)

    def to_json(self) -> dict[str, Any]:
        doc: dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if name == ADDITIONAL_FIELDS:
                continue
            value = getattr(self, name)
            if ALWAYS_EMIT not in field.metadata and is_empty(value):
                continue
            doc[field.alias or name] = dump_value(value)

        if self.extensible:
            for key, value in getattr(self, ADDITIONAL_FIELDS).items():
                doc.setdefault(key, value)
        return doc

    def to_json_string(self, **kwargs) -> str:
        return json_dumps(self.to_json(), **kwargs)

    def is_valid(self) -> bool:
        return all(
            not is_empty(getattr(self, name))
            for name, field in type(self).model_fields.items()
            if REQUIRED in field.metadata
        )
