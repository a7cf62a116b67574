import json
from enum import Enum
from typing import Any

from pydantic import BaseModel


class SentryJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, BaseModel):
            to_json = getattr(obj, "to_json", None)
            return to_json() if callable(to_json) else obj.model_dump()
        if isinstance(obj, Enum):
            return obj.value
        return super().default(obj)


def json_dumps(data, **kwargs) -> str:
    return json.dumps(data, cls=SentryJSONEncoder, **kwargs)


def json_loads(data: str | bytes | bytearray) -> Any:
    """
    Parses a JSON document into the plain python tree (dicts, lists, scalars).
    Raises ValueError for malformed input; callers in this package treat that as
    an empty document.
    """
    return json.loads(data)
