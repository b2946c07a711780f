from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    return uuid4().hex


def canonical_id(value) -> str:
    """
    Canonical string form of a record identifier (UUID objects, hex strings,
    padded or upper-cased input all compare equal).
    """
    return str(getattr(value, "hex", value)).strip().lower()


class CamelModel(BaseModel):
    """
    Base for API payloads: snake_case in Python, camelCase on the wire.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
