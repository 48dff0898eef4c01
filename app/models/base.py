"""
Shared model base.

Records use snake_case attributes in Python and camelCase keys on the
wire and in the JSON data files.
"""

import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Interpret naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value
