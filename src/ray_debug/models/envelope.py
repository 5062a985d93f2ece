"""
Request envelope: session token, ordered payload entries, free-form meta.
"""

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny
from pydantic_core import PydanticSerializationError

from ray_debug.errors import SerializationError
from ray_debug.models.payloads import Payload


class Origin(BaseModel):
    """Call-site metadata. Not populated yet; every field stays empty."""

    model_config = ConfigDict(frozen=True)

    function_name: str = ""
    file: str = ""
    line_number: str = ""
    hostname: str = ""


class PayloadEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    origin: Origin = Field(default_factory=Origin)
    content: SerializeAsAny[Payload]


class RayRequest(BaseModel):
    uuid: str = Field(default_factory=lambda: str(uuid.uuid4()))
    payloads: list[PayloadEntry] = Field(default_factory=list)
    meta: dict[str, str] = Field(default_factory=dict)

    def append(self, tag: str, origin: Origin, content: Payload) -> PayloadEntry:
        """Add one entry at the end. Entries are never removed or replaced."""
        entry = PayloadEntry(type=tag, origin=origin, content=content)
        self.payloads.append(entry)
        return entry

    def snapshot(self) -> "RayRequest":
        """Deep copy, safe to hand to another thread or task."""
        return self.model_copy(deep=True)

    def to_json(self) -> dict[str, Any]:
        try:
            return self.model_dump(mode="json")
        except PydanticSerializationError as e:
            raise SerializationError(f"Could not serialize request {self.uuid}: {e}") from e
