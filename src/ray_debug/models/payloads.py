"""
Payload variants, one model per event kind.

Each variant dumps to exactly its own fields. The event kind is carried by
the enclosing entry's ``type`` tag, never inside the content.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict


class LogPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: list[str]
    label: Literal["Log"] = "Log"


class TextPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str
    label: Literal["Text"] = "Text"


class ColorPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    color: str


class ConfettiPayload(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClearAllPayload(BaseModel):
    model_config = ConfigDict(frozen=True)


Payload = Union[LogPayload, TextPayload, ColorPayload, ConfettiPayload, ClearAllPayload]
