"""
Value-to-debug-string rendering used by the ``ray(...)`` convenience entry point.
"""

from typing import Any, Protocol, runtime_checkable

from rich.pretty import pretty_repr


@runtime_checkable
class Renderable(Protocol):
    """Objects that know how to describe themselves to the debug server."""

    def render(self) -> str: ...


def render(value: Any) -> str:
    if isinstance(value, Renderable):
        return value.render()
    return pretty_repr(value)
