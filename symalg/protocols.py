from __future__ import annotations

from typing            import (
    Protocol,
    runtime_checkable
)


@runtime_checkable
class Renderable(Protocol):
    def __symalg_repr__(self):
        ...
