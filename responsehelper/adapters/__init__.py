"""Framework adapters for ``ResponseContext``."""

from responsehelper.adapters.starlette import StarletteContext, StarletteResponder

__all__ = [
    "StarletteContext",
    "StarletteResponder",
]
