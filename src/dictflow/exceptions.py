from __future__ import annotations

from typing import Any

from dictflow.util.repr import SafeStr


class InvalidKeyError(SafeStr, TypeError):
    """Raised when a dictionary operation receives a key that is not a string."""

    def __init__(self, key: Any) -> None:
        self.key = key

    def __safe_str__(self) -> str:
        return f"expected key of type `str`, got `{type(self.key).__name__}` ({self.key!r})"
