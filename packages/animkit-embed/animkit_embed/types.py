"""Shared types for animkit-embed."""
from __future__ import annotations

from typing import Callable

# confirm(title, message, ok_label, cancel_label) -> True to proceed.
Confirm = Callable[[str, str, str, str], bool]


class InvalidSelectionError(ValueError):
    """Raised when a command is executed on a selection its validator rejects."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Selection is not valid for {path!r}")


class RequestClosedError(RuntimeError):
    """Raised when applying or cancelling a request that is already settled."""
