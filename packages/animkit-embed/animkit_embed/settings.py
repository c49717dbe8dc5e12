"""EmbedSettings - names and labels used by the embedded animation commands."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EmbedSettings:
    """Immutable command configuration.

    Attributes:
        menu_root: Menu folder the commands are registered under.
        default_clip_name: Name given to a newly created embedded clip.
        clip_extension: File extension of detached standalone clips.
        rename_title: Title of the rename dialog.
        attach_title: Title of the target controller picker.
    """

    menu_root: str = "Assets/Embedded Animation"
    default_clip_name: str = "New Animation Clip"
    clip_extension: str = ".anim"
    rename_title: str = "Enter New Animation Name"
    attach_title: str = "Select An Animator Controller"

    def __post_init__(self) -> None:
        if not self.menu_root:
            raise ValueError("menu_root must be non-empty")
        if not self.default_clip_name:
            raise ValueError("default_clip_name must be non-empty")
        if not self.clip_extension.startswith(".") or len(self.clip_extension) < 2:
            raise ValueError(
                f"clip_extension must look like '.ext', got {self.clip_extension!r}"
            )

    def menu_path(self, label: str) -> str:
        return f"{self.menu_root}/{label}"


DEFAULT_SETTINGS = EmbedSettings()
