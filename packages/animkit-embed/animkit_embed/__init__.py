"""animkit-embed - Create, rename, delete, attach and detach embedded animation clips."""
from animkit_embed.commands import (
    attach_clips,
    create_clip,
    delete_clips,
    detach_clips,
    rename_clip,
)
from animkit_embed.menu import EmbeddedAnimationMenu, MenuItem
from animkit_embed.requests import AttachRequest, RenameRequest, apply_attach, apply_rename
from animkit_embed.settings import DEFAULT_SETTINGS, EmbedSettings
from animkit_embed.types import Confirm, InvalidSelectionError, RequestClosedError
from animkit_embed.validators import (
    validate_embedded_clips,
    validate_new,
    validate_rename,
    validate_standalone_clips,
)

__all__ = [
    "EmbeddedAnimationMenu",
    "MenuItem",
    "EmbedSettings",
    "DEFAULT_SETTINGS",
    "create_clip",
    "rename_clip",
    "delete_clips",
    "attach_clips",
    "detach_clips",
    "RenameRequest",
    "AttachRequest",
    "apply_rename",
    "apply_attach",
    "validate_new",
    "validate_rename",
    "validate_embedded_clips",
    "validate_standalone_clips",
    "Confirm",
    "InvalidSelectionError",
    "RequestClosedError",
]
