"""EmbeddedAnimationMenu - menu items gated by selection validators."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from animkit import AssetStore, Selection

from animkit_embed import commands, validators
from animkit_embed.settings import DEFAULT_SETTINGS, EmbedSettings
from animkit_embed.types import Confirm, InvalidSelectionError


@dataclass(frozen=True)
class MenuItem:
    path: str
    priority: int
    validate: Callable[[Selection], bool]
    execute: Callable[[Selection], Any]


class EmbeddedAnimationMenu:
    """Routes menu paths to commands bound to one asset store.

    ``validate(path, selection)`` decides whether an item is enabled and is
    re-evaluated on every call. ``execute`` runs the command, or raises
    ``InvalidSelectionError`` if the validator rejects the selection.
    """

    def __init__(
        self,
        store: AssetStore,
        confirm: Confirm,
        settings: EmbedSettings | None = None,
    ) -> None:
        self._store = store
        self._confirm = confirm
        self._settings = settings if settings is not None else DEFAULT_SETTINGS
        self._items: dict[str, MenuItem] = {}

        s = self._settings
        self.register(
            "New Animation", 1,
            lambda sel: validators.validate_new(store, sel),
            lambda sel: commands.create_clip(store, sel, s),
        )
        self.register(
            "Rename Animation", 2,
            lambda sel: validators.validate_rename(store, sel),
            lambda sel: commands.rename_clip(store, sel, s),
        )
        self.register(
            "Attach Animations", 3,
            lambda sel: validators.validate_standalone_clips(store, sel),
            lambda sel: commands.attach_clips(store, sel, s),
        )
        self.register(
            "Delete Animations", 4,
            lambda sel: validators.validate_embedded_clips(store, sel),
            lambda sel: commands.delete_clips(store, sel, self._confirm),
        )
        self.register(
            "Detach Animations", 5,
            lambda sel: validators.validate_embedded_clips(store, sel),
            lambda sel: commands.detach_clips(store, sel, self._confirm, s),
        )

    @property
    def settings(self) -> EmbedSettings:
        return self._settings

    def register(
        self,
        label: str,
        priority: int,
        validate: Callable[[Selection], bool],
        execute: Callable[[Selection], Any],
    ) -> MenuItem:
        """Add an item under the menu root. Overwrites an existing label."""
        item = MenuItem(self._settings.menu_path(label), priority, validate, execute)
        self._items[item.path] = item
        return item

    def items(self) -> list[MenuItem]:
        """All items in menu order (priority, then registration)."""
        return sorted(self._items.values(), key=lambda item: item.priority)

    def paths(self) -> list[str]:
        return [item.path for item in self.items()]

    def validate(self, path: str, selection: Selection) -> bool:
        """Raises KeyError if *path* is not registered."""
        return self._items[path].validate(selection)

    def execute(self, path: str, selection: Selection) -> Any:
        item = self._items[path]
        if not item.validate(selection):
            raise InvalidSelectionError(path)
        return item.execute(selection)
