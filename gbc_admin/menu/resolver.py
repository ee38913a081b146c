"""Resolution and validation of navigation-menu entries.

Turns one ``(group, item)`` pair of the menu configuration into a
``MenuItemDescriptor``.  Validation is fail-fast and happens in a fixed
order, so the first problem in the YAML is the one reported::

    admin:                      # group key
      label: Admin              # optional, defaults to humanize(group key)
      priority: 1               # optional, defaults to 0
      items:                    # required
        dashboard:              # item key
          url: /admin/dashboard # required
          label: Dashboard      # optional, defaults to humanize(item key)
          icon: fa-dashboard    # optional, rendered as "fa fa-dashboard"
          target: _blank        # optional, defaults to "_self"
          priority: 1           # optional, defaults to 1
          badge:                # optional; text and type both required
            text: New
            type: success       # rendered as "badge-success"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from gbc_admin.config import Config
from gbc_admin.errors import ConfigError
from gbc_admin.menu.models import Badge, DisplayText, MenuItemDescriptor
from gbc_admin.utils import humanize

# Weight of the group priority in the composite item priority.
GROUP_PRIORITY_WEIGHT = 100
DEFAULT_GROUP_PRIORITY = 0
DEFAULT_ITEM_PRIORITY = 1


class MenuEntryResolver:
    """Resolves menu entries from an already-loaded configuration mapping.

    Stateless apart from the ``Config`` it is built with; the same inputs
    always produce equal descriptors.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def resolve(
        self, menu: Any, group_key: str, item_key: str
    ) -> MenuItemDescriptor:
        """Resolve a single menu entry.

        Args:
            menu: The parsed menu configuration (group key -> group entry).
            group_key: Key of the group in *menu*.
            item_key: Key of the item inside the group's ``items``.

        Returns:
            The validated descriptor.

        Raises:
            ConfigError: On the first invariant violation found.
        """
        if not isinstance(menu, Mapping):
            raise ConfigError("menu config root is not a mapping")
        group_key, item_key = str(group_key), str(item_key)

        group = _lookup(
            menu, group_key,
            f"menu group '{group_key}' not found",
        )
        _ensure_mapping(group, f"menu group '{group_key}' is not a mapping", key=group_key)

        items = _require(
            group, "items",
            f"menu group '{group_key}' has no 'items'",
            key=group_key,
        )
        _ensure_mapping(items, f"'items' of menu group '{group_key}' is not a mapping", key=group_key)

        item = _lookup(
            items, item_key,
            f"menu item '{item_key}' not found in group '{group_key}'",
        )
        _ensure_mapping(
            item, f"menu item '{item_key}' in group '{group_key}' is not a mapping", key=item_key
        )

        url = _text(
            _require(
                item, "url",
                f"menu item '{item_key}' in group '{group_key}' has no 'url'",
                key=item_key,
            ),
            "url", item_key,
        )

        group_priority = _integer(
            _optional(group, "priority"), DEFAULT_GROUP_PRIORITY,
            f"priority of menu group '{group_key}'", group_key,
        )
        item_priority = _integer(
            _optional(item, "priority"), DEFAULT_ITEM_PRIORITY,
            f"priority of menu item '{item_key}'", item_key,
        )

        label_value = _optional(item, "label")
        label = DisplayText.safe(
            humanize(item_key)
            if label_value is None
            else _text(label_value, "label", item_key)
        )

        icon_value = _optional(item, "icon")
        icon = None
        if icon_value is not None:
            icon = f"{self.config.icon_prefix} {_text(icon_value, 'icon', item_key)}"

        target_value = _optional(item, "target")
        target = (
            self.config.default_target
            if target_value is None
            else _text(target_value, "target", item_key)
        )

        badge = self._badge(_optional(item, "badge"), group_key, item_key)

        group_label = _optional(group, "label")
        group_name = (
            humanize(group_key)
            if group_label is None
            else _text(group_label, "label", group_key)
        )

        return MenuItemDescriptor(
            key=item_key,
            url=url,
            priority=group_priority * GROUP_PRIORITY_WEIGHT + item_priority,
            label=label,
            icon=icon,
            target=target,
            badge=badge,
            group=group_name,
        )

    def resolve_all(self, menu: Any) -> list[MenuItemDescriptor]:
        """Resolve every entry in *menu*, ordered by priority, then group, then key.

        Raises:
            ConfigError: On the first invalid group or item.
        """
        if not isinstance(menu, Mapping):
            raise ConfigError("menu config root is not a mapping")

        descriptors: list[MenuItemDescriptor] = []
        for raw_group_key, group in menu.items():
            group_key = str(raw_group_key)
            _ensure_mapping(group, f"menu group '{group_key}' is not a mapping", key=group_key)
            items = _require(
                group, "items",
                f"menu group '{group_key}' has no 'items'",
                key=group_key,
            )
            _ensure_mapping(
                items, f"'items' of menu group '{group_key}' is not a mapping", key=group_key
            )
            for item_key in items:
                descriptors.append(self.resolve(menu, group_key, str(item_key)))

        return sorted(descriptors, key=lambda d: (d.priority, d.group, d.key))

    # -- Helpers -----------------------------------------------------------

    def _badge(
        self, value: Any, group_key: str, item_key: str
    ) -> Optional[Badge]:
        if value is None:
            return None
        where = f"badge of menu item '{item_key}' in group '{group_key}'"
        _ensure_mapping(value, f"{where} is not a mapping", key=item_key)
        text = _require(value, "text", f"{where} has no 'text'", key="text")
        badge_type = _require(value, "type", f"{where} has no 'type'", key="type")
        return Badge(
            text=DisplayText.safe(_text(text, "badge text", item_key)),
            css_class=f"badge-{_text(badge_type, 'badge type', item_key)}",
        )


# ---------------------------------------------------------------------------
# Typed accessors
#
# A YAML key with no value (``label:``) loads as None and is treated the same
# as a missing key.
# ---------------------------------------------------------------------------


def _optional(mapping: Mapping[str, Any], key: str) -> Any:
    """Return ``mapping[key]`` or None when the key is absent."""
    return mapping.get(key)


def _require(mapping: Mapping[str, Any], field: str, message: str, *, key: str) -> Any:
    """Return ``mapping[field]`` or raise ``ConfigError(message)`` reporting *key*."""
    value = mapping.get(field)
    if value is None:
        raise ConfigError(message, key=key)
    return value


def _lookup(mapping: Mapping[Any, Any], key: str, message: str) -> Any:
    """Return the value stored under *key*, raising ``ConfigError`` that lists the existing keys.

    YAML loads keys such as ``2024:`` or ``on:`` as int and bool, so keys
    are compared by their string form.
    """
    for candidate, value in mapping.items():
        if str(candidate) == key:
            return value
    raise ConfigError(message, key=key, available=[str(k) for k in mapping])


def _ensure_mapping(value: Any, message: str, *, key: str) -> None:
    if not isinstance(value, Mapping):
        raise ConfigError(message, key=key)


def _text(value: Any, field: str, owner: str) -> str:
    if isinstance(value, (Mapping, list)):
        raise ConfigError(f"'{field}' of '{owner}' must be a string", key=owner)
    return str(value)


def _integer(value: Any, default: int, what: str, owner: str) -> int:
    if value is None:
        return default
    if isinstance(value, (bool, float)):
        raise ConfigError(f"{what} must be an integer, got {value!r}", key=owner)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{what} must be an integer, got {value!r}", key=owner) from exc
