"""Menu helper for admin resource definitions.

``MenuHelper`` is the piece an admin resource calls from its menu block: it
reads ``menu.yml``, resolves one entry and hands it to the host framework's
menu builder.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from gbc_admin.config import Config
from gbc_admin.errors import ConfigError
from gbc_admin.menu.loader import load_menu_config
from gbc_admin.menu.models import MenuItemDescriptor
from gbc_admin.menu.resolver import MenuEntryResolver

#: ``builder(key, url, **options)`` as exposed by the host admin framework.
MenuBuilder = Callable[..., Any]


class MenuHelper:
    """Renders one menu item from the menu configuration file.

    Args:
        builder: The host framework's item builder.
        group: Key of the group in the menu file.
        item: Key of the item inside the group.
        config: Path conventions; defaults to ``Config()``.
    """

    def __init__(
        self,
        builder: MenuBuilder,
        group: str,
        item: str,
        config: Config | None = None,
    ) -> None:
        self.builder = builder
        self.group = group
        self.item = item
        self.config = config or Config()
        self.resolver = MenuEntryResolver(self.config)

    def resolve(self) -> MenuItemDescriptor:
        """Load the menu file and resolve this helper's entry.

        Raises:
            ConfigError: If the file is missing, malformed or invalid.  The
                error names the menu file.
        """
        path = self.config.menu_path
        menu = load_menu_config(path)
        try:
            return self.resolver.resolve(menu, self.group, self.item)
        except ConfigError as exc:
            raise exc.with_source(path) from exc

    def render_menu(self) -> Any:
        """Resolve the entry and forward it to the builder.

        Returns:
            Whatever the builder returns.
        """
        descriptor = self.resolve()
        return self.builder(
            descriptor.key,
            descriptor.url,
            **descriptor.to_options(self.config.legacy_empty_defaults),
        )
