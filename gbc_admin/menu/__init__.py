"""Navigation menu entries resolved from ``app/admin/menu.yml``.

Quick usage::

    from gbc_admin.menu import MenuHelper

    helper = MenuHelper(admin.item, "analytics", "sales_report")
    helper.render_menu()
"""

from gbc_admin.menu.helper import MenuHelper
from gbc_admin.menu.loader import load_menu_config
from gbc_admin.menu.models import Badge, DisplayText, MenuItemDescriptor
from gbc_admin.menu.resolver import MenuEntryResolver

__all__ = [
    "Badge",
    "DisplayText",
    "MenuEntryResolver",
    "MenuHelper",
    "MenuItemDescriptor",
    "load_menu_config",
]
