"""gbc-admin scaffolder -- generates multi-file admin resources.

Instead of a single ``app/admin/<resource>_admin.rb`` the generated resource
is split into a table, form, routes, collection, scopes, search and
controller, each in its own file under ``app/admin/<resource>/``.

Quick usage::

    from gbc_admin.scaffolder import ResourceScaffolder

    scaffolder = ResourceScaffolder()
    plan = scaffolder.plan("UserGroup", "User")
    written = scaffolder.execute(plan, "/path/to/rails/app")
"""

from gbc_admin.scaffolder.generator import (
    ResourceNames,
    ResourceScaffolder,
    ScaffoldFile,
    ScaffoldPlan,
)
from gbc_admin.scaffolder.templates import TemplateRenderer

__all__ = [
    "ResourceNames",
    "ResourceScaffolder",
    "ScaffoldFile",
    "ScaffoldPlan",
    "TemplateRenderer",
]
