"""Admin resource scaffolding.

Takes a resource name and an optional model name and generates a Trestle
admin resource split over several files instead of a single one::

    app/admin/user_group_admin.rb      # Trestle.resource(:user_group, model: User)
    app/admin/user_group/table.rb
    app/admin/user_group/form.rb
    app/admin/user_group/routes.rb
    app/admin/user_group/collection.rb
    app/admin/user_group/scopes.rb
    app/admin/user_group/search.rb
    app/admin/user_group/controller.rb

Planning (name derivation and paths) is pure; only ``execute`` touches the
file system.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from gbc_admin.config import Config
from gbc_admin.errors import ArgumentError, ConfigError
from gbc_admin.menu.loader import load_menu_config
from gbc_admin.utils import humanize, pascal_case, print_warning, say_status, snake_case

from .templates import TemplateRenderer, write_file


# Files generated inside the resource folder, in generation order.
FOLDER_FILES: tuple[str, ...] = (
    "table",
    "form",
    "routes",
    "collection",
    "scopes",
    "search",
    "controller",
)

ADMIN_TEMPLATE = "admin"


# ---------------------------------------------------------------------------
# Plan models
# ---------------------------------------------------------------------------


class ResourceNames(BaseModel):
    """Identifiers derived from the resource and model names."""

    model_config = ConfigDict(protected_namespaces=())

    file_name: str = Field(..., description="snake_case resource name, e.g. 'user_group'")
    class_name: str = Field(..., description="PascalCase resource name, e.g. 'UserGroup'")
    display_name: str = Field(..., description="Humanized resource name, e.g. 'User group'")
    model_class: Optional[str] = Field(default=None, description="PascalCase model name")
    model_file_name: Optional[str] = Field(default=None, description="snake_case model name")


class ScaffoldFile(BaseModel):
    """One file to render: a template and where it goes, relative to the target root."""

    template: str = Field(..., description="Template id, e.g. 'table'")
    destination: Path


class ScaffoldPlan(BaseModel):
    """Everything needed to generate one admin resource."""

    model_config = ConfigDict(protected_namespaces=())

    resource_name: str
    model_name: Optional[str] = None
    names: ResourceNames
    admin_root: Path
    files: list[ScaffoldFile] = Field(default_factory=list)

    @property
    def folder(self) -> Path:
        """The resource folder, e.g. ``app/admin/user_group``."""
        return self.admin_root / self.names.file_name

    @property
    def admin_file(self) -> Path:
        """The root admin file, e.g. ``app/admin/user_group_admin.rb``."""
        return next(f.destination for f in self.files if f.template == ADMIN_TEMPLATE)

    @property
    def model_definition(self) -> Optional[str]:
        """The ``model:`` clause of ``Trestle.resource``, or None without a model."""
        if self.names.model_class is None:
            return None
        return f", model: {self.names.model_class}"

    def context(self) -> dict[str, Any]:
        """Template context for every generated file."""
        return {
            **self.names.model_dump(),
            "resource_name": self.resource_name,
            "model_definition": self.model_definition,
        }


# ---------------------------------------------------------------------------
# Scaffolder
# ---------------------------------------------------------------------------


class ResourceScaffolder:
    """Plans and writes admin resource files.

    Args:
        config: Path conventions and file extension; defaults to ``Config()``.
        renderer: Template renderer; defaults to the bundled templates.
    """

    def __init__(
        self,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def plan(self, resource_name: str | None, model_name: str | None = None) -> ScaffoldPlan:
        """Derive names and destination paths for a resource.

        Args:
            resource_name: Resource name, e.g. ``"UserGroup"`` or ``"user_group"``.
            model_name: Associated model, e.g. ``"User"``.  Blank counts as absent.

        Raises:
            ArgumentError: If *resource_name* is missing or has no usable characters.
        """
        if resource_name is None or not resource_name.strip():
            raise ArgumentError("resource_name", "a resource name is required")
        file_name = snake_case(resource_name)
        if not file_name:
            raise ArgumentError(
                "resource_name", f"'{resource_name}' contains no letters or digits"
            )

        model = model_name.strip() if model_name else ""
        model_class = pascal_case(model) if model else None
        if model and not model_class:
            raise ArgumentError("model_name", f"'{model_name}' contains no letters or digits")

        names = ResourceNames(
            file_name=file_name,
            class_name=pascal_case(resource_name),
            display_name=humanize(file_name),
            model_class=model_class,
            model_file_name=snake_case(model) if model else None,
        )

        admin_root = Path(self.config.admin_root)
        ext = self.config.file_extension
        folder = admin_root / file_name
        files = [
            ScaffoldFile(template=template, destination=folder / f"{template}.{ext}")
            for template in FOLDER_FILES
        ]
        files.append(
            ScaffoldFile(
                template=ADMIN_TEMPLATE,
                destination=admin_root / f"{file_name}_admin.{ext}",
            )
        )

        return ScaffoldPlan(
            resource_name=resource_name,
            model_name=model or None,
            names=names,
            admin_root=admin_root,
            files=files,
        )

    def execute(
        self,
        plan: ScaffoldPlan,
        target_root: str | Path | None = None,
        *,
        force: bool = False,
        pretend: bool = False,
    ) -> list[Path]:
        """Render every file of *plan* under *target_root*.

        Existing files with identical content are left alone.  Existing files
        with different content are skipped unless *force* is set.  With
        *pretend*, nothing is written but the same statuses are reported.

        Finally the menu file gets a stub group and item named after the
        resource, so the generated menu block resolves.  The menu file is not
        counted in the returned paths.

        Args:
            plan: Output of :meth:`plan`.
            target_root: Application root; defaults to ``config.root``.
            force: Overwrite files whose content differs.
            pretend: Report only.

        Returns:
            Paths written (or that would have been written), in plan order.
        """
        root = Path(target_root) if target_root is not None else self.config.root
        context = plan.context()

        say_status("building", f"Building new admin resource {plan.names.class_name}")

        folder = root / plan.folder
        if folder.is_dir():
            say_status("exist", plan.folder.as_posix())
        else:
            say_status("create", plan.folder.as_posix())
            if not pretend:
                folder.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for item in plan.files:
            out = root / item.destination
            content = self.renderer.render(_template_file(item.template), context)
            status = _status_for(out, content, force)
            say_status(status, item.destination.as_posix())
            if status in ("identical", "skip"):
                continue
            if not pretend:
                write_file(out, content)
            written.append(out)

        self._add_menu_entry(root, plan, pretend=pretend)
        return written

    def generate(
        self,
        resource_name: str | None,
        model_name: str | None = None,
        target_root: str | Path | None = None,
        **options: bool,
    ) -> list[Path]:
        """Shortcut for ``execute(plan(resource_name, model_name), target_root)``."""
        return self.execute(self.plan(resource_name, model_name), target_root, **options)

    # -- Menu entry --------------------------------------------------------

    def _add_menu_entry(self, root: Path, plan: ScaffoldPlan, *, pretend: bool) -> None:
        """Add the group/item the admin file's menu block resolves to the menu file.

        A missing menu file is created and a missing group is appended as a
        stub.  A group that already exists is never edited.
        """
        key = plan.names.file_name
        relative = plan.admin_root / self.config.menu_file
        path = root / relative
        stub = yaml.safe_dump(
            {key: {"items": {key: {"url": f"/admin/{key}"}}}},
            sort_keys=False,
            default_flow_style=False,
        )

        if not path.exists():
            say_status("create", relative.as_posix())
            if not pretend:
                write_file(path, stub)
            return

        try:
            menu = load_menu_config(path)
        except ConfigError as exc:
            say_status("skip", relative.as_posix())
            print_warning(f"Menu entry '{key}' not added: {exc}")
            return

        groups = {str(name): value for name, value in menu.items()}
        if key not in groups:
            say_status("append", relative.as_posix())
            if not pretend:
                existing = path.read_text(encoding="utf-8")
                separator = "" if existing.endswith("\n") else "\n"
                with path.open("a", encoding="utf-8") as fh:
                    fh.write(separator + stub)
            return

        group = groups[key]
        items = group.get("items") if isinstance(group, Mapping) else None
        if isinstance(items, Mapping) and key in {str(name) for name in items}:
            say_status("identical", relative.as_posix())
            return

        say_status("conflict", relative.as_posix())
        print_warning(
            f"Menu group '{key}' exists without item '{key}'; add it to {relative.as_posix()}"
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _template_file(template: str) -> str:
    return f"{template}.rb.j2"


def _status_for(path: Path, content: str, force: bool) -> str:
    """Return the generator status for writing *content* to *path*."""
    if not path.exists():
        return "create"
    if path.read_bytes() == content.encode("utf-8"):
        return "identical"
    return "force" if force else "skip"
