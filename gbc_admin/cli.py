"""Command-line interface for gbc-admin.

Two sub-commands:

* ``generate NAME [MODEL]`` scaffolds an admin resource.
* ``menu [GROUP ITEM]`` resolves one menu entry, or lists every entry.
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError

from gbc_admin.config import Config
from gbc_admin.errors import ArgumentError, ConfigError
from gbc_admin.menu import MenuEntryResolver, load_menu_config
from gbc_admin.scaffolder import ResourceScaffolder
from gbc_admin.utils import console, print_error, print_success, print_summary_table


def _build_config(args) -> Config:
    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"invalid GBC_* environment configuration: {exc}")
        sys.exit(1)
    if args.root is not None:
        config.root = Path(args.root)
    return config


def _run_generate(args) -> None:
    config = _build_config(args)
    scaffolder = ResourceScaffolder(config)
    try:
        plan = scaffolder.plan(args.name, args.model)
    except ArgumentError as exc:
        print_error(str(exc))
        sys.exit(1)

    written = scaffolder.execute(plan, force=args.force, pretend=args.pretend)
    verb = "Would write" if args.pretend else "Wrote"
    print_success(f"{verb} {len(written)} file(s) for {plan.names.class_name}")


def _run_menu(args) -> None:
    config = _build_config(args)
    if args.legacy:
        config.legacy_empty_defaults = True
    path = Path(args.file) if args.file else config.menu_path
    resolver = MenuEntryResolver(config)

    if (args.group is None) != (args.item is None):
        print_error("GROUP and ITEM must be given together")
        sys.exit(2)

    try:
        menu = load_menu_config(path)
        if args.group is not None:
            descriptors = [resolver.resolve(menu, args.group, args.item)]
        else:
            descriptors = resolver.resolve_all(menu)
    except ConfigError as exc:
        if exc.source is None:
            exc = exc.with_source(path)
        print_error(str(exc))
        sys.exit(1)

    if args.group is not None:
        descriptor = descriptors[0]
        console.print_json(
            data={
                "key": descriptor.key,
                "url": descriptor.url,
                **descriptor.to_options(config.legacy_empty_defaults),
            }
        )
        return

    rows = [
        {
            "Priority": str(d.priority),
            "Group": d.group,
            "Key": d.key,
            "Label": str(d.label),
            "URL": d.url,
            "Icon": d.icon or "",
            "Target": d.target,
            "Badge": str(d.badge.text) if d.badge else "",
        }
        for d in descriptors
    ]
    print_summary_table(
        rows,
        ["Priority", "Group", "Key", "Label", "URL", "Icon", "Target", "Badge"],
        title=f"Menu ({path})",
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``gbc-admin`` / ``python -m gbc_admin.cli``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="gbc-admin",
        description="Trestle admin helpers -- resource scaffolding and menu entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gbc-admin generate UserGroup User\n"
            "  gbc-admin generate product --pretend\n"
            "  gbc-admin menu analytics sales_report\n"
            "  gbc-admin menu --file config/menu.yml\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser(
        "generate", help="Generate an admin folder and files for a resource"
    )
    generate.add_argument(
        "name",
        help="The name for the admin resource (e.g. Product, UserGroup)",
    )
    generate.add_argument(
        "model",
        nargs="?",
        default=None,
        help="The associated model name (optional, e.g. Product, Item)",
    )
    generate.add_argument(
        "--root",
        default=None,
        help="Rails application root (default: $GBC_ROOT or .)",
    )
    generate.add_argument(
        "--force", action="store_true", help="Overwrite files that already exist"
    )
    generate.add_argument(
        "--pretend", action="store_true", help="Report what would be written, write nothing"
    )
    generate.set_defaults(handler=_run_generate)

    menu = subparsers.add_parser("menu", help="Resolve entries of the menu file")
    menu.add_argument("group", nargs="?", default=None, help="Group key")
    menu.add_argument("item", nargs="?", default=None, help="Item key")
    menu.add_argument(
        "--root",
        default=None,
        help="Rails application root (default: $GBC_ROOT or .)",
    )
    menu.add_argument(
        "--file",
        default=None,
        help="Menu file (default: <root>/app/admin/menu.yml)",
    )
    menu.add_argument(
        "--legacy",
        action="store_true",
        help="Show absent icon/badge as empty strings",
    )
    menu.set_defaults(handler=_run_menu)

    args = parser.parse_args(argv)
    args.handler(args)


if __name__ == "__main__":
    main()
