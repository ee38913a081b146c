"""Pydantic v2 models for resolved navigation-menu entries.

A ``MenuItemDescriptor`` is what the resolver hands back to the caller; its
``to_options`` output is the keyword set the host admin framework's menu
builder expects.
"""

from __future__ import annotations

from typing import Any, Optional

from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, Field


class DisplayText(BaseModel):
    """Text destined for HTML, either raw or already escaped.

    Menu labels come from administrator-authored YAML and may contain
    markup, so they are ``pre_escaped`` and emitted verbatim.  Raw text is
    escaped at the rendering boundary.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    pre_escaped: bool = False

    @classmethod
    def raw(cls, value: str) -> "DisplayText":
        return cls(value=value, pre_escaped=False)

    @classmethod
    def safe(cls, value: str) -> "DisplayText":
        return cls(value=value, pre_escaped=True)

    def as_markup(self) -> Markup:
        """Return the value as ``Markup``, escaping it first unless pre-escaped."""
        if self.pre_escaped:
            return Markup(self.value)
        return escape(self.value)

    def __html__(self) -> str:
        return str(self.as_markup())

    def __str__(self) -> str:
        return self.value


class Badge(BaseModel):
    """A decorated label rendered next to a menu item."""

    model_config = ConfigDict(frozen=True)

    text: DisplayText
    css_class: str = Field(..., description="e.g. 'badge-success'")

    def to_options(self) -> dict[str, Any]:
        return {"text": self.text.as_markup(), "class": self.css_class}


class MenuItemDescriptor(BaseModel):
    """A fully resolved and validated navigation-menu entry."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Item key in the menu file")
    url: str
    priority: int = Field(..., description="group priority * 100 + item priority")
    label: DisplayText
    icon: Optional[str] = Field(default=None, description="e.g. 'fa fa-dashboard'")
    target: str = "_self"
    badge: Optional[Badge] = None
    group: str = Field(..., description="Display label of the owning group")

    def to_options(self, legacy_empty_defaults: bool = False) -> dict[str, Any]:
        """Keyword options for the host menu builder.

        Absent icon and badge are left out entirely.  With
        *legacy_empty_defaults* they are forwarded as empty strings instead,
        which is what older call sites expect.
        """
        options: dict[str, Any] = {
            "priority": self.priority,
            "label": self.label.as_markup(),
            "target": self.target,
            "group": self.group,
        }
        if self.icon is not None:
            options["icon"] = self.icon
        elif legacy_empty_defaults:
            options["icon"] = ""
        if self.badge is not None:
            options["badge"] = self.badge.to_options()
        elif legacy_empty_defaults:
            options["badge"] = ""
        return options
