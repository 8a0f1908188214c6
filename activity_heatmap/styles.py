"""Drawing styles with inheritance from chart defaults."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Style:
    """Visual attributes for one part of the chart.

    Every field left as None is taken from the defaults passed to
    :meth:`inherit_from`.
    """

    show: bool = True
    fill_color: Optional[str] = None
    stroke_color: Optional[str] = None
    stroke_width: Optional[float] = None
    font: Any = None
    font_size: Optional[float] = None
    font_color: Optional[str] = None
    padding_top: Optional[int] = None
    text_align: Optional[str] = None

    def inherit_from(self, defaults: "Style") -> "Style":
        overrides = {
            f.name: getattr(defaults, f.name)
            for f in fields(self)
            if f.name != "show" and getattr(self, f.name) is None
        }
        return replace(self, **overrides)


def hidden() -> Style:
    return Style(show=False)
