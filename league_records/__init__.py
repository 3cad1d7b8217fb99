"""League records application package."""

from __future__ import annotations

from typing import Any

__all__ = ["render_league_report"]


def render_league_report(*args: Any, **kwargs: Any) -> None:
    """Import the rich renderer on first use to keep package import light."""

    from .report import render_league_report as _render_league_report

    return _render_league_report(*args, **kwargs)
