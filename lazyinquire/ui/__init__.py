"""Rendering layer shared by all prompt variants."""

from __future__ import annotations

from .backend import Backend
from .render_config import (
    RenderConfig,
    available_theme_names,
    get_global_render_config,
    resolve_render_config,
    set_global_render_config,
    stylize,
)

__all__ = [
    "Backend",
    "RenderConfig",
    "available_theme_names",
    "get_global_render_config",
    "resolve_render_config",
    "set_global_render_config",
    "stylize",
]
