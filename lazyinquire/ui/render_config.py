"""Render configuration and themes for prompt frames.

Styles are pygments ``ansiformat`` attributes: a console color name, optionally
wrapped in ``*bold*``, ``_underline_`` or ``+blink+``. An empty style renders
text unstyled. Nothing here affects navigation semantics.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass

from pygments.console import ansiformat, codes

from ..config import load_theme_name
from ..errors import InvalidConfigurationError

_STYLE_FIELDS = (
    "prompt_prefix_style",
    "prompt_style",
    "answer_style",
    "path_style",
    "option_style",
    "selected_option_style",
    "directory_style",
    "symlink_style",
    "error_style",
    "help_message_style",
    "filter_style",
    "scroll_marker_style",
    "canceled_prompt_style",
)


def _style_color_name(style: str) -> str:
    """Strip ``+``/``*``/``_`` wrappers in the order ``ansiformat`` does."""
    for marker in ("+", "*", "_"):
        if style[:1] == style[-1:] == marker:
            style = style[1:-1]
    return style


def is_valid_style(style: str) -> bool:
    """Return whether ``style`` is an empty or known ``ansiformat`` attribute."""
    return _style_color_name(style) in codes


def stylize(style: str, text: str) -> str:
    """Apply ``style`` to ``text``; empty styles and empty text pass through."""
    if not style or not text:
        return text
    return ansiformat(style, text)


@dataclass(frozen=True)
class RenderConfig:
    """Symbols and styles used by the backend when drawing a prompt."""

    name: str = "default"
    prompt_prefix: str = "?"
    answered_prompt_prefix: str = ">"
    highlighted_option_prefix: str = ">"
    unhighlighted_option_prefix: str = " "
    scroll_up_prefix: str = "^"
    scroll_down_prefix: str = "v"
    error_prefix: str = "#"
    directory_suffix: str = "/"
    symlink_suffix: str = "@"
    canceled_prompt_indicator: str = "<canceled>"

    prompt_prefix_style: str = "*green*"
    prompt_style: str = "bold"
    answer_style: str = "cyan"
    path_style: str = "_brightblue_"
    option_style: str = ""
    selected_option_style: str = "*cyan*"
    directory_style: str = "*blue*"
    symlink_style: str = "magenta"
    error_style: str = "red"
    help_message_style: str = "cyan"
    filter_style: str = "*brightcyan*"
    scroll_marker_style: str = "gray"
    canceled_prompt_style: str = "gray"

    def __post_init__(self) -> None:
        for field_name in _STYLE_FIELDS:
            style = getattr(self, field_name)
            if not is_valid_style(style):
                raise InvalidConfigurationError(f"unknown style {style!r} for {field_name}")

    @classmethod
    def default_colored(cls) -> RenderConfig:
        return DEFAULT_RENDER_CONFIG

    @classmethod
    def empty(cls) -> RenderConfig:
        """Config with every style empty; symbols are kept."""
        return PLAIN_RENDER_CONFIG

    def replace(self, **changes: object) -> RenderConfig:
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)

    def is_plain(self) -> bool:
        return all(not getattr(self, field_name) for field_name in _STYLE_FIELDS)


DEFAULT_RENDER_CONFIG = RenderConfig()

OCEAN_RENDER_CONFIG = RenderConfig(
    name="ocean",
    prompt_prefix_style="*cyan*",
    prompt_style="*brightblue*",
    answer_style="brightcyan",
    path_style="_cyan_",
    selected_option_style="*brightcyan*",
    directory_style="*cyan*",
    symlink_style="brightmagenta",
    error_style="*brightred*",
    help_message_style="brightblue",
    filter_style="*white*",
)

PLAIN_RENDER_CONFIG = RenderConfig(
    name="plain",
    **{field_name: "" for field_name in _STYLE_FIELDS},
)

_THEMES: dict[str, RenderConfig] = {
    DEFAULT_RENDER_CONFIG.name: DEFAULT_RENDER_CONFIG,
    OCEAN_RENDER_CONFIG.name: OCEAN_RENDER_CONFIG,
}

_global_render_config: RenderConfig | None = None


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_RENDER_CONFIG.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_RENDER_CONFIG.name


def resolve_render_config(name: str | None, *, no_color: bool = False) -> RenderConfig:
    """Return the concrete config for a theme name and color mode.

    ``no_color`` or a non-empty ``NO_COLOR`` environment variable selects the
    plain config regardless of ``name``.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return PLAIN_RENDER_CONFIG
    return _THEMES[normalize_theme_name(name)]


def get_global_render_config() -> RenderConfig:
    """Return the process-wide default config, loading the user theme once."""
    global _global_render_config
    if _global_render_config is None:
        _global_render_config = resolve_render_config(load_theme_name())
    return _global_render_config


def set_global_render_config(config: RenderConfig | None) -> None:
    """Override the process-wide default; ``None`` reloads it from user config."""
    global _global_render_config
    _global_render_config = config


__all__ = [
    "RenderConfig",
    "DEFAULT_RENDER_CONFIG",
    "OCEAN_RENDER_CONFIG",
    "PLAIN_RENDER_CONFIG",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_render_config",
    "get_global_render_config",
    "set_global_render_config",
    "is_valid_style",
    "stylize",
]
