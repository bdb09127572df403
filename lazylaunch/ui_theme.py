"""UI theme definitions and selection helpers.

Themes are ANSI SGR palettes for the input box, result list, and selection.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class LauncherTheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    border: str
    prompt: str
    query: str
    preview: str
    item: str
    highlight: str
    highlight_symbol: str = ">> "


DEFAULT_THEME = LauncherTheme(
    name="default",
    reset="\033[0m",
    border="\033[2m",
    prompt="\033[1;38;5;81m",
    query="\033[38;5;252m",
    preview="\033[38;5;229m",
    item="\033[38;5;252m",
    # Black on white, bold.
    highlight="\033[1;30;47m",
)

MONO_THEME = LauncherTheme(
    name="mono",
    reset="\033[0m",
    border="",
    prompt="\033[1m",
    query="",
    preview="\033[4m",
    item="",
    highlight="\033[7m",
)

_THEMES: dict[str, LauncherTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, highlight_symbol: str | None = None) -> LauncherTheme:
    """Return theme ``name`` (default on unknown) with an optional symbol override."""
    theme = _THEMES.get((name or "").strip().lower(), DEFAULT_THEME)
    if highlight_symbol is None or highlight_symbol == theme.highlight_symbol:
        return theme
    return replace(theme, highlight_symbol=highlight_symbol)
