"""
Highlight color palette
"""
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class HighlightColor:
    """A palette entry with light and dark mode variants"""
    id: str
    name: str
    value: str  # light mode
    dark: str

    def hex_for(self, dark_mode: bool) -> str:
        return self.dark if dark_mode else self.value

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "value": self.value, "dark": self.dark}


HIGHLIGHT_COLORS: List[HighlightColor] = [
    HighlightColor("red", "Red", "#ffccc7", "#5c1a1a"),
    HighlightColor("orange", "Orange", "#ffe7ba", "#5c3d1a"),
    HighlightColor("yellow", "Yellow", "#fffbe6", "#5c5a1a"),
    HighlightColor("green", "Green", "#d9f7be", "#1a5c2e"),
    HighlightColor("blue", "Blue", "#bae7ff", "#1a3d5c"),
    HighlightColor("purple", "Purple", "#efdbff", "#3d1a5c"),
    HighlightColor("pink", "Pink", "#ffd6e7", "#5c1a3d"),
    HighlightColor("gray", "Gray", "#f0f0f0", "#3d3d3d"),
]

_COLORS_BY_ID: Dict[str, HighlightColor] = {color.id: color for color in HIGHLIGHT_COLORS}

DARK_THEMES = ("dark", "black")


def get_color(color_id: Optional[str]) -> Optional[HighlightColor]:
    if not color_id:
        return None
    return _COLORS_BY_ID.get(color_id)


def color_hex(color_id: Optional[str], dark_mode: bool = False) -> Optional[str]:
    """Hex value for a palette color, None for unknown ids"""
    color = get_color(color_id)
    return color.hex_for(dark_mode) if color else None


def is_dark_theme(theme: Optional[str]) -> bool:
    return (theme or "").lower() in DARK_THEMES
