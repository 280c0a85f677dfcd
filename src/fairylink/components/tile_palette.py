from __future__ import annotations

import colorsys
from dataclasses import dataclass, field
from typing import Dict, Tuple

RGB = Tuple[int, int, int]


def build_palette(count: int) -> Dict[int, RGB]:
    """Evenly spaced hues, alternating brightness so neighbouring ids stay distinct."""
    colors: Dict[int, RGB] = {}
    for type_id in range(1, count + 1):
        hue = ((type_id - 1) * 0.618033988749895) % 1.0
        value = 0.92 if type_id % 2 else 0.72
        r, g, b = colorsys.hsv_to_rgb(hue, 0.62, value)
        colors[type_id] = (int(r * 255), int(g * 255), int(b * 255))
    return colors


@dataclass(slots=True)
class TilePalette:
    """Colour lookup for tile type ids, stored on a single entity."""
    colors: Dict[int, RGB] = field(default_factory=dict)
    fallback: RGB = (128, 128, 128)

    def color_for(self, type_id: int) -> RGB:
        return self.colors.get(type_id, self.fallback)

    def text_color_for(self, type_id: int) -> RGB:
        r, g, b = self.color_for(type_id)
        luminance = 0.299 * r + 0.587 * g + 0.114 * b
        return (20, 20, 30) if luminance > 140 else (245, 245, 245)
