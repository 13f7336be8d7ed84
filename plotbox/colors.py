from __future__ import annotations


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
LIGHT_GRAY: RGBA = (192, 192, 192, 255)
BLUE: RGBA = (0, 0, 255, 255)
DARK_GREEN: RGBA = (0, 127, 0, 255)
RED: RGBA = (255, 0, 0, 255)
DARK_YELLOW: RGBA = (128, 128, 0, 255)
VIOLET: RGBA = (128, 0, 128, 255)
SELECTION_BLUE: RGBA = (0, 120, 215, 255)

PALETTE: tuple[RGBA, ...] = (BLUE, DARK_GREEN, RED, DARK_YELLOW, VIOLET)


def palette_color(index: int) -> RGBA:
    return PALETTE[index % len(PALETTE)]


def coerce_color(color: tuple[int, int, int] | tuple[int, int, int, int], alpha: float = 1.0) -> RGBA:
    if len(color) == 3:
        r, g, b = color
        a = int(max(0.0, min(1.0, alpha)) * 255)
        return (r, g, b, a)
    r, g, b, a = color
    out_a = int(max(0.0, min(1.0, alpha)) * a)
    return (r, g, b, out_a)
