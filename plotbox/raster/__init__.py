from .canvas import Clip, draw_hline, draw_pixel, draw_vline, fill_rect, new_canvas
from .draw_lines import clip_segment, draw_segment
from .draw_text import draw_text, text_size

__all__ = [
    "Clip",
    "clip_segment",
    "draw_hline",
    "draw_pixel",
    "draw_segment",
    "draw_text",
    "draw_vline",
    "fill_rect",
    "new_canvas",
    "text_size",
]
