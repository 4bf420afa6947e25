"""Debug preview of a laid-out keyboard.

Draws every key's touch outline, visible face, and icon/label boxes into a
Pillow image so layout changes can be eyeballed without a host UI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw

from keyflay.core.geometry.rect import Rect
from keyflay.core.keyboard.keyboard import TextKeyboard


logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

_BACKGROUND: Color = (33, 33, 33)
_TOUCH_OUTLINE: Color = (90, 90, 90)
_FACE_FILL: Color = (66, 66, 66)
_DRAWABLE_OUTLINE: Color = (0, 170, 255)
_LABEL_OUTLINE: Color = (255, 170, 0)
_TEXT: Color = (235, 235, 235)


def _xyxy(rect: Rect) -> Tuple[int, int, int, int]:
    # PIL boxes are inclusive on all sides.
    return rect.left, rect.top, rect.right - 1, rect.bottom - 1


def canvas_size(keyboard: TextKeyboard) -> Tuple[int, int]:
    right = 0
    bottom = 0
    for key in keyboard.keys():
        right = max(right, key.touch_bounds.right)
        bottom = max(bottom, key.touch_bounds.bottom)
    return max(1, right), max(1, bottom)


def render_keyboard(keyboard: TextKeyboard, *, background: Color = _BACKGROUND) -> Image.Image:
    """Render the current bounds of *keyboard*; call after `TextKeyboard.layout`."""

    img = Image.new("RGB", canvas_size(keyboard), color=background)
    draw = ImageDraw.Draw(img)

    for key in keyboard.keys():
        touch = key.touch_bounds
        visible = key.visible_bounds
        if touch.is_empty():
            continue

        draw.rectangle(_xyxy(touch), outline=_TOUCH_OUTLINE)
        if not visible.is_empty():
            radius = max(1, min(visible.width, visible.height) // 8)
            draw.rounded_rectangle(_xyxy(visible), radius=radius, fill=_FACE_FILL)

        drawable = key.visible_drawable_bounds
        label = key.visible_label_bounds
        if not drawable.is_empty():
            draw.rectangle(_xyxy(drawable), outline=_DRAWABLE_OUTLINE)
        if not label.is_empty():
            draw.rectangle(_xyxy(label), outline=_LABEL_OUTLINE)
            text = key.data.label
            if text:
                draw.text((label.left + 2, label.top + 2), text, fill=_TEXT)

    return img


def save_preview(keyboard: TextKeyboard, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    img = render_keyboard(keyboard)
    img.save(out, format="PNG")
    logger.info("Wrote layout preview %s (%dx%d)", out, img.width, img.height)
    return out
