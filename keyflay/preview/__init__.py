from .render import render_keyboard, save_preview

__all__ = ["render_keyboard", "save_preview"]
