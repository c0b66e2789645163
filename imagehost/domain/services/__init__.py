"""Domain services - pure layout algorithms."""

from .canvas_layout import CanvasLayout, plan_canvas

__all__ = ['CanvasLayout', 'plan_canvas']
