"""API tree traversal."""

from render.context import RenderContext

__all__ = ["RenderContext"]
