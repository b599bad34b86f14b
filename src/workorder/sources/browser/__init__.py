from .renderer import PlaywrightRenderer

__all__ = ["PlaywrightRenderer"]
