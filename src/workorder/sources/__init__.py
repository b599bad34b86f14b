from .models import RenderedPage

__all__ = ["RenderedPage"]
