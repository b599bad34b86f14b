from .printavo import PrintavoClient

__all__ = ["PrintavoClient"]
