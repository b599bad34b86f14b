from .models import NormalizedOrder, RawExtractionResult, RawLineItem, ShippingAddress
from .validator import DESCRIPTION_LIMIT, normalize

__all__ = [
    "DESCRIPTION_LIMIT",
    "NormalizedOrder",
    "RawExtractionResult",
    "RawLineItem",
    "ShippingAddress",
    "normalize",
]
