from .fields import extract_field, first_match
from .line_items import extract_line_items
from .utils import SIZE_BUCKETS, extract_number, extract_price, infer_size_bucket
from .workorder_parser import parse_document, parse_workorder_html, transform_page

__all__ = [
    "SIZE_BUCKETS",
    "extract_field",
    "extract_line_items",
    "extract_number",
    "extract_price",
    "first_match",
    "infer_size_bucket",
    "parse_document",
    "parse_workorder_html",
    "transform_page",
]
