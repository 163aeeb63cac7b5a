# f95postparser/__init__.py

from f95postparser.elements import (
    ElementType,
    PostElement,
    create_empty_element,
    get_element_by_name,
)
from f95postparser.errors import ParameterError
from f95postparser.extractor import extract_data_from_html, extract_data_from_post

__all__ = [
    "ElementType",
    "PostElement",
    "ParameterError",
    "create_empty_element",
    "extract_data_from_html",
    "extract_data_from_post",
    "get_element_by_name",
]
