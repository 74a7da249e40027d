"""Domain layer: errors, schemas, title rules."""

from .errors import (
    ErrorCodes,
    InvalidTitleError,
    PageNotFoundError,
    PageStoreError,
    RenderError,
    TemplateSetError,
    WikiError,
)
from .schemas import Page
from .titles import extract_title, is_valid_title, validate_title

__all__ = [
    "ErrorCodes",
    "WikiError",
    "InvalidTitleError",
    "PageNotFoundError",
    "PageStoreError",
    "TemplateSetError",
    "RenderError",
    "Page",
    "extract_title",
    "is_valid_title",
    "validate_title",
]
