from .context import DocumentMetadata, OrderData, OrderItem, PricingSummary, UiFlags
from .errors import MalformedTemplateError, TemplateLoadError
from .renderer import QuoteDocumentRenderer, render_quote_document

__all__ = [
    "DocumentMetadata",
    "MalformedTemplateError",
    "OrderData",
    "OrderItem",
    "PricingSummary",
    "QuoteDocumentRenderer",
    "TemplateLoadError",
    "UiFlags",
    "render_quote_document",
]
