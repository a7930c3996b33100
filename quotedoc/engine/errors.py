# quotedoc/engine/errors.py
from __future__ import annotations


class MalformedTemplateError(ValueError):
    """A template is missing a region the renderer needs (e.g. <body>...</body>)."""


class TemplateLoadError(RuntimeError):
    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Could not load template {location!r}: {reason}")
