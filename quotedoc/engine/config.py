# quotedoc/engine/config.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PACKAGE_TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"

QUOTE_TEMPLATE_NAME = "quote-template.html"
DETAILED_ITEM_LIST_NAME = "detailed-item-list.html"


@dataclass(frozen=True)
class TemplatePaths:
    """Where the two partials live: local file paths or http(s) URLs."""

    quote_template: str
    detailed_item_list: str


def build_template_paths(
    *,
    base_url: Optional[str] = None,
    template_dir: Optional[str] = None,
    quote_template_name: str = QUOTE_TEMPLATE_NAME,
    detailed_item_list_name: str = DETAILED_ITEM_LIST_NAME,
) -> TemplatePaths:
    # base_url wins: templates are then served by the front end / CDN
    if base_url:
        base = base_url.rstrip("/")
        return TemplatePaths(
            quote_template=f"{base}/{quote_template_name}",
            detailed_item_list=f"{base}/{detailed_item_list_name}",
        )

    root = Path(template_dir) if template_dir else PACKAGE_TEMPLATE_DIR
    return TemplatePaths(
        quote_template=str(root / quote_template_name),
        detailed_item_list=str(root / detailed_item_list_name),
    )
