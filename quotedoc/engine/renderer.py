# quotedoc/engine/renderer.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
import structlog
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .assets import LoadedTemplates, load_templates
from .config import TemplatePaths
from .context import DocumentMetadata, OrderData, PricingSummary, UiFlags, coerce_number
from .errors import MalformedTemplateError, TemplateLoadError
from .formatting import fmt_currency, fmt_optional_currency, fmt_optional_qty, join_present, nl2br
from .fragments import ACTION_BAR_HTML, SCRIPT_HTML
from .pricing import ACCESSORY_CATEGORIES, PricingSummaryProvider
from .tables import render_customer_info, render_detail_table, render_summary_rows
from .templating import (
    extract_body_content,
    extract_style_blocks,
    insert_after_tag,
    insert_before_tag,
    populate_template,
)

logger = structlog.get_logger("quotedoc")

GST_DIVISOR = 1.1
GST_RATE = 0.1
DEPOSIT_SHARE = 0.5

DEFAULT_TERMS = (
    "A 50% deposit is required to confirm the order; production starts once the deposit is received.\n"
    "The balance is payable on completion of installation.\n"
    "This quotation is valid for 30 days from the issue date."
)

M = TypeVar("M", bound=BaseModel)


def _as_model(model: Type[M], value: Union[M, Mapping[str, Any], None]) -> M:
    if isinstance(value, model):
        return value
    if value is None:
        return model()
    if isinstance(value, Mapping):
        return model.model_validate(dict(value))
    raise TypeError(f"expected {model.__name__} or mapping, got {type(value).__name__}")


# -------------------------
# Template data
# -------------------------


def _grand_total(meta: DocumentMetadata, summary: PricingSummary) -> float:
    offer = coerce_number(meta.final_offer_price, default=None)
    return offer if offer is not None else summary.total_incl_gst


def _accessory_fields(order_data: OrderData, ui: UiFlags, pricing: PricingSummaryProvider) -> Dict[str, str]:
    motor_qty = sum(1 for item in order_data.valid_items if item.motor)
    quantities = (motor_qty, ui.remote_qty, ui.remote_single_qty, ui.charger_qty, ui.cord_qty)

    fields: Dict[str, str] = {}
    for category, qty in zip(ACCESSORY_CATEGORIES, quantities):
        key = to_camel(category.replace("-", "_"))  # remote-single -> remoteSingle
        unit_price = coerce_number(pricing.get_accessory_price(category)) if qty else 0.0
        fields[f"{key}Qty"] = fmt_optional_qty(qty)
        fields[f"{key}Price"] = fmt_optional_currency(qty * unit_price)
    return fields


def build_template_data(
    order_data: OrderData,
    ui: UiFlags,
    meta: DocumentMetadata,
    summary: PricingSummary,
    pricing: PricingSummaryProvider,
) -> Dict[str, Any]:
    grand_total = _grand_total(meta, summary)
    deposit = grand_total * DEPOSIT_SHARE
    items = order_data.items

    data: Dict[str, Any] = {
        "documentTitle": join_present(meta.quote_id, meta.customer_name, meta.customer_phone),
        "quoteId": meta.quote_id,
        "issueDate": meta.issue_date,
        "dueDate": meta.due_date,
        "customerName": meta.customer_name,
        "customerAddress": nl2br(meta.customer_address),
        "customerPhone": meta.customer_phone,
        "customerEmail": meta.customer_email,
        # summary figures
        "firstRbPrice": fmt_currency(summary.first_rb_price),
        "disRbPrice": fmt_currency(summary.dis_rb_price),
        "acceSum": fmt_optional_currency(summary.acce_sum),
        "eAcceSum": fmt_optional_currency(summary.e_acce_sum),
        "deliveryFee": fmt_optional_currency(summary.delivery_fee),
        "installFee": fmt_optional_currency(summary.install_fee),
        "removalFee": fmt_optional_currency(summary.removal_fee),
        "subtotal": fmt_currency(summary.sum_price),
        "mulTimes": summary.mul_times,
        "validItemCount": len(order_data.valid_items),
        # totals
        "ourOffer": fmt_optional_currency(meta.final_offer_price),
        "grandTotal": fmt_currency(grand_total),
        "gst": fmt_currency(grand_total / GST_DIVISOR * GST_RATE),
        "deposit": fmt_currency(deposit),
        "balance": fmt_currency(deposit),
        "savings": fmt_currency(summary.first_rb_price - summary.dis_rb_price),
        # free text
        "generalNotes": nl2br(meta.general_notes),
        "termsConditions": nl2br(meta.terms_conditions or DEFAULT_TERMS),
    }
    data.update(_accessory_fields(order_data, ui, pricing))

    data["customerInfoHtml"] = render_customer_info(meta)
    data["itemsTableBody"] = render_summary_rows(items, summary, ui)
    data["rollerBlindsTable"] = render_detail_table(items, summary)
    return data


# -------------------------
# Document assembly
# -------------------------


def render_quote_document(
    templates: LoadedTemplates,
    pricing: PricingSummaryProvider,
    order_data: Union[OrderData, Mapping[str, Any], None],
    ui: Union[UiFlags, Mapping[str, Any], None],
    metadata: Union[DocumentMetadata, Mapping[str, Any], None],
) -> str:
    """
    Render the full quote: detail page spliced into the summary page, then the
    action bar + copy/print script injected.

    Raises MalformedTemplateError when the detail template has no <body> region.
    """
    order_data = _as_model(OrderData, order_data)
    ui = _as_model(UiFlags, ui)
    meta = _as_model(DocumentMetadata, metadata)

    summary = pricing.get_summary(order_data, ui)
    data = build_template_data(order_data, ui, meta, summary, pricing)

    details_html = populate_template(templates.detailed_item_list, data)
    details_body = extract_body_content(details_html)
    if details_body is None:
        raise MalformedTemplateError("Could not find body content in the details template.")
    details_style = extract_style_blocks(details_html)

    html = insert_before_tag(templates.quote_template, "head", details_style)
    html = insert_before_tag(html, "body", details_body)
    html = populate_template(html, data)

    html = insert_after_tag(html, "body", ACTION_BAR_HTML)
    html = insert_before_tag(html, "body", SCRIPT_HTML)
    return html


class QuoteDocumentRenderer:
    """
    Holds the fetched templates for the lifetime of the service.

    Until initialize() succeeds, render() logs an error and returns None.
    """

    def __init__(self, pricing: PricingSummaryProvider, templates: Optional[LoadedTemplates] = None):
        self.pricing = pricing
        self._templates = templates

    @classmethod
    async def create(cls, pricing: PricingSummaryProvider, paths: TemplatePaths, **kwargs: Any) -> "QuoteDocumentRenderer":
        renderer = cls(pricing)
        await renderer.initialize(paths, **kwargs)
        return renderer

    @property
    def templates(self) -> Optional[LoadedTemplates]:
        return self._templates

    @property
    def is_ready(self) -> bool:
        return self._templates is not None

    async def initialize(
        self,
        paths: TemplatePaths,
        *,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> bool:
        """Fetch both templates once. On failure the previous state is kept; no retry."""
        try:
            templates = await load_templates(paths, timeout=timeout, client=client)
        except TemplateLoadError as e:
            logger.error("templates_load_failed", location=e.location, reason=e.reason)
            return False

        self._templates = templates
        logger.info(
            "templates_loaded",
            quote_template=paths.quote_template,
            detailed_item_list=paths.detailed_item_list,
        )
        return True

    def render(
        self,
        order_data: Union[OrderData, Mapping[str, Any], None],
        ui: Union[UiFlags, Mapping[str, Any], None],
        metadata: Union[DocumentMetadata, Mapping[str, Any], None],
    ) -> Optional[str]:
        templates = self._templates
        if templates is None:
            logger.error("templates_not_loaded")
            return None

        html = render_quote_document(templates, self.pricing, order_data, ui, metadata)
        logger.info("quote_rendered", size=len(html))
        return html
