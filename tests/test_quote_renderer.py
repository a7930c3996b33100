import pytest

from quotedoc.engine.assets import LoadedTemplates
from quotedoc.engine.context import DocumentMetadata, OrderData, UiFlags
from quotedoc.engine.errors import MalformedTemplateError
from quotedoc.engine.fragments import ACTION_BAR_HTML, SCRIPT_HTML
from quotedoc.engine.renderer import (
    DEFAULT_TERMS,
    QuoteDocumentRenderer,
    build_template_data,
    render_quote_document,
)


def _data(provider, quote_data=None, ui=None, metadata=None):
    order = OrderData.model_validate(quote_data or {})
    ui = UiFlags.model_validate(ui or {})
    meta = DocumentMetadata.model_validate(metadata or {})
    return build_template_data(order, ui, meta, provider.get_summary(order, ui), provider)


# -------------------------
# Template data
# -------------------------


def test_final_offer_price_overrides_computed_total(provider):
    data = _data(provider, metadata={"finalOfferPrice": "1000"})
    assert data["grandTotal"] == "$1000.00"
    assert data["gst"] == "$90.91"
    assert data["deposit"] == "$500.00"
    assert data["balance"] == "$500.00"
    assert data["ourOffer"] == "$1000.00"


def test_non_numeric_offer_falls_back_to_summary_total(provider):
    data = _data(provider, metadata={"finalOfferPrice": ""})
    assert data["grandTotal"] == "$330.00"
    assert data["gst"] == "$30.00"
    assert data["ourOffer"] == ""


def test_savings_and_optional_fees(provider):
    data = _data(provider)
    assert data["savings"] == "$50.00"
    assert data["acceSum"] == ""
    assert data["eAcceSum"] == "$25.00"
    assert data["removalFee"] == ""
    assert data["deliveryFee"] == "$100.00"


def test_document_title_skips_missing_parts(provider):
    data = _data(provider, metadata={"quoteId": "Q-1", "customerName": "Jane"})
    assert data["documentTitle"] == "Q-1 Jane"

    data = _data(provider, metadata={"customerPhone": "0400"})
    assert data["documentTitle"] == "0400"


def test_notes_and_default_terms(provider):
    data = _data(provider, metadata={"generalNotes": "line 1\nline 2"})
    assert data["generalNotes"] == "line 1<br>line 2"
    assert data["termsConditions"] == DEFAULT_TERMS.replace("\n", "<br>")

    data = _data(provider, metadata={"termsConditions": "Cash only"})
    assert data["termsConditions"] == "Cash only"


def test_accessory_breakdown(provider, screen_item):
    data = _data(
        provider,
        quote_data={"items": [screen_item, {**screen_item, "motor": ""}, {**screen_item, "width": None}]},
        ui={"remoteQty": 2, "chargerQty": 0},
    )
    assert data["motorQty"] == "1"
    assert data["motorPrice"] == "$270.00"
    assert data["remoteQty"] == "2"
    assert data["remotePrice"] == "$200.00"
    assert data["chargerQty"] == ""
    assert data["chargerPrice"] == ""
    assert data["validItemCount"] == 2


def test_malformed_numbers_default_to_zero(provider):
    data = _data(
        provider,
        quote_data={"items": [{"width": "abc", "height": 10, "linePrice": "oops"}]},
        ui={"deliveryQty": "x", "removalQty": None},
    )
    assert data["validItemCount"] == 0


# -------------------------
# Document assembly
# -------------------------


def test_render_splices_detail_page_into_quote(templates, provider, screen_item, metadata):
    html = render_quote_document(templates, provider, {"items": [screen_item]}, {}, metadata)

    assert "<style>.details{color:red}</style></head>" in html
    assert "<div class='details'>" in html
    assert "Roller Blinds - Detailed List" in html
    assert '<td data-label="Price" class="text-right">$55.00</td>' in html
    assert "<h1>Q-1001</h1>" in html
    assert "<title>Q-1001 Jane Citizen 0400 000 000</title>" in html
    assert "<p class='total'>$330.00</p>" in html
    # detail page body wrapper itself is not copied over
    assert "details-body" not in html


def test_render_injects_action_bar_and_script(templates, provider):
    html = render_quote_document(templates, provider, {}, {}, {})

    assert "<body>" + ACTION_BAR_HTML in html
    assert SCRIPT_HTML + "</body>" in html
    assert html.index("<div class='details'>") < html.index(SCRIPT_HTML)
    assert html.count('id="action-bar"') == 1


def test_unknown_placeholders_survive(provider):
    templates = LoadedTemplates(
        quote_template="<html><head></head><body>{{doesNotExist}}</body></html>",
        detailed_item_list="<html><body>{{{alsoUnknown}}}</body></html>",
    )
    html = render_quote_document(templates, provider, {}, {}, {})
    assert "{{doesNotExist}}" in html
    assert "{{{alsoUnknown}}}" in html


def test_missing_detail_body_raises(provider):
    templates = LoadedTemplates(
        quote_template="<html><head></head><body></body></html>",
        detailed_item_list="<div>{{{rollerBlindsTable}}}</div>",
    )
    with pytest.raises(MalformedTemplateError):
        render_quote_document(templates, provider, {}, {}, {})


def test_render_is_idempotent(templates, provider, screen_item, metadata):
    renderer = QuoteDocumentRenderer(provider, templates)
    args = ({"items": [screen_item]}, {"installFeeExcluded": True}, metadata)
    assert renderer.render(*args) == renderer.render(*args)


def test_render_accepts_models(templates, provider, screen_item):
    renderer = QuoteDocumentRenderer(provider, templates)
    html = renderer.render(
        OrderData.model_validate({"items": [screen_item]}),
        UiFlags(),
        DocumentMetadata(quote_id="Q-9"),
    )
    assert "<h1>Q-9</h1>" in html


def test_render_without_templates_returns_none(provider):
    renderer = QuoteDocumentRenderer(provider)
    assert renderer.is_ready is False
    assert renderer.render({}, {}, {}) is None


def test_render_rejects_unexpected_input_type(templates, provider):
    renderer = QuoteDocumentRenderer(provider, templates)
    with pytest.raises(TypeError):
        renderer.render(["not", "a", "mapping"], {}, {})


def test_remote_single_accessory_fields(make_provider, screen_item):
    provider = make_provider(prices={"remote-single": 80})
    data = _data(provider, quote_data={"items": [screen_item]}, ui={"remoteSingleQty": 2})
    assert data["remoteSingleQty"] == "2"
    assert data["remoteSinglePrice"] == "$160.00"
    assert data["deposit"] == data["balance"]
