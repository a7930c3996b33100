import pytest

from quotedoc.engine.assets import LoadedTemplates
from quotedoc.engine.context import PricingSummary


QUOTE_TEMPLATE = (
    "<!DOCTYPE html><html><head><title>{{documentTitle}}</title></head>"
    "<body><h1>{{quoteId}}</h1>"
    "<table><tbody>{{{itemsTableBody}}}</tbody></table>"
    "<p class='total'>{{grandTotal}}</p>"
    "</body></html>"
)

DETAIL_TEMPLATE = (
    "<html><head><style>.details{color:red}</style></head>"
    "<body class=\"details-body\"><div class='details'>{{{rollerBlindsTable}}}</div></body></html>"
)


class StaticPricingProvider:
    """Test double for the calculation engine."""

    def __init__(self, summary=None, prices=None):
        self.summary = PricingSummary.model_validate(summary or {})
        self.prices = prices or {}

    def get_summary(self, order_data, ui):
        return self.summary

    def get_accessory_price(self, category):
        return self.prices.get(category, 0)


@pytest.fixture
def anyio_backend():
    # Dwing anyio om alleen asyncio te gebruiken (geen Trio nodig)
    return "asyncio"


@pytest.fixture
def templates():
    return LoadedTemplates(quote_template=QUOTE_TEMPLATE, detailed_item_list=DETAIL_TEMPLATE)


@pytest.fixture
def provider():
    return StaticPricingProvider(
        summary={
            "firstRbPrice": 200,
            "disRbPrice": 150,
            "acceSum": 0,
            "eAcceSum": 25,
            "deliveryFee": 100,
            "installFee": 40,
            "removalFee": 0,
            "mulTimes": 1.1,
            "sumPrice": 315,
            "totalInclGst": 330,
        },
        prices={"motor": 270, "remote": 100, "charger": 50, "cord": 10},
    )


@pytest.fixture
def screen_item():
    return {
        "width": 100,
        "height": 100,
        "fabric": "Vibe Screen",
        "fabricType": "SN",
        "color": "Grey",
        "location": "Lounge",
        "motor": True,
        "linePrice": 50,
    }


@pytest.fixture
def metadata():
    return {
        "quoteId": "Q-1001",
        "issueDate": "2025-01-17",
        "dueDate": "2025-01-31",
        "customerName": "Jane Citizen",
        "customerAddress": "12 Example St\nSpringfield",
        "customerPhone": "0400 000 000",
        "customerEmail": "jane@example.com",
    }


@pytest.fixture
def make_provider():
    return StaticPricingProvider
