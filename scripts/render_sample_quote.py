import asyncio
from pathlib import Path

from app.core.settings import resolve_template_paths, settings
from app.services.pricing import PrecomputedPricingProvider
from quotedoc.engine.renderer import QuoteDocumentRenderer

quote_data = {
    "items": [
        {
            "width": 1200,
            "height": 1500,
            "fabric": "Sanctuary",
            "fabricType": "B3",
            "color": "Chalk",
            "location": "Bedroom 1",
            "winder": "HD",
            "motor": "",
            "linePrice": 310.5,
        },
        {
            "width": 900,
            "height": 1400,
            "fabric": "Vibe Screen 5%",
            "fabricType": "SN",
            "color": "Grey",
            "location": "Lounge",
            "dual": "D",
            "motor": True,
            "linePrice": 280,
        },
        {"width": "", "height": 1400, "fabric": "Skipped (no width)", "linePrice": 99},
    ],
    "summary": {
        "firstRbPrice": 590.5,
        "disRbPrice": 531.45,
        "acceSum": 0,
        "eAcceSum": 370,
        "deliveryFee": 100,
        "installFee": 40,
        "removalFee": 0,
        "mulTimes": 1,
        "sumPrice": 1041.45,
        "totalInclGst": 1041.45,
    },
}

ui = {"deliveryQty": 1, "installFeeExcluded": True, "remoteQty": 1}

metadata = {
    "quoteId": "RB2025-0117",
    "issueDate": "2025-01-17",
    "dueDate": "2025-01-31",
    "customerName": "Jane Citizen",
    "customerAddress": "12 Example St\nSpringfield NSW 2000",
    "customerPhone": "0400 000 000",
    "customerEmail": "jane@example.com",
    "generalNotes": "Measure check booked.\nAccess via side gate.",
}


async def main() -> None:
    renderer = await QuoteDocumentRenderer.create(
        PrecomputedPricingProvider(settings.ACCESSORY_PRICES),
        resolve_template_paths(settings),
    )
    html = renderer.render(quote_data, ui, metadata)
    if html is None:
        raise SystemExit("Templates could not be loaded")

    out = Path("sample_quote.html")
    out.write_text(html, encoding="utf-8")
    print(f"Wrote {out.resolve()}")


if __name__ == "__main__":
    asyncio.run(main())
