# quotedoc/engine/tables.py
"""
HTML fragments embedded into the quote templates:

  - rollerBlindsTable: per-item detail list (detail page)
  - itemsTableBody:    page-one summary rows
  - customerInfoHtml:  address block

Content is inserted as-is (no escaping); the only text transform is
newline -> <br> for multi-line fields.
"""
from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from .context import BLOCKOUT_CODES, SCREEN_CODE, DocumentMetadata, OrderItem, PricingSummary, UiFlags
from .formatting import fmt_currency, nl2br

CHECKMARK = "✔"

# (header, column width %)
DETAIL_COLUMNS: Tuple[Tuple[str, int], ...] = (
    ("#", 5),
    ("F-NAME", 20),
    ("F-COLOR", 15),
    ("Location", 12),
    ("HD", 9),
    ("Dual", 9),
    ("Motor", 9),
    ("Price", 13),
)


# -------------------------
# Detail table
# -------------------------


def fabric_class(item: OrderItem) -> str:
    if "light-filter" in item.fabric.lower():
        return "bg-light-filter"
    if item.fabric_type == SCREEN_CODE:
        return "bg-screen"
    if item.fabric_type in BLOCKOUT_CODES:
        return "bg-blockout"
    return ""


def _cell(label: str, content: Any, css_class: str = "") -> str:
    empty = content is None or content == ""
    classes = f"{css_class} {'is-empty-cell' if empty else ''}".strip()
    return f'<td data-label="{label}" class="{classes}">{"" if empty else content}</td>'


def _detail_row(index: int, item: OrderItem, mul_times: float) -> str:
    bg = fabric_class(item)
    final_price = item.line_price * mul_times
    cells = [
        _cell("#", index, "text-center"),
        _cell("F-NAME", item.fabric, bg),
        _cell("F-COLOR", item.color, bg),
        _cell("Location", item.location),
        _cell("HD", CHECKMARK if item.is_heavy_duty else "", "text-center"),
        _cell("Dual", CHECKMARK if item.is_dual else "", "text-center"),
        _cell("Motor", CHECKMARK if item.motor else "", "text-center"),
        _cell("Price", fmt_currency(final_price), "text-right"),
    ]
    return f"<tr>{''.join(cells)}</tr>"


def render_detail_table(items: Sequence[OrderItem], summary: PricingSummary) -> str:
    valid = [item for item in items if item.is_valid]
    rows = "".join(_detail_row(i, item, summary.mul_times) for i, item in enumerate(valid, start=1))
    cols = "\n".join(f'                    <col style="width: {w}%;">' for _, w in DETAIL_COLUMNS)
    headers = "".join(f"<th>{h}</th>" for h, _ in DETAIL_COLUMNS)

    return f"""
            <table class="detailed-list-table">
                <colgroup>
{cols}
                </colgroup>
                <thead>
                    <tr class="table-title">
                        <th colspan="{len(DETAIL_COLUMNS)}">Roller Blinds - Detailed List</th>
                    </tr>
                    <tr>
                        {headers}
                    </tr>
                </thead>
                <tbody>
                    {rows}
                </tbody>
            </table>
        """


# -------------------------
# Page-one summary table
# -------------------------


def _summary_row(
    no: int,
    description: str,
    qty: Any,
    price: str,
    discounted: str,
    *,
    discounted_class: str = "align-right",
) -> str:
    return f"""
            <tr>
                <td data-label="NO">{no}</td>
                <td data-label="Description" class="description">{description}</td>
                <td data-label="QTY" class="align-right">{qty}</td>
                <td data-label="Price" class="align-right">{price}</td>
                <td data-label="Discounted Price" class="{discounted_class}">{discounted}</td>
            </tr>
        """


def _fee_row(no: int, description: str, qty: Any, fee: float, excluded: bool) -> str:
    # excluded fees keep their nominal price but drop out of the discounted column
    return _summary_row(
        no,
        description,
        qty,
        fmt_currency(fee),
        fmt_currency(0 if excluded else fee),
        discounted_class="align-right is-excluded" if excluded else "align-right",
    )


def render_summary_rows(items: Sequence[OrderItem], summary: PricingSummary, ui: UiFlags) -> str:
    valid_count = sum(1 for item in items if item.is_valid)
    rows: List[str] = []
    no = 1

    rows.append(
        _summary_row(
            no,
            "Roller Blinds",
            valid_count,
            f'<span class="original-price">{fmt_currency(summary.first_rb_price)}</span>',
            f'<span class="discounted-price">{fmt_currency(summary.dis_rb_price)}</span>',
        )
    )

    if summary.acce_sum > 0:
        no += 1
        acce = fmt_currency(summary.acce_sum)
        rows.append(_summary_row(no, "Installation Accessories", "NA", acce, acce))

    if summary.e_acce_sum > 0:
        no += 1
        e_acce = fmt_currency(summary.e_acce_sum)
        rows.append(_summary_row(no, "Motorised Accessories", "NA", e_acce, e_acce))

    fees = (
        ("Delivery", ui.delivery_qty or 1, summary.delivery_fee, ui.delivery_fee_excluded),
        ("Installation", valid_count, summary.install_fee, ui.install_fee_excluded),
        ("Removal", ui.removal_qty or 0, summary.removal_fee, ui.removal_fee_excluded),
    )
    for description, qty, fee, excluded in fees:
        no += 1
        rows.append(_fee_row(no, description, qty, fee, excluded))

    return "".join(rows)


# -------------------------
# Customer block
# -------------------------


def render_customer_info(meta: DocumentMetadata) -> str:
    html = f"<strong>{meta.customer_name}</strong><br>"
    if meta.customer_address:
        html += f"{nl2br(meta.customer_address)}<br>"
    if meta.customer_phone:
        html += f"Phone: {meta.customer_phone}<br>"
    if meta.customer_email:
        html += f"Email: {meta.customer_email}"
    return html
