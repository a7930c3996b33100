# quotedoc/engine/context.py
from __future__ import annotations

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


BLOCKOUT_CODES: tuple[str, ...] = ("B1", "B2", "B3", "B4", "B5")
SCREEN_CODE = "SN"


def coerce_number(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """
    Lenient float conversion for browser payloads.
    None, "", booleans, NaN and anything unparsable -> `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    else:
        text = str(value).strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def is_numeric(value: Any) -> bool:
    return coerce_number(value, default=None) is not None


class _InputModel(BaseModel):
    # Front end sends camelCase (fabricType, linePrice, ...)
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# -------------------------
# Order items
# -------------------------


class OrderItem(_InputModel):
    width: Optional[float] = None
    height: Optional[float] = None
    fabric: str = ""
    fabric_type: str = ""
    color: str = ""
    location: str = ""
    winder: str = ""  # "HD" = heavy duty
    dual: str = ""  # "D" = dual bracket
    motor: bool = False
    line_price: float = 0.0

    @field_validator("width", "height", mode="before")
    @classmethod
    def _dimension(cls, v: Any) -> Optional[float]:
        return coerce_number(v, default=None)

    @field_validator("line_price", mode="before")
    @classmethod
    def _price(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("fabric", "fabric_type", "color", "location", "winder", "dual", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("motor", mode="before")
    @classmethod
    def _flag(cls, v: Any) -> bool:
        if isinstance(v, str):
            return bool(v.strip())
        return bool(v)

    @property
    def is_valid(self) -> bool:
        """Billable only when both dimensions are filled in (0 counts as missing)."""
        return bool(self.width) and bool(self.height)

    @property
    def is_heavy_duty(self) -> bool:
        return self.winder == "HD"

    @property
    def is_dual(self) -> bool:
        return self.dual == "D"


class OrderData(_InputModel):
    items: List[OrderItem] = Field(default_factory=list)
    # Figures attached by the calculation engine; read by PrecomputedPricingProvider
    summary: Optional[dict] = None

    @field_validator("items", mode="before")
    @classmethod
    def _items(cls, v: Any) -> list:
        return v if isinstance(v, list) else []

    @property
    def valid_items(self) -> List[OrderItem]:
        return [item for item in self.items if item.is_valid]


# -------------------------
# Summary / UI / metadata
# -------------------------


class PricingSummary(_InputModel):
    first_rb_price: float = 0.0
    dis_rb_price: float = 0.0
    acce_sum: float = 0.0
    e_acce_sum: float = 0.0
    delivery_fee: float = 0.0
    install_fee: float = 0.0
    removal_fee: float = 0.0
    mul_times: float = 1.0
    sum_price: float = 0.0
    total_incl_gst: float = 0.0

    @field_validator(
        "first_rb_price",
        "dis_rb_price",
        "acce_sum",
        "e_acce_sum",
        "delivery_fee",
        "install_fee",
        "removal_fee",
        "sum_price",
        "total_incl_gst",
        mode="before",
    )
    @classmethod
    def _amount(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("mul_times", mode="before")
    @classmethod
    def _multiplier(cls, v: Any) -> float:
        # absent or 0 multiplier means "no markup"
        return coerce_number(v, default=None) or 1.0


class UiFlags(_InputModel):
    delivery_fee_excluded: bool = False
    install_fee_excluded: bool = False
    removal_fee_excluded: bool = False
    delivery_qty: int = 0
    removal_qty: int = 0
    remote_qty: int = 0
    remote_single_qty: int = 0
    charger_qty: int = 0
    cord_qty: int = 0

    @model_validator(mode="before")
    @classmethod
    def _flatten_fee_panel(cls, data: Any) -> Any:
        # Front end nests the fee toggles and quantities under "f2"
        if isinstance(data, dict) and isinstance(data.get("f2"), dict):
            rest = {k: v for k, v in data.items() if k != "f2"}
            return {**data["f2"], **rest}
        return data

    @field_validator(
        "delivery_qty",
        "removal_qty",
        "remote_qty",
        "remote_single_qty",
        "charger_qty",
        "cord_qty",
        mode="before",
    )
    @classmethod
    def _qty(cls, v: Any) -> int:
        return int(coerce_number(v))

    @field_validator(
        "delivery_fee_excluded", "install_fee_excluded", "removal_fee_excluded", mode="before"
    )
    @classmethod
    def _flag(cls, v: Any) -> bool:
        return bool(v)


class DocumentMetadata(_InputModel):
    quote_id: str = ""
    issue_date: str = ""
    due_date: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_phone: str = ""
    customer_email: str = ""
    general_notes: str = ""
    terms_conditions: str = ""
    # Manually typed price; overrides the computed total when numeric
    final_offer_price: Optional[Any] = None

    @field_validator(
        "quote_id",
        "issue_date",
        "due_date",
        "customer_name",
        "customer_address",
        "customer_phone",
        "customer_email",
        "general_notes",
        "terms_conditions",
        mode="before",
    )
    @classmethod
    def _text(cls, v: Any) -> str:
        return "" if v is None else str(v)
