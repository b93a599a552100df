"""Prices, currencies and VAT for the demo reports.

All amounts are integer cents.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum, IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Order, OrderItem

VAT_RATE = 0.19
"""Regular German VAT (MwSt)."""

REDUCED_VAT_RATE = 0.07
"""Reduced VAT for books, tickets and the like."""


class Currency(Enum):
    """Currency with its marking (symbol or short text)."""

    USD = "$"
    EUR = "€"
    CHF = "₣"
    GBP = "£"
    NOK = "kr"
    PLZ = "zł"
    BTC = "₿"

    @property
    def code(self) -> str:
        return self.name

    @property
    def marking(self) -> str:
        return self.value

    def style(self, default: PriceStyle, text_marked: PriceStyle) -> PriceStyle:
        """Pick ``text_marked`` for currencies marked with letters (kr, zł)."""
        return text_marked if self in (Currency.NOK, Currency.PLZ) else default


class PriceStyle(IntEnum):
    """How a price is decorated with its currency."""

    PLAIN = 0  # 1,234.56
    MARKING = 1  # 1,234.56€
    CODE = 2  # 1,234.56 EUR
    MARKING_FIRST = 3  # €1,234.56
    SPACED_MARKING = 4  # 1,234.56 kr


class PriceFormatter:
    """Format cent amounts for display."""

    def fmt_price(
        self, cents: int, currency: Currency, style: PriceStyle = PriceStyle.PLAIN
    ) -> str:
        sign = "-" if cents < 0 else ""
        amount = f"{sign}{abs(cents) // 100:,}.{abs(cents) % 100:02d}"
        if style is PriceStyle.MARKING:
            return f"{amount}{currency.marking}"
        if style is PriceStyle.CODE:
            return f"{amount} {currency.code}"
        if style is PriceStyle.MARKING_FIRST:
            return f"{currency.marking}{amount}"
        if style is PriceStyle.SPACED_MARKING:
            return f"{amount} {currency.marking}"
        return amount


class Calculator:
    """VAT and order value arithmetic."""

    def included_vat(self, gross: int, rate: float) -> int:
        """Return the VAT contained in a gross amount, rounded half-up to cents."""
        vat = Decimal(gross) * Decimal(str(rate)) / (Decimal(1) + Decimal(str(rate)))
        return int(vat.quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def value_item(self, item: OrderItem) -> int:
        return item.article.unit_price * item.units_ordered

    def vat_item(self, item: OrderItem) -> int:
        rate = REDUCED_VAT_RATE if item.article.reduced_vat else VAT_RATE
        return self.included_vat(self.value_item(item), rate)

    def value_order(self, order: Order) -> int:
        return sum(self.value_item(item) for item in order.items)

    def vat_order(self, order: Order) -> int:
        return sum(self.vat_item(item) for item in order.items)

    def value_orders(self, orders: Iterable[Order]) -> int:
        return sum(self.value_order(order) for order in orders)

    def vat_orders(self, orders: Iterable[Order]) -> int:
        return sum(self.vat_order(order) for order in orders)
