"""Demo data model and reports for tablefmt.

Customers, articles and orders rendered into the demo tables printed by
``tablefmt demo``.
"""

from .models import Article, Customer, DataFactory, Order, OrderItem
from .pricing import Calculator, Currency, PriceFormatter, PriceStyle
from .reports import REPORT_NAMES, DemoData, DemoReports, sample_data
from .splitters import ContactsSplitter, NameSplitter, SplitName

__all__ = [
    "Article",
    "Customer",
    "DataFactory",
    "Order",
    "OrderItem",
    "Calculator",
    "Currency",
    "PriceFormatter",
    "PriceStyle",
    "REPORT_NAMES",
    "DemoData",
    "DemoReports",
    "sample_data",
    "ContactsSplitter",
    "NameSplitter",
    "SplitName",
]
