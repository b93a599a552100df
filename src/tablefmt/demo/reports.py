"""
Demo reports rendered with tablefmt.

Four reports are available:
- customers: one block per customer, contacts stacked in the last column
- articles: one row per article with VAT rate, contained VAT and price
- orders: one block per order with line items and running totals
- showcase: a gallery of the cell markers

Example:
    reports = DemoReports()
    data = sample_data()
    reports.render("orders", data).print(sys.stdout)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..exceptions import UnknownReportError
from ..formatter import TableFormatter
from ..table import Table
from .models import Article, Customer, DataFactory, Order
from .pricing import Calculator, Currency, PriceFormatter, PriceStyle

logger = logging.getLogger(__name__)

REPORT_NAMES = ["customers", "articles", "orders", "showcase"]


@dataclass
class DemoData:
    """Objects shown by the demo reports."""

    customers: list[Customer] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    orders: list[Order] = field(default_factory=list)


def sample_data(factory: DataFactory | None = None) -> DemoData:
    """Build the sample customers, articles and orders."""
    factory = factory or DataFactory()

    eric = factory.create_customer(
        "Eric Meyer",
        "eme@gmail.com",
        "+49 030 515 141345",
        "fax: 030 234-134651",
        "fax: 030 234-134651",  # duplicate, ignored
    )
    anne = factory.create_customer("Bayer, Anne", "anne24@yahoo.de", "(030) 3481-23352")
    tim = factory.create_customer("Tim Schulz-Mueller", "tim2346@gmx.de")
    nadine = factory.create_customer("Nadine-Ulla Blumenfeld", "+49 152-92454")
    khaled = factory.create_customer("Khaled Saad Mohamed Abdelalim", "+49 1524-12948210")
    lena = factory.create_customer("Lena Neumann", "lena228@gmail.com")
    customers = [c for c in (eric, anne, tim, nadine, khaled, lena) if c is not None]

    tasse = factory.create_article("SKU-458362", "Tasse", 299)
    becher = factory.create_article("SKU-693856", "Becher", 149)
    kanne = factory.create_article("SKU-518957", "Kanne", 1999)
    teller = factory.create_article("SKU-638035", "Teller", 649)
    buch_java = factory.create_article("SKU-278530", 'Buch "Java"', 4990, reduced_vat=True)
    buch_oop = factory.create_article("SKU-425378", 'Buch "OOP"', 7995, reduced_vat=True)
    pfanne = factory.create_article("SKU-300926", "Pfanne", 4999)
    fahrradhelm = factory.create_article("SKU-663942", "Fahrradhelm", 16900)
    fahrradkarte = factory.create_article("SKU-583978", "Fahrradkarte", 695, reduced_vat=True)
    radio = factory.create_article("SKU-588268", "Radio", 10000)
    articles = [
        tasse, becher, kanne, teller, buch_java, buch_oop, pfanne, fahrradhelm, fahrradkarte, radio,
    ]

    orders: list[Order] = []
    for order_id, customer, items in [
        (8592356245, eric, [(teller, 4), (becher, 8), (buch_oop, 1), (tasse, 4)]),
        (3563561357, anne, [(teller, 2), (tasse, 2)]),
        (5234968294, eric, [(kanne, 1)]),
        (6135735635, nadine, [(teller, 12), (buch_java, 1), (buch_oop, 1)]),
        (6173043537, lena, [(buch_java, 1), (fahrradkarte, 1)]),
        (7372561535, eric, [(fahrradhelm, 1), (fahrradkarte, 1)]),
        (4450305661, eric, [(tasse, 3), (becher, 3), (kanne, 1)]),
    ]:
        order = factory.create_order(order_id, customer)
        if order is None:
            continue
        for article, units in items:
            order.add_item(article, units)
        orders.append(order)

    return DemoData(customers=customers, articles=articles, orders=orders)


def customer_rows(customer: Customer) -> list[list[str]]:
    """Map a customer to one row per contact, closed by a rule for several contacts."""
    name = customer.name or " "
    first_names = customer.first_names or " "
    contacts = customer.contact_list
    closing_rule = len(contacts) > 1
    count = max(1, len(contacts)) + (1 if closing_rule else 0)

    rows: list[list[str]] = []
    for i in range(count):
        contact = contacts[i] if i < len(contacts) else "---"
        if i == 0:
            rows.append([str(customer.id), name, first_names, contact])
        elif closing_rule and i == count - 1:
            rows.append(["{---}"] * 4)
        else:
            rows.append([" ", " ", " ", contact])
    return rows


class DemoReports:
    """Build the demo report tables around injected pricing collaborators."""

    def __init__(
        self,
        calculator: Calculator | None = None,
        price_formatter: PriceFormatter | None = None,
        currency: Currency = Currency.EUR,
    ) -> None:
        self.calculator = calculator or Calculator()
        self.price_formatter = price_formatter or PriceFormatter()
        self.currency = currency

        self.customer_table = (
            Table.builder()
            .columns("| ID | NAME | FIRSTNAMES | CONTACTS |")
            .widths(6, 22, 22, 24)
            .alignments("R")
            .multi_row_mapper(Customer, customer_rows)
            .build()
        )
        self.article_table = (
            Table.builder()
            .columns("| ID | DESCRIPTION | VAT %| VAT | PRICE |")
            .widths(12, 20, 7, 10, 24)
            .alignments("LLRRR")
            .row_mapper(Article, self.article_row)
            .build()
        )
        self.order_table = (
            Table.builder()
            .columns("| ORDER | MwSt*| Preis | MwSt | Gesamt |")
            .widths(31, 9, 10, 10, 13)
            .alignments("LRRRR")
            .multi_row_mapper(Order, self.order_rows)
            .build()
        )
        self.showcase_table = (
            Table.builder()
            .columns("| ID | NAME | FIRSTNAME | CONTACT |")
            .widths(6, 16, 16, 24, 16, 21)
            .alignments("R")
            .build()
        )

    def _price(self, cents: int, style: PriceStyle = PriceStyle.PLAIN) -> str:
        return self.price_formatter.fmt_price(cents, self.currency, style)

    # -------------------------------------------------------------------------
    # Row mappers
    # -------------------------------------------------------------------------

    def article_row(self, article: Article) -> list[str]:
        rate = 7.0 if article.reduced_vat else 19.0
        marker = "*" if article.reduced_vat else " "
        vat = self.calculator.included_vat(article.unit_price, rate / 100.0)
        return [
            article.id,
            article.description,
            f"{rate:.1f}{marker}",
            self._price(vat),
            self._price(article.unit_price, PriceStyle.MARKING),
        ]

    def order_rows(self, order: Order) -> list[list[str]]:
        """Map an order to a two-line heading, one row per item and a closing rule.

        The last item row also carries the order's VAT and total.
        """
        customer = order.customer
        rows = [
            [f"OID:{order.id}, CID:{customer.id}", " ", " ", " ", " "],
            [f"{customer.first_names} {customer.name}", " ", " ", " ", " "],
        ]

        order_value = order_vat = 0
        last = len(order.items) - 1
        for i, item in enumerate(order.items):
            article = item.article
            item_value = self.calculator.value_item(item)
            item_vat = self.calculator.vat_item(item)
            order_value += item_value
            order_vat += item_vat
            rows.append(
                [
                    f"- {item.units_ordered} {article.description}, {item.units_ordered}x "
                    f"{self._price(article.unit_price, PriceStyle.SPACED_MARKING)}",
                    self._price(item_vat) + ("*" if article.reduced_vat else " "),
                    self._price(item_value),
                    self._price(order_vat) if i == last else " ",
                    self._price(order_value, self._total_style()) if i == last else " ",
                ]
            )

        rows.append(["{---}"] * 5)
        return rows

    def _total_style(self) -> PriceStyle:
        return self.currency.style(PriceStyle.MARKING, PriceStyle.SPACED_MARKING)

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    def customers(self, customers: list[Customer]) -> TableFormatter:
        formatter = self.customer_table.formatter().text("Customers:").header()
        return formatter.rows_for(customers).footer()

    def articles(self, articles: list[Article]) -> TableFormatter:
        formatter = (
            self.article_table.formatter()
            .text("Articles:")
            .header("{label}", "{label}", "{label}", "{label}", "(Germany) PRICE EUR")
        )
        return formatter.rows_for(articles).footer()

    def orders(self, orders: list[Order]) -> TableFormatter:
        formatter = self.order_table.formatter().text("Orders:").header().rows_for(orders)
        return formatter.row(
            "",
            "",
            "{ }Gesamt:",
            self._price(self.calculator.vat_orders(orders)),
            self._price(self.calculator.value_orders(orders), self._total_style()),
        ).row("", "", "", "{===}", "{===}")

    def showcase(self) -> TableFormatter:
        """Render sample rows exercising every cell marker."""
        return (
            self.showcase_table.formatter()
            .header()
            .row("100", "Meyer", "Eric", "eme22@gmail.com")
            .row("101", "Sommer", "Tina", "+49 030 22458 29425")
            .row("102", "Schulze", "Tim", "+49 171 2358124")
            .row("103", "Brinkmann", "Tobias", "+49 030 662465724")
            .footer()
            .row("", "", "{R }total:", "{R}4")
            .row("", "", "", "{---}")
            .line("{---}", "", "", "")
            .line("", "{---}", "", "")
            .line("", "", "{---}", "")
            .line("", "", "", "{---}")
            .row("{L}A", "", "", "")
            .row("", "B", "", "")
            .row("", "", "C", "")
            .row("", "", "", "D")
            .row("{L }A", "", "", "")
            .row("", "{L }B", "", "")
            .row("", "", "{L }C", "")
            .row("", "", "", "{L }D")
            .row("{L }A", "{L }B", "{L }C", "{L }D")
        )

    def render(self, name: str, data: DemoData) -> TableFormatter:
        """Return a filled formatter for the named report."""
        logger.debug("Rendering demo report %s", name)
        if name == "customers":
            return self.customers(data.customers)
        if name == "articles":
            return self.articles(data.articles)
        if name == "orders":
            return self.orders(data.orders)
        if name == "showcase":
            return self.showcase()
        raise UnknownReportError(name, REPORT_NAMES)
