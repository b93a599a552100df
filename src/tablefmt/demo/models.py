"""Demo data model: customers, articles and orders."""

from __future__ import annotations

from dataclasses import dataclass, field

from .splitters import ContactsSplitter, NameSplitter


@dataclass
class Customer:
    """
    A customer with a split name and a list of contacts.

    Attributes:
        id: Customer id (-1 until assigned)
        name: Last name
        first_names: First names, space separated
        contacts: Contacts as stored by ``ContactsSplitter``
    """

    id: int = -1
    name: str = ""
    first_names: str = ""
    contacts: str = ""
    splitter: ContactsSplitter = field(default_factory=ContactsSplitter, repr=False, compare=False)

    def set_id(self, id: int) -> Customer:
        """Assign the id once; later calls and non-positive ids are ignored."""
        if self.id < 0 and id > 0:
            self.id = id
        return self

    def add_contact(self, contact: str) -> Customer:
        if contact is None:
            raise ValueError("contact must not be None")
        self.contacts = self.splitter.add(self.contacts, contact)
        return self

    def remove_contact(self, i: int) -> Customer:
        self.contacts = self.splitter.remove(self.contacts, i)
        return self

    def contact(self, i: int) -> str:
        return self.splitter.contact(self.contacts, i)

    @property
    def contact_list(self) -> list[str]:
        return self.splitter.as_list(self.contacts)


@dataclass(frozen=True)
class Article:
    """A sellable article; ``unit_price`` is the gross price in cents."""

    id: str
    description: str
    unit_price: int
    reduced_vat: bool = False


@dataclass(frozen=True)
class OrderItem:
    article: Article
    units_ordered: int


@dataclass
class Order:
    """An order placed by a customer."""

    id: int
    customer: Customer
    items: list[OrderItem] = field(default_factory=list)

    def add_item(self, article: Article | None, units_ordered: int) -> Order:
        """Add a line item; missing articles and non-positive units are ignored."""
        if article is not None and units_ordered > 0:
            self.items.append(OrderItem(article=article, units_ordered=units_ordered))
        return self


class DataFactory:
    """Create demo objects with injected splitters.

    Customer ids are issued sequentially starting at ``first_customer_id``.
    """

    def __init__(
        self,
        name_splitter: NameSplitter | None = None,
        contacts_splitter: ContactsSplitter | None = None,
        first_customer_id: int = 1000,
    ) -> None:
        self._name_splitter = name_splitter or NameSplitter()
        self._contacts_splitter = contacts_splitter or ContactsSplitter()
        self._next_customer_id = first_customer_id

    def create_customer(self, name: str, *contacts: str) -> Customer | None:
        """Create a customer from a single-string name, or None if it can't be split."""
        split = self._name_splitter.split(name)
        if split is None:
            return None
        customer = Customer(
            id=self._next_customer_id,
            name=split.name,
            first_names=split.first_names,
            splitter=self._contacts_splitter,
        )
        self._next_customer_id += 1
        for contact in contacts:
            customer.add_contact(contact)
        return customer

    def create_article(
        self, id: str, description: str, unit_price: int, reduced_vat: bool = False
    ) -> Article:
        return Article(
            id=id, description=description, unit_price=unit_price, reduced_vat=reduced_vat
        )

    def create_order(self, id: int, customer: Customer | None) -> Order | None:
        """Create an order, or None without a customer or a positive id."""
        if id <= 0 or customer is None:
            return None
        return Order(id=id, customer=customer)
