"""Shopping cart model, product catalogue entries and an interactive shop."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

SEPARATOR = "------------------"


class CheckoutError(ValueError):
    """Raised when a cart cannot be paid for."""


@dataclass(frozen=True)
class Product:
    """Product for sale, identified by ``id``."""

    id: int
    name: str
    price: int

    @property
    def display_name(self) -> str:
        return f"{self.name} : Rs {self.price}\n"

    @property
    def short_name(self) -> str:
        return self.name[:1]


@dataclass
class Item:
    """A product in a cart with its quantity."""

    product: Product
    quantity: int = 1

    @property
    def price(self) -> int:
        return self.quantity * self.product.price

    @property
    def info(self) -> str:
        return f"{self.quantity} x {self.product.name} Rs. {self.price}\n"


@dataclass
class Cart:
    """Items keyed by product id, in the order first added."""

    items: dict[int, Item] = field(default_factory=dict)

    def add_product(self, product: Product) -> None:
        """Add one unit of ``product``."""
        item = self.items.get(product.id)
        if item is None:
            self.items[product.id] = Item(product, 1)
        else:
            item.quantity += 1

    def total(self) -> int:
        """Return the price of everything in the cart."""
        return sum(item.price for item in self.items.values())

    def view(self) -> str:
        """Return an itemised listing with the total amount."""
        if not self.items:
            return "Cart is empty"
        lines = "".join(item.info for item in self.items.values())
        return f"{lines}\n Total Amount : Rs. {self.total()}\n"

    def is_empty(self) -> bool:
        """Return whether nothing has been added."""
        return not self.items


class CatalogProduct:
    """Catalogue entry whose selling price never exceeds its MRP once set."""

    def __init__(self, id: int, name: str, mrp: int, selling_price: int) -> None:
        self.id = id
        self.name = name
        self._mrp = mrp
        self._selling_price = selling_price

    @property
    def mrp(self) -> int:
        return self._mrp

    @mrp.setter
    def mrp(self, price: int) -> None:
        if price > 0:
            self._mrp = price

    @property
    def selling_price(self) -> int:
        return self._selling_price

    @selling_price.setter
    def selling_price(self, price: int) -> None:
        self._selling_price = min(price, self._mrp)

    def details(self) -> str:
        """Return the product description block."""
        return (
            f"Name : {self.name}\n"
            f"Id : {self.id}\n"
            f"Selling Price {self._selling_price}\n"
            f"MRP : {self._mrp}\n"
            "----------\n"
        )

    def copy(self) -> CatalogProduct:
        """Return an independent copy."""
        return CatalogProduct(self.id, self.name, self._mrp, self._selling_price)


CATALOG: tuple[Product, ...] = (
    Product(1, "apple", 26),
    Product(3, "mango", 16),
    Product(2, "guava", 36),
    Product(5, "banana", 56),
    Product(4, "strawberry", 29),
    Product(6, "pineapple", 20),
)


def choose_product(products: Iterable[Product], choice: str) -> Product | None:
    """Return the first product whose short name is ``choice``, or None."""
    return next((p for p in products if p.short_name == choice), None)


def checkout(cart: Cart, paid: int) -> int:
    """Pay for ``cart`` with ``paid`` and return the change."""
    if cart.is_empty():
        raise CheckoutError("Cart is empty")
    total = cart.total()
    if paid < total:
        raise CheckoutError("Not enough cash!")
    return paid - total


def _add_item(cart: Cart, products: Sequence[Product]) -> None:
    print("Available Products ")
    print("".join(p.display_name for p in products))
    print("----------------")
    product = choose_product(products, input().strip())
    if product is None:
        print("Product not found!")
        return
    print(f"Added to the Cart {product.display_name}")
    cart.add_product(product)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shop on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsakit-shop", description="Interactive shopping cart."
    )
    parser.parse_args(argv)

    cart = Cart()
    try:
        while True:
            print("Select an action -  (a)dd item, (v)iew cart, (c)heckout")
            action = input().strip()[:1]
            if action == "a":
                _add_item(cart, CATALOG)
            elif action == "v":
                print(SEPARATOR)
                print(cart.view(), end="")
                print(SEPARATOR)
            else:
                if cart.is_empty():
                    continue
                print("Pay in Cash")
                try:
                    change = checkout(cart, int(input().strip()))
                except ValueError as exc:
                    print(exc if isinstance(exc, CheckoutError) else "Not enough cash!")
                    continue
                print(f"Change {change}")
                print("Thank you for shopping!")
                return 0
    except EOFError:
        return 1