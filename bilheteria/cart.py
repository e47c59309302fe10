"""Shopping carts, purchased tickets and their data files."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass, field
from typing import BinaryIO, Callable, Iterator, List, Optional

from .utilities import current_date, next_unique_id

MAX_ITEMS = 50

_HEADER = struct.Struct("<iii")
_ITEM = struct.Struct("<iii")
_TICKET = struct.Struct("<iii11sx")

CART_STRUCT_SIZE = 3 * 4 + MAX_ITEMS * _ITEM.size
TICKET_SIZE = _TICKET.size


class CartFullError(Exception):
    """Raised when an item is added to a cart that already holds the maximum."""


@dataclass
class CartItem:
    """One line of a cart."""

    id: int
    event_id: int
    quantity: int


@dataclass
class Cart:
    """A client's cart."""

    id: int
    client_id: int
    items: List[CartItem] = field(default_factory=list)

    def add(self, item: CartItem) -> None:
        """Append ``item``; raise CartFullError when the cart is full."""
        if len(self.items) >= MAX_ITEMS:
            raise CartFullError(f"cart {self.id} already holds {MAX_ITEMS} items")
        self.items.append(item)


@dataclass
class Ticket:
    """A purchased ticket."""

    id: int
    event_id: int
    client_id: int
    purchase_date: str

    def pack(self) -> bytes:
        """Encode as one fixed-size record."""
        return _TICKET.pack(
            self.id, self.event_id, self.client_id, self.purchase_date.encode("ascii")[:10]
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Ticket":
        """Decode one fixed-size record."""
        if len(data) != _TICKET.size:
            raise ValueError(f"ticket record must be {_TICKET.size} bytes, got {len(data)}")
        ticket_id, event_id, client_id, date = _TICKET.unpack(data)
        return cls(ticket_id, event_id, client_id,
                   date.split(b"\0", 1)[0].decode("ascii", "replace"))


def read_cart(stream: BinaryIO) -> Optional[Cart]:
    """Read the next cart, or None at the end of the stream."""
    header = stream.read(_HEADER.size)
    if len(header) < 4:
        return None
    if len(header) < _HEADER.size:
        raise ValueError("truncated cart record")
    cart_id, client_id, total = _HEADER.unpack(header)
    if not 0 <= total <= MAX_ITEMS:
        raise ValueError(f"invalid item count {total} in cart {cart_id}")
    body = stream.read(total * _ITEM.size)
    if len(body) < total * _ITEM.size:
        raise ValueError("truncated cart record")
    items = [CartItem(*values) for values in _ITEM.iter_unpack(body)]
    return Cart(cart_id, client_id, items)


def write_cart(cart: Cart, stream: BinaryIO) -> None:
    """Write ``cart`` at the current position."""
    stream.write(_HEADER.pack(cart.id, cart.client_id, len(cart.items)))
    for item in cart.items:
        stream.write(_ITEM.pack(item.id, item.event_id, item.quantity))


def iter_carts(stream: BinaryIO) -> Iterator[Cart]:
    """Yield every cart from the start of the stream."""
    stream.seek(0)
    while (cart := read_cart(stream)) is not None:
        yield cart


def format_cart(cart: Cart) -> str:
    """Text block describing ``cart``."""
    lines = [
        "\n*************** CARRINHO ***************\n",
        f"ID: {cart.id}\n",
        f"Cliente: {cart.client_id}\n",
        f"Total de Itens: {len(cart.items)}\n",
    ]
    for number, item in enumerate(cart.items, start=1):
        lines.append(f"\nItem {number}:\n")
        lines.append(f"  Evento ID: {item.event_id}\n")
        lines.append(f"  Quantidade: {item.quantity}\n")
    lines.append("***************************************\n")
    return "".join(lines)


def _rewrite(stream: BinaryIO, cart_id: int, change: Callable[[Cart], None]) -> bool:
    carts = list(iter_carts(stream))
    found = False
    for cart in carts:
        if cart.id == cart_id:
            change(cart)
            found = True
    stream.seek(0)
    stream.truncate()
    for cart in carts:
        write_cart(cart, stream)
    stream.flush()
    return found


def add_item(stream: BinaryIO, cart_id: int, item: CartItem) -> bool:
    """Add ``item`` to the cart ``cart_id``; return whether the cart exists."""
    for cart in iter_carts(stream):
        if cart.id == cart_id and len(cart.items) >= MAX_ITEMS:
            raise CartFullError(f"cart {cart_id} already holds {MAX_ITEMS} items")
    return _rewrite(stream, cart_id, lambda cart: cart.add(item))


def remove_item(stream: BinaryIO, cart_id: int, event_id: int) -> bool:
    """Drop every item for ``event_id`` from the cart; return whether the cart exists."""

    def change(cart: Cart) -> None:
        cart.items = [item for item in cart.items if item.event_id != event_id]

    return _rewrite(stream, cart_id, change)


def clear_cart(stream: BinaryIO, cart_id: int) -> bool:
    """Empty the cart; return whether it exists."""
    return _rewrite(stream, cart_id, lambda cart: cart.items.clear())


def checkout(cart_stream: BinaryIO, ticket_stream: BinaryIO, cart_id: int) -> List[Ticket]:
    """Turn every item of the cart into a ticket, empty the cart, return the tickets."""
    issued: List[Ticket] = []

    def change(cart: Cart) -> None:
        for item in cart.items:
            ticket = Ticket(
                next_unique_id(ticket_stream, TICKET_SIZE),
                item.event_id,
                cart.client_id,
                current_date(),
            )
            ticket_stream.seek(0, io.SEEK_END)
            ticket_stream.write(ticket.pack())
            issued.append(ticket)
        cart.items.clear()

    _rewrite(cart_stream, cart_id, change)
    ticket_stream.flush()
    return issued


def iter_tickets(stream: BinaryIO) -> Iterator[Ticket]:
    """Yield every ticket from the start of the stream."""
    stream.seek(0)
    while len(data := stream.read(TICKET_SIZE)) == TICKET_SIZE:
        yield Ticket.unpack(data)


def list_tickets(stream: BinaryIO, client_id: int) -> List[Ticket]:
    """Print and return the tickets of ``client_id``."""
    print(f"\n*********** Ingressos do Cliente {client_id} ***********")
    owned = [ticket for ticket in iter_tickets(stream) if ticket.client_id == client_id]
    for ticket in owned:
        print(f"\nID Ingresso: {ticket.id}")
        print(f"Evento: {ticket.event_id}")
        print(f"Data da Compra: {ticket.purchase_date}")
    print("*********************************************")
    return owned