"""The ticket office: the open data files and the operations the menus offer."""

from __future__ import annotations

import contextlib
import io
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, List, Optional, TextIO, Union

from .cart import Cart, CartItem, Ticket, add_item, checkout, iter_carts, remove_item, write_cart
from .events import create_event_base, read_event
from .heapsort import SortStats, heap_sort
from .users import create_user_base
from .utilities import RecordType, record_count

EVENTS_FILE = "eventos.dat"
USERS_FILE = "users.dat"
CARTS_FILE = "carrinhos.dat"
TICKETS_FILE = "ingressos.dat"
LOG_FILE = "log.txt"


@dataclass
class Store:
    """The data files of one ticket office, opened together."""

    events: BinaryIO
    users: BinaryIO
    carts: BinaryIO
    tickets: BinaryIO
    log: TextIO
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def open(
        cls, directory: Union[str, Path] = ".", rng: Optional[random.Random] = None
    ) -> "Store":
        """Create fresh data files in ``directory`` and append to its log file."""
        base = Path(directory)
        with contextlib.ExitStack() as stack:
            streams = [
                stack.enter_context(open(base / name, "w+b"))
                for name in (EVENTS_FILE, USERS_FILE, CARTS_FILE, TICKETS_FILE)
            ]
            log = stack.enter_context(open(base / LOG_FILE, "a+", encoding="utf-8"))
            stack.pop_all()
        return cls(*streams, log, rng or random.Random())

    def close(self) -> None:
        """Close every data file."""
        for stream in (self.events, self.users, self.carts, self.tickets, self.log):
            stream.close()

    def __enter__(self) -> "Store":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def seed(self, event_count: int = 10, user_count: int = 10) -> None:
        """Fill the event and user files with generated records."""
        create_event_base(self.events, event_count, self.rng)
        create_user_base(self.users, user_count, self.rng)

    def sort_events(self) -> SortStats:
        """Heap-sort the event file by id, logging the work done."""
        count = record_count(self.events, RecordType.EVENT)
        return heap_sort(self.events, count, RecordType.EVENT, self.log)

    def sort_users(self) -> SortStats:
        """Heap-sort the user file by id, logging the work done."""
        count = record_count(self.users, RecordType.USER)
        return heap_sort(self.users, count, RecordType.USER, self.log)

    def find_cart(self, client_id: int) -> Optional[Cart]:
        """The first cart belonging to ``client_id``, or None."""
        return next(
            (cart for cart in iter_carts(self.carts) if cart.client_id == client_id),
            None,
        )

    def _new_cart(self, client_id: int) -> Cart:
        highest = max((cart.id for cart in iter_carts(self.carts)), default=0)
        cart = Cart(highest + 1, client_id)
        self.carts.seek(0, io.SEEK_END)
        write_cart(cart, self.carts)
        self.carts.flush()
        return cart

    def add_first_event_to_cart(self, client_id: int) -> Optional[CartItem]:
        """Put the first stored event in the client's cart, creating the cart if needed.

        Returns the added item, or None when there are no events.
        """
        self.events.seek(0)
        event = read_event(self.events)
        if event is None:
            print("Nenhum evento encontrado.")
            return None
        cart = self.find_cart(client_id) or self._new_cart(client_id)
        item = CartItem(0, event.id, 1 + self.rng.randrange(10))
        add_item(self.carts, cart.id, item)
        print("Item adicionado ao carrinho com sucesso!")
        return item

    def remove_first_item(self, client_id: int) -> Optional[int]:
        """Drop the event of the first item in the client's cart.

        Returns the removed event id, or None when there is no cart or it is empty.
        """
        cart = self.find_cart(client_id)
        if cart is None:
            print("Carrinho não encontrado.")
            return None
        if not cart.items:
            print("Carrinho esta vazio.")
            return None
        event_id = cart.items[0].event_id
        remove_item(self.carts, cart.id, event_id)
        print("Item removido do carrinho.")
        return event_id

    def checkout_client(self, client_id: int) -> List[Ticket]:
        """Buy everything in the client's cart and return the issued tickets."""
        cart = self.find_cart(client_id)
        if cart is None:
            return []
        issued = checkout(self.carts, self.tickets, cart.id)
        print("Carrinho finalizado com sucesso!")
        return issued