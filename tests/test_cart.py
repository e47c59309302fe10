import io

import pytest

from bilheteria.cart import (
    Cart,
    CartFullError,
    CartItem,
    Ticket,
    add_item,
    checkout,
    clear_cart,
    format_cart,
    iter_carts,
    iter_tickets,
    list_tickets,
    read_cart,
    remove_item,
    write_cart,
)
from bilheteria.utilities import current_date


def _file(*carts):
    stream = io.BytesIO()
    for cart in carts:
        write_cart(cart, stream)
    return stream


def test_round_trip():
    cart = Cart(3, 7, [CartItem(0, 11, 2), CartItem(0, 12, 5)])
    stream = _file(cart)
    stream.seek(0)
    assert read_cart(stream) == cart
    assert read_cart(stream) is None


def test_record_layout():
    stream = _file(Cart(1, 2, [CartItem(0, 4, 1)]))
    assert len(stream.getvalue()) == 24


def test_truncated_cart_raises():
    data = _file(Cart(1, 2, [CartItem(0, 4, 1)])).getvalue()[:-2]
    with pytest.raises(ValueError):
        read_cart(io.BytesIO(data))


def test_add_item_only_touches_target():
    stream = _file(Cart(1, 10), Cart(2, 20))
    assert add_item(stream, 2, CartItem(0, 5, 3)) is True
    carts = list(iter_carts(stream))
    assert carts[0].items == []
    assert carts[1].items == [CartItem(0, 5, 3)]


def test_add_item_missing_cart():
    stream = _file(Cart(1, 10))
    assert add_item(stream, 9, CartItem(0, 5, 3)) is False
    assert list(iter_carts(stream)) == [Cart(1, 10)]


def test_cart_full():
    cart = Cart(1, 1)
    for n in range(50):
        cart.add(CartItem(0, n, 1))
    with pytest.raises(CartFullError):
        cart.add(CartItem(0, 99, 1))
    stream = _file(cart)
    with pytest.raises(CartFullError):
        add_item(stream, 1, CartItem(0, 99, 1))
    assert len(next(iter_carts(stream)).items) == 50


def test_remove_item_drops_all_for_event():
    items = [CartItem(0, 4, 1), CartItem(0, 6, 2), CartItem(0, 4, 3)]
    stream = _file(Cart(1, 10, items), Cart(2, 11, list(items)))
    assert remove_item(stream, 1, 4) is True
    first, second = iter_carts(stream)
    assert first.items == [CartItem(0, 6, 2)]
    assert second.items == items


def test_clear_cart():
    stream = _file(Cart(1, 10, [CartItem(0, 4, 1)]))
    assert clear_cart(stream, 1) is True
    assert next(iter_carts(stream)).items == []
    assert clear_cart(stream, 5) is False


def test_checkout_issues_tickets():
    carts = _file(Cart(1, 10, [CartItem(0, 4, 1), CartItem(0, 6, 2)]), Cart(2, 20))
    tickets = io.BytesIO()
    issued = checkout(carts, tickets, 1)
    assert [t.id for t in issued] == [1, 2]
    assert [t.event_id for t in issued] == [4, 6]
    assert all(t.client_id == 10 and t.purchase_date == current_date() for t in issued)
    assert list(iter_tickets(tickets)) == issued
    assert [c.items for c in iter_carts(carts)] == [[], []]


def test_checkout_continues_ticket_ids():
    tickets = io.BytesIO()
    checkout(_file(Cart(1, 10, [CartItem(0, 4, 1)])), tickets, 1)
    more = checkout(_file(Cart(2, 11, [CartItem(0, 5, 1)])), tickets, 2)
    assert [t.id for t in iter_tickets(tickets)] == [1, more[0].id]
    assert more[0].id == 2


def test_ticket_round_trip():
    ticket = Ticket(3, 4, 5, "01/02/2024")
    data = ticket.pack()
    assert len(data) == 24
    assert Ticket.unpack(data) == ticket
    with pytest.raises(ValueError):
        Ticket.unpack(data[:-1])


def test_list_tickets_filters(capsys):
    stream = io.BytesIO()
    for ticket in (Ticket(1, 4, 10, "01/02/2024"), Ticket(2, 5, 11, "01/02/2024")):
        stream.write(ticket.pack())
    owned = list_tickets(stream, 10)
    assert [t.id for t in owned] == [1]
    out = capsys.readouterr().out
    assert "Ingressos do Cliente 10" in out
    assert "ID Ingresso: 1\n" in out
    assert "ID Ingresso: 2\n" not in out


def test_format_cart():
    text = format_cart(Cart(3, 7, [CartItem(0, 11, 2)]))
    assert "ID: 3\n" in text
    assert "Cliente: 7\n" in text
    assert "Total de Itens: 1\n" in text
    assert "\nItem 1:\n  Evento ID: 11\n  Quantidade: 2\n" in text