# bilheteria

A small console ticket office. Events, users, shopping carts and issued
tickets are stored as fixed-size binary records in plain files
(`eventos.dat`, `users.dat`, `carrinhos.dat`, `ingressos.dat`). The
event and user files can be sorted in place by id with an on-disk heap
sort and searched by id sequentially or with binary search. Sort and
search statistics (comparisons, swaps, CPU time) are appended to
`log.txt`. The menus and messages are in Portuguese.

## Installing

```
pip install .
```

## Running

```
bilheteria
```

Options:

- `--directory DIR` – where the data files are created (default: the
  current directory)
- `--events N` – number of events to generate (default 10)
- `--users N` – number of users to generate (default 10)
- `--seed N` – seed for the random generator, for repeatable bases
- `--login-as {client,producer}` – which demo account the login option
  uses (default `client`)

On start the program creates the four data files afresh, discarding what
they held, fills the event and user files with generated records under
shuffled ids, and opens a numbered menu:

1. Sort the event or user base (heap sort), showing it before and after
2. Search by id, sequentially or with binary search (binary search sorts
   the file first)
3. Register the two demo accounts, `davi@example.com` (producer) and
   `arthur@example.com` (client), both with the password `password`
4. Log in as the demo account chosen with `--login-as`
5. Event menu: everyone can list events; a producer can register a demo
   event and delete an event by id; a client can put the first stored
   event in their cart
6. Cart: view it, remove the first item, or check out (each item becomes
   a ticket dated today)
7. List the logged-in client's tickets
8. Log out
0. Quit

The demo accounts do not exist until option 3 has been used, so log in
after registering them. End of input also ends the session.

## What it does not do

- It does not ask for the data of new users or events: option 3 always
  registers the two demo accounts and the producer menu always registers
  the same demo event.
- Login does not ask for credentials; it uses the account picked with
  `--login-as`.
- Data is not kept between runs: every start recreates the data files.
  Only `log.txt` is appended to.

## Using it as a library

```python
import random
from bilheteria.store import Store

with Store.open(".", random.Random(1)) as store:
    store.seed(10, 10)
    stats = store.sort_events()
    print(stats.comparisons, stats.swaps)
    store.sort_users()
```

`Store` also offers `find_cart`, `add_first_event_to_cart`,
`remove_first_item` and `checkout_client`.

Lower-level building blocks, each working on any binary stream opened
for reading and writing:

- `bilheteria.events` – `Event`, `read_event`, `write_event`,
  `iter_events`, `create_event_base`, `register_event`, `delete_event`
- `bilheteria.users` – `User`, `UserType`, `read_user`, `write_user`,
  `iter_users`, `create_user_base`, `register_user`, `login`
- `bilheteria.cart` – `Cart`, `CartItem`, `Ticket`, `CartFullError`,
  `add_item`, `remove_item`, `clear_cart`, `checkout`, `iter_tickets`,
  `list_tickets`
- `bilheteria.heapsort` – `heap_sort`, returning a `SortStats`
- `bilheteria.searches` – `sequential_search_event`,
  `sequential_search_user`, `binary_search_event`, `binary_search_user`
- `bilheteria.utilities` – `RecordType`, `record_size`, `record_count`,
  `next_unique_id`, `next_name`, `current_date`

## Tests

```
pip install .[test]
pytest
```