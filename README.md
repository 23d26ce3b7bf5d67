# mallbots

The business core of a shopping-mall back end. Customers fill baskets with
products from participating stores and check them out into orders; the depot
builds shopping lists from orders and hands them to bots; payments keep track
of payments and invoices.

The package is a library: it has no command to run, and no network server.

## Layout

One sub-package per business area:

| Sub-package          | What it covers                                           |
|----------------------|----------------------------------------------------------|
| `mallbots.customers` | registering customers, enabling, disabling, authorising  |
| `mallbots.stores`    | stores, participation in the mall, product catalogues    |
| `mallbots.baskets`   | starting, filling, cancelling and checking out baskets   |
| `mallbots.ordering`  | orders, their lifecycle and the domain events they raise |
| `mallbots.depot`     | shopping lists, stops per store, bot assignment          |
| `mallbots.payments`  | payments and invoices                                    |

Each of them has:

- `domain` – entities, their rules and the repository interfaces (as
  `typing.Protocol` classes). Broken rules raise the area's error:
  `CustomerError`, `BasketError`, `ShoppingListError`, `OrderError`,
  `StoreError` or `ProductError`.
- `application` – frozen dataclasses for commands and queries, and an
  `Application` that carries them out against the repositories passed to it.
  `customers.application` also has `CustomerNotAuthorizedError`, and
  `payments.application` has `InvoiceError`.
- `access_log` – `log_application_access(app, logger)` returns a
  `LoggedApplication` that logs `--> Area.Method` before and `<-- Area.Method`
  after every call, also when the call raises.

`customers`, `baskets`, `depot` and `ordering` also have a `postgres` module
with SQLAlchemy repositories (see *Storage*).

Shared pieces at the top level:

- `mallbots.config` – `init_config(env_file=".env", environ=None)` reads the
  settings into an `AppConfig` with `PostgresConfig`, `RpcConfig` and
  `WebConfig`; `RpcConfig.address()` and `WebConfig.address()` give
  `host:port`. A missing env file or a missing required setting raises
  `ConfigError`. `parse_duration` turns strings such as `300ms`, `1.5h` or
  `2h45m` into a `timedelta`.
- `mallbots.logger` – `to_level` maps `DEBUG`, `INFO`, `WARN` and `ERROR` to
  logging levels (anything else is `INFO`); `new_logger(level)` returns the
  `mallbots` logger writing `time=… level=… msg=…` lines to standard output.
- `mallbots.ddd` – `Entity`, `AggregateBase` (with `add_event` and an
  `events` list), `Event` (identified by its `event_name`) and an
  `EventDispatcher` whose `subscribe(event_or_class, handler)` and
  `publish(*events)` call handlers in subscription order; the first handler
  that raises stops publishing.
- `mallbots.waiter` – `Waiter(catch_signals=False)` runs coroutine functions
  added with `add(*fns)` together. Each receives the shared `asyncio.Event`
  `waiter.done`. `await waiter.wait()` returns once `done` is set (by
  `cancel()`, by a failing function or, with `catch_signals`, by SIGINT,
  SIGTERM or SIGQUIT) and every function has finished; it re-raises the first
  failure.

## Configuration

`init_config` reads these variables; values in the env file override the
environment:

| Variable       | Required | Default |
|----------------|----------|---------|
| `LOG_LEVEL`    | no       | `DEBUG` |
| `TIMEOUT`      | yes      |         |
| `POSTGRES_URL` | yes      |         |
| `RPC_HOST`     | yes      |         |
| `RPC_PORT`     | yes      |         |
| `WEB_HOST`     | yes      |         |
| `WEB_PORT`     | yes      |         |

```python
from mallbots.config import init_config

config = init_config(".env")
config.timeout           # datetime.timedelta
config.web.address()     # "host:port"
```

## Examples

```python
from mallbots.customers.domain import register_customer

customer = register_customer("c-1", "Ada", "sms-1")
customer.enable()
```

```python
from mallbots.baskets.domain import Product, Store, start_basket

basket = start_basket("b-1", "c-1")
store = Store(id="s-1", name="Corner Shop", location="Level 1")
basket.add_item(store, Product(id="p-1", store_id="s-1", name="Tea", price=2.5), 2)
basket.checkout("pay-1")
```

Orders record events as they move on (`OrderCreated`, `OrderCanceled`,
`OrderReadied`, `OrderCompleted`); `Order.total` is the sum of price times
quantity. The ordering `Application` publishes these events through the
publisher it is given, such as an `EventDispatcher`:

```python
from mallbots.ddd import EventDispatcher
from mallbots.ordering.application import Application, CreateOrder
from mallbots.ordering.event_handlers import NotificationHandlers
from mallbots.ordering.handlers import register_notification_handlers

dispatcher = EventDispatcher()
register_notification_handlers(NotificationHandlers(notifications), dispatcher)
app = Application(orders, dispatcher)
```

`mallbots.ordering.event_handlers` has the handler classes (`CustomerHandlers`,
`InvoiceHandlers`, `NotificationHandlers`, `PaymentHandlers`,
`ShoppingHandlers`), and `mallbots.ordering.access_log` also offers
`log_domain_event_handler_access` to log them.

## Storage

`CustomerRepository` (`mallbots.customers.postgres`), `BasketRepository`
(`mallbots.baskets.postgres`), `ShoppingListRepository`
(`mallbots.depot.postgres`) and `OrderRepository`
(`mallbots.ordering.postgres`) take a table name and a SQLAlchemy `Engine`.
Basket and order items and shopping-list stops are stored as JSON text.
Looking up a row that does not exist raises `sqlalchemy.exc.NoResultFound`.

What the package does not do:

- It does not create tables or run migrations; the tables must already exist.
- It has no storage for stores, products, payments or invoices. For those,
  pass your own objects that follow the repository protocols in
  `mallbots.stores.domain` and `mallbots.payments.domain`.
- It has no repositories that talk to other services (order submission from
  baskets, notifications, shopping-list creation and the like); these too are
  supplied by the caller against the protocols in each `domain` module.
- It does not serve an HTTP or RPC API and has no command to start one.

## Tests

The test suite uses pytest and pytest-asyncio, available through the `test`
extra:

```
pip install -e .[test]
pytest
```