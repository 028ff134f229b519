# service/order_service.py
import logging
from decimal import Decimal, ROUND_HALF_UP

from pizzastore.util.constant import ORDER_STATUS, RECENT_ORDER_LIMIT

logger = logging.getLogger("order_logger")

CENT = Decimal("0.01")

ORDER_LISTING = (
    "SELECT o.orderID, o.totalPrice, o.orderTimestamp, o.orderStatus, s.storeID, s.address "
    "FROM FoodOrder o JOIN Store s ON o.storeID = s.storeID "
    "WHERE o.login = :login "
    "ORDER BY o.orderTimestamp DESC, o.orderID DESC"
)


class Basket:
    """Item lines collected before an order is placed."""

    def __init__(self):
        self.lines = {}

    def add(self, item_name, quantity, unit_price):
        if item_name in self.lines:
            # same item twice becomes one line
            _price, existing = self.lines[item_name]
            quantity += existing
        self.lines[item_name] = (Decimal(unit_price), quantity)

    @property
    def total(self):
        total = sum(
            (price * quantity for price, quantity in self.lines.values()), Decimal("0")
        )
        return total.quantize(CENT, rounding=ROUND_HALF_UP)

    def items(self):
        return [(name, quantity) for name, (_price, quantity) in self.lines.items()]

    def __len__(self):
        return len(self.lines)

    def __bool__(self):
        return bool(self.lines)


class PlacedOrder:
    def __init__(self, order_id, store_id, total_price, items):
        self.order_id = order_id
        self.store_id = store_id
        self.total_price = total_price
        self.items = items

    def __repr__(self):
        return f"<PlacedOrder {self.order_id} - Store {self.store_id}>"


def store_exists(executor, store_id):
    rows = executor.execute_query_and_return_result(
        "SELECT storeID FROM Store WHERE storeID = :store_id;", {"store_id": store_id}
    )
    return bool(rows)


def place_order(executor, login, store_id, basket):
    """Insert the order header and its lines in one transaction.

    The order id is computed by the database inside the INSERT, so there is
    no client side read of MAX(orderID) between two statements.
    """
    if not basket:
        raise ValueError("Cannot place an empty order")
    total = basket.total
    with executor.atomic():
        rows = executor.execute_query_and_return_result(
            "INSERT INTO FoodOrder (orderID, login, storeID, totalPrice, orderTimestamp, orderStatus) "
            "SELECT COALESCE(MAX(orderID), 0) + 1, :login, :store_id, :total_price, "
            "CURRENT_TIMESTAMP, :status FROM FoodOrder "
            "RETURNING orderID;",
            {
                "login": login,
                "store_id": store_id,
                "total_price": float(total),
                "status": ORDER_STATUS.pending.label,
            },
        )
        order_id = int(rows[0][0])
        for item_name, quantity in basket.items():
            executor.execute_update(
                "INSERT INTO ItemsInOrder (orderID, itemName, quantity) "
                "VALUES (:order_id, :item_name, :quantity);",
                {"order_id": order_id, "item_name": item_name, "quantity": quantity},
            )
    logger.info(f"User {login} placed order {order_id} at store {store_id} for {total}")
    return PlacedOrder(order_id, store_id, total, basket.items())


def orders_for_user(executor, login, limit=None):
    if limit is None:
        return executor.execute_query_and_return_result(
            f"{ORDER_LISTING};", {"login": login}
        )
    return executor.execute_query_and_return_result(
        f"{ORDER_LISTING} LIMIT :limit;", {"login": login, "limit": limit}
    )


def recent_orders_for_user(executor, login):
    return orders_for_user(executor, login, limit=RECENT_ORDER_LIMIT)


def order_owner(executor, order_id):
    rows = executor.execute_query_and_return_result(
        "SELECT orderID, login FROM FoodOrder WHERE orderID = :order_id;",
        {"order_id": order_id},
    )
    if not rows:
        return None
    return rows[0][1].rstrip()


def order_status(executor, order_id):
    rows = executor.execute_query_and_return_result(
        "SELECT orderID, orderStatus FROM FoodOrder WHERE orderID = :order_id;",
        {"order_id": order_id},
    )
    if not rows:
        return None
    return (rows[0][1] or "").strip()


def update_order_status(executor, order_id, status):
    updated = executor.execute_update(
        "UPDATE FoodOrder SET orderStatus = :status WHERE orderID = :order_id;",
        {"status": status.label, "order_id": order_id},
    ) > 0
    if updated:
        logger.info(f"Order {order_id} moved to {status.label}")
    return updated


def print_order_info(executor, order_id):
    return executor.execute_query_and_print_result(
        "SELECT o.orderID, o.login, o.totalPrice, o.orderTimestamp, o.orderStatus, "
        "s.storeID, s.address, s.city, s.state "
        "FROM FoodOrder o JOIN Store s ON o.storeID = s.storeID "
        "WHERE o.orderID = :order_id;",
        {"order_id": order_id},
    )


def print_order_items(executor, order_id):
    return executor.execute_query_and_print_result(
        "SELECT io.itemName, io.quantity, i.price, (i.price * io.quantity) AS subtotal "
        "FROM ItemsInOrder io JOIN Items i ON io.itemName = i.itemName "
        "WHERE io.orderID = :order_id;",
        {"order_id": order_id},
    )


def order_lines(executor, order_id):
    return executor.execute_query_and_return_result(
        "SELECT itemName, quantity FROM ItemsInOrder WHERE orderID = :order_id ORDER BY itemName;",
        {"order_id": order_id},
    )
