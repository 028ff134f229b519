# service/item_service.py
import logging
from decimal import Decimal

from pizzastore.util.constant import ITEM_FIELDS, SORT_DIRECTIONS

logger = logging.getLogger("menu_logger")

ITEM_LISTING = "SELECT itemName AS Name, price AS Price, description AS Description FROM Items"


def list_items(executor):
    return executor.execute_query_and_return_result(f"{ITEM_LISTING} ORDER BY itemName;")


def items_by_type(executor, type_of_item):
    return executor.execute_query_and_return_result(
        f"{ITEM_LISTING} WHERE TRIM(LOWER(typeOfItem)) = LOWER(TRIM(:type_of_item)) "
        "ORDER BY itemName;",
        {"type_of_item": type_of_item},
    )


def items_up_to_price(executor, price_limit):
    return executor.execute_query_and_return_result(
        f"{ITEM_LISTING} WHERE price <= :price_limit ORDER BY price, itemName;",
        {"price_limit": float(price_limit)},
    )


def print_items_sorted_by_price(executor, direction="ASC"):
    direction = direction.upper()
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort direction {direction!r}")
    return executor.execute_query_and_print_result(
        f"{ITEM_LISTING} ORDER BY price {direction}, itemName;"
    )


def item_exists(executor, item_name):
    rows = executor.execute_query_and_return_result(
        "SELECT itemName FROM Items WHERE itemName = :item_name;",
        {"item_name": item_name},
    )
    return bool(rows)


def item_price(executor, item_name):
    """Unit price as a Decimal, or None for an unknown item."""
    rows = executor.execute_query_and_return_result(
        "SELECT price FROM Items WHERE itemName = :item_name;",
        {"item_name": item_name},
    )
    if not rows or rows[0][0] is None:
        return None
    return Decimal(rows[0][0])


def print_item(executor, item_name):
    return executor.execute_query_and_print_result(
        "SELECT itemName, ingredients, typeOfItem, price, description "
        "FROM Items WHERE itemName = :item_name;",
        {"item_name": item_name},
    )


def add_item(executor, item_name, ingredients, type_of_item, price, description):
    """Insert a menu item; False when the name is already on the menu."""
    if item_exists(executor, item_name):
        return False
    executor.execute_update(
        "INSERT INTO Items (itemName, ingredients, typeOfItem, price, description) "
        "VALUES (:item_name, :ingredients, :type_of_item, :price, :description);",
        {
            "item_name": item_name,
            "ingredients": ingredients,
            "type_of_item": type_of_item,
            "price": float(price),
            "description": description,
        },
    )
    logger.info(f"Added menu item {item_name} at {price}")
    return True


def update_item_field(executor, item_name, choice, value):
    """Update one whitelisted Items column picked from ITEM_FIELDS."""
    column, _label = ITEM_FIELDS[choice]
    if column == "price":
        value = float(value)
    updated = executor.execute_update(
        f"UPDATE Items SET {column} = :value WHERE itemName = :item_name;",
        {"value": value, "item_name": item_name},
    ) > 0
    if updated:
        logger.info(f"Updated {column} of menu item {item_name}")
    return updated


def count_item_references(executor, item_name):
    rows = executor.execute_query_and_return_result(
        "SELECT COUNT(*) FROM ItemsInOrder WHERE itemName = :item_name;",
        {"item_name": item_name},
    )
    return int(rows[0][0])


def delete_item(executor, item_name):
    deleted = executor.execute_update(
        "DELETE FROM Items WHERE itemName = :item_name;", {"item_name": item_name}
    ) > 0
    if deleted:
        logger.info(f"Deleted menu item {item_name}")
    return deleted
