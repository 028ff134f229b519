from pizzastore.models.user import User
from pizzastore.models.store import Store
from pizzastore.models.item import Item
from pizzastore.models.food_order import FoodOrder
from pizzastore.models.items_in_order import ItemsInOrder

__all__ = ["User", "Store", "Item", "FoodOrder", "ItemsInOrder"]
