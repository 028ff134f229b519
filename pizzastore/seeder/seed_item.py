import json
import os

from pizzastore.database_init import db
from pizzastore.models.item import Item


def seed_items(app):
    """Seed the menu from ./data/items.json into database."""
    data_file = os.path.join(os.path.dirname(__file__), "./data/items.json")
    data_file = os.path.abspath(data_file)

    with open(data_file, "r", encoding="utf-8") as f:
        items = json.load(f)

    with app.app_context():
        added_count = 0
        for it in items:
            # same item name means already seeded
            if not Item.query.filter_by(item_name=it["itemName"]).first():
                db.session.add(
                    Item(
                        item_name=it["itemName"],
                        ingredients=it.get("ingredients"),
                        type_of_item=it.get("typeOfItem"),
                        price=it["price"],
                        description=it.get("description"),
                    )
                )
                added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Added {added_count} menu items.")
        else:
            print("⚠️ No new menu items to add.")
        return added_count
