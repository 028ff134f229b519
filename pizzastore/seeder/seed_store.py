import json
import os

from pizzastore.database_init import db
from pizzastore.models.store import Store


def seed_stores(app):
    """Seed stores from ./data/stores.json, skipping ids already present."""
    data_file = os.path.join(os.path.dirname(__file__), "./data/stores.json")
    data_file = os.path.abspath(data_file)

    with open(data_file, "r", encoding="utf-8") as f:
        stores = json.load(f)

    with app.app_context():
        added_count = 0
        for st in stores:
            if db.session.get(Store, st["storeID"]) is None:
                db.session.add(
                    Store(
                        store_id=st["storeID"],
                        address=st["address"],
                        city=st["city"],
                        state=st["state"],
                        is_open=st.get("isOpen"),
                        review_score=st.get("reviewScore"),
                    )
                )
                added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Added {added_count} stores.")
        else:
            print("⚠️ No new stores to add.")
        return added_count
