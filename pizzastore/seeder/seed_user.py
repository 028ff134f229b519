import json
import os

from pizzastore.database_init import db
from pizzastore.models.user import User
from pizzastore.util.constant import USER_ROLE


def seed_users(app):
    """Seed sample accounts from ./data/users.json."""
    data_file = os.path.join(os.path.dirname(__file__), "./data/users.json")
    data_file = os.path.abspath(data_file)

    with open(data_file, "r", encoding="utf-8") as f:
        users = json.load(f)

    with app.app_context():
        added_count = 0
        for us in users:
            if not User.query.filter_by(login=us["login"]).first():
                db.session.add(
                    User(
                        login=us["login"],
                        password=us["password"],
                        role=USER_ROLE.from_db(us.get("role", "customer")).name,
                        phone_num=us.get("phoneNum"),
                        favorite_items=us.get("favoriteItems"),
                    )
                )
                added_count += 1
        if added_count > 0:
            db.session.commit()
            print(f"✅ Added {added_count} users.")
        else:
            print("⚠️ No new users to add.")
        return added_count


def seed_admin_user(app):
    with app.app_context():
        login = app.config.get("ADMIN_USERNAME")
        raw_password = app.config.get("ADMIN_PASSWORD")

        if not login or not raw_password:
            print("❌ ADMIN_USERNAME or ADMIN_PASSWORD missing in .env, manager not created")
            return False

        if not User.query.filter_by(login=login).first():
            user = User(
                login=login,
                password=raw_password,
                role=USER_ROLE.manager.name,
                phone_num=app.config.get("ADMIN_PHONE") or None,
            )
            db.session.add(user)
            db.session.commit()
            print(f"✅ Created manager: {login}")
            return True
        print("⚠️ Manager already exists, skipped.")
        return False
