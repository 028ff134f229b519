import io

import pytest
from sqlalchemy import text

from pizzastore.app import create_app
from pizzastore.database_init import db
from pizzastore.menus.context import MenuContext
from pizzastore.models import FoodOrder, Item, ItemsInOrder, Store, User
from pizzastore.service.query_executor import QueryExecutor
from pizzastore.service.user_service import CurrentUser
from pizzastore.util.console import Console
from pizzastore.util.constant import USER_ROLE


@pytest.fixture(scope="session")
def log_dir(tmp_path_factory):
    return str(tmp_path_factory.mktemp("logs"))


def _make_app(log_dir, **extra):
    config = {
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "LOG_DIR": log_dir,
        "ADMIN_USERNAME": None,
        "ADMIN_PASSWORD": None,
    }
    config.update(extra)
    return create_app(config)


@pytest.fixture
def empty_app(log_dir):
    app = _make_app(log_dir)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app(empty_app):
    db.session.add_all(
        [
            User(login="alice", password="secret", role="customer", phone_num="555-0101"),
            User(
                login="bob",
                password="hunter2",
                role="customer",
                phone_num="555-0102",
                favorite_items="Soda",
            ),
            User(login="dave", password="drive", role="driver", phone_num="555-0103"),
            User(login="maria", password="boss", role="manager", phone_num="555-0104"),
            Store(store_id=1, address="3900 Main St", city="Riverside", state="CA",
                  is_open="yes", review_score=4.5),
            Store(store_id=2, address="455 E Highland Ave", city="San Bernardino",
                  state="CA", is_open="no", review_score=3.2),
            Item(item_name="Pepperoni", ingredients="dough,cheese,pepperoni",
                 type_of_item="entree", price=9.99, description="Classic"),
            Item(item_name="Margherita", ingredients="dough,cheese,basil",
                 type_of_item="entree", price=8.49, description="Fresh basil"),
            Item(item_name="Soda", ingredients="water,sugar",
                 type_of_item=" Drinks ", price=1.99, description="Fountain drink"),
        ]
    )
    db.session.commit()
    return empty_app


@pytest.fixture
def executor(app):
    return QueryExecutor(db.session, out=io.StringIO())


@pytest.fixture
def make_ctx(app):
    """Build a MenuContext whose console reads ``script`` line by line."""

    def _make(script="", login=None, role=None):
        console = Console(io.StringIO(script), io.StringIO(), io.StringIO())
        executor = QueryExecutor(db.session, out=console.stdout)
        user = None
        if login is not None:
            user = CurrentUser(login, role or USER_ROLE.customer)
        return MenuContext(executor, console, user)

    return _make


@pytest.fixture
def scalar(app):
    def _scalar(sql, **params):
        return db.session.execute(text(sql), params).scalar()

    return _scalar


@pytest.fixture
def add_order(app):
    def _add(order_id, login="alice", store_id=1, lines=(("Pepperoni", 1),), total=9.99):
        db.session.add(
            FoodOrder(
                order_id=order_id,
                login=login,
                store_id=store_id,
                total_price=total,
                order_status="Pending",
            )
        )
        for item_name, quantity in lines:
            db.session.add(ItemsInOrder(order_id=order_id, item_name=item_name, quantity=quantity))
        db.session.commit()

    return _add
