# seeder/seed.py
import click
from flask import current_app
from flask.cli import with_appcontext

from pizzastore.seeder.seed_item import seed_items
from pizzastore.seeder.seed_store import seed_stores
from pizzastore.seeder.seed_user import seed_admin_user, seed_users


def seed_all(app):
    seed_stores(app)
    seed_items(app)
    seed_users(app)
    seed_admin_user(app)


@click.command("seed")
@with_appcontext
def seed_command():
    """Load sample stores, menu items and users into the existing tables."""
    seed_all(current_app._get_current_object())
