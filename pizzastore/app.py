from flask import Flask
from dotenv import load_dotenv
from sqlalchemy.engine import URL
import os

from pizzastore.database_init import db
from pizzastore.log import setup_logging

load_dotenv()


def build_database_uri(dbname, port, user, password=None, host=None):
    """PostgreSQL URI for the client; an empty password means none."""
    return URL.create(
        "postgresql",
        username=user,
        password=password or None,
        host=host or "localhost",
        port=int(port),
        database=dbname,
    ).render_as_string(hide_password=False)


def create_app(test_config=None):
    app = Flask(__name__)

    app.config["APP_NAME"] = os.getenv("APP_NAME", "PizzaStore")
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv("DATABASE_URL") or build_database_uri(
        os.getenv("NAME_DB", "pizzastore"),
        os.getenv("PORT_DB", "5432"),
        os.getenv("USER_DB", "postgres"),
        os.getenv("PASSWORD_DB", ""),
        os.getenv("ADDRESS_DB", "localhost"),
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["LOG_DIR"] = os.getenv("LOG_DIR")
    app.config["ADMIN_USERNAME"] = os.getenv("ADMIN_USERNAME")
    app.config["ADMIN_PASSWORD"] = os.getenv("ADMIN_PASSWORD")
    app.config["ADMIN_PHONE"] = os.getenv("ADMIN_PHONE", "")

    if test_config:
        app.config.update(test_config)

    # logging
    setup_logging(app.config["LOG_DIR"])

    db.init_app(app)

    from pizzastore.seeder.seed import seed_command

    app.cli.add_command(seed_command)

    return app
