import logging
import os
import sys

import click
from flask import current_app

from pizzastore.app import build_database_uri, create_app
from pizzastore.database_init import db
from pizzastore.menus.context import MenuContext
from pizzastore.menus.dispatcher import run_menus
from pizzastore.service.query_executor import DatabaseError, QueryExecutor
from pizzastore.util.console import Console

logger = logging.getLogger(__name__)


def greeting(console, app_name):
    console.echo(
        "\n\n*******************************************************\n"
        f"              {app_name} User Interface\n"
        "*******************************************************\n"
    )


def connect(console):
    """Open the one database session for this run; exit if it cannot be used."""
    console.echo("Connecting to database...", nl=False)
    url = db.engine.url
    console.echo(f"Connection URL: {url.render_as_string(hide_password=True)}\n")
    executor = QueryExecutor(db.session, out=console.stdout)
    try:
        executor.ping()
    except DatabaseError as e:
        logger.critical(f"Unable to connect to {url.database}: {e}")
        console.error(f"Error - Unable to Connect to Database: {e}")
        console.echo("Make sure you started postgres on this machine")
        executor.cleanup()
        sys.exit(1)
    console.echo("Done")
    return executor


def serve(console):
    """Connect, run the menus and always release the session."""
    greeting(console, current_app.config["APP_NAME"])
    executor = connect(console)
    try:
        run_menus(MenuContext(executor, console))
    finally:
        console.echo("Disconnecting from database...", nl=False)
        executor.cleanup()
        console.echo("Done\n\nBye !")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("dbname")
@click.argument("port", type=click.IntRange(1, 65535))
@click.argument("user")
def main(dbname, port, user):
    """Pizza store console client for the DBNAME database on PORT as USER."""
    uri = build_database_uri(
        dbname,
        port,
        user,
        password=os.getenv("PASSWORD_DB", ""),
        host=os.getenv("ADDRESS_DB", "localhost"),
    )
    app = create_app({"SQLALCHEMY_DATABASE_URI": uri})
    with app.app_context():
        serve(Console())


if __name__ == "__main__":
    main()
