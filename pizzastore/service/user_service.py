# service/user_service.py
import logging

from pizzastore.service.query_executor import DatabaseError
from pizzastore.util.constant import USER_ROLE, USER_FIELDS

logger = logging.getLogger("auth_logger")


class CurrentUser:
    """Identity of the logged-in user, fixed at authentication time."""

    def __init__(self, login, role):
        self.login = login
        self.role = role

    def can(self, permission):
        return self.role.can(permission)

    @property
    def is_staff(self):
        return self.role.is_staff

    def __repr__(self):
        return f"<CurrentUser {self.login} - {self.role.name}>"


def _is_duplicate_key(error):
    message = str(error).lower()
    return "duplicate key value" in message or "unique constraint" in message


def _parse_role(raw, login):
    try:
        return USER_ROLE.from_db(raw)
    except ValueError as e:
        logger.info(f"User {login} has an unusable role: {e}")
        return None


def login_exists(executor, login):
    rows = executor.execute_query_and_return_result(
        "SELECT login FROM Users WHERE login = :login;", {"login": login}
    )
    return bool(rows)


def create_user(executor, login, password, phone_num, role=USER_ROLE.customer, favorite_items=None):
    """Insert a new user; False when the login is already taken."""
    if login_exists(executor, login):
        return False
    try:
        executor.execute_update(
            "INSERT INTO Users (login, password, role, favoriteItems, phoneNum) "
            "VALUES (:login, :password, :role, :favorite_items, :phone_num);",
            {
                "login": login,
                "password": password,
                "role": role.name,
                "favorite_items": favorite_items,
                "phone_num": phone_num,
            },
        )
    except DatabaseError as e:
        if _is_duplicate_key(e):
            return False
        raise
    logger.info(f"Created user {login} with role {role.name}")
    return True


def authenticate(executor, login, password):
    """Return a CurrentUser when login and password match a row exactly."""
    rows = executor.execute_query_and_return_result(
        "SELECT login, role FROM Users WHERE login = :login AND password = :password;",
        {"login": login, "password": password},
    )
    # exact match only, CHAR padding aside
    if not rows or rows[0][0].rstrip() != login.rstrip():
        logger.info(f"Failed login attempt for {login!r}")
        return None
    logger.info(f"User {login} logged in")
    # unknown roles get no staff access
    role = _parse_role(rows[0][1], login) or USER_ROLE.customer
    return CurrentUser(rows[0][0].rstrip(), role)


def get_profile(executor, login):
    """Return (favorite_items, phone_num) or None when the user is gone."""
    rows = executor.execute_query_and_return_result(
        "SELECT favoriteItems, phoneNum FROM Users WHERE login = :login;",
        {"login": login},
    )
    if not rows:
        return None
    return rows[0][0], rows[0][1]


def get_role(executor, login):
    """Role of an existing user; None when the user is gone or the role is unknown."""
    rows = executor.execute_query_and_return_result(
        "SELECT role FROM Users WHERE login = :login;", {"login": login}
    )
    if not rows:
        return None
    return _parse_role(rows[0][0], login)


def update_password(executor, login, password):
    return executor.execute_update(
        "UPDATE Users SET password = :password WHERE login = :login;",
        {"password": password, "login": login},
    ) > 0


def update_phone(executor, login, phone_num):
    return executor.execute_update(
        "UPDATE Users SET phoneNum = :phone_num WHERE login = :login;",
        {"phone_num": phone_num, "login": login},
    ) > 0


def update_favorite_items(executor, login, favorite_items):
    return executor.execute_update(
        "UPDATE Users SET favoriteItems = :favorite_items WHERE login = :login;",
        {"favorite_items": favorite_items, "login": login},
    ) > 0


def update_user_field(executor, login, choice, value):
    """Update one whitelisted Users column picked from USER_FIELDS."""
    column, _label = USER_FIELDS[choice]
    updated = executor.execute_update(
        f"UPDATE Users SET {column} = :value WHERE login = :login;",
        {"value": value, "login": login},
    ) > 0
    if updated:
        logger.info(f"Updated {column} of user {login}")
    return updated


def update_role(executor, login, role):
    updated = executor.execute_update(
        "UPDATE Users SET role = :role WHERE login = :login;",
        {"role": role.name, "login": login},
    ) > 0
    if updated:
        logger.info(f"Changed role of {login} to {role.name}")
    return updated


def rename_user(executor, old_login, new_login):
    """Move a user and their orders to a new login; False if it is taken."""
    if login_exists(executor, new_login):
        return False
    try:
        with executor.atomic():
            executor.execute_update(
                "UPDATE FoodOrder SET login = :new_login WHERE login = :old_login;",
                {"new_login": new_login, "old_login": old_login},
            )
            executor.execute_update(
                "UPDATE Users SET login = :new_login WHERE login = :old_login;",
                {"new_login": new_login, "old_login": old_login},
            )
    except DatabaseError as e:
        if _is_duplicate_key(e):
            return False
        raise
    logger.info(f"Renamed user {old_login} to {new_login}")
    return True


def print_user(executor, login):
    return executor.execute_query_and_print_result(
        "SELECT login, password, role, favoriteItems, phoneNum FROM Users WHERE login = :login;",
        {"login": login},
    )
