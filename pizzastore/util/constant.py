from enum import Enum


class PERMISSION(Enum):
    view_any_orders = "View orders of any user"
    update_order_status = "Update order status"
    manage_menu = "Manage menu items"
    manage_users = "Manage users"


class USER_ROLE(Enum):
    customer = (1, "Customer")
    driver = (2, "Driver")
    manager = (3, "Manager")

    def __init__(self, choice, label):
        self.choice = choice
        self.label = label

    @property
    def permissions(self):
        return ROLE_PERMISSIONS[self]

    def can(self, permission):
        return permission in ROLE_PERMISSIONS[self]

    @property
    def is_staff(self):
        return bool(ROLE_PERMISSIONS[self])

    @classmethod
    def from_db(cls, raw):
        """Parse the role column; CHAR columns come back space padded."""
        if raw is None:
            raise ValueError("User has no role")
        try:
            return cls[raw.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown role {raw!r}") from None

    @classmethod
    def from_choice(cls, choice):
        for role in cls:
            if role.choice == choice:
                return role
        return None


ROLE_PERMISSIONS = {
    USER_ROLE.customer: frozenset(),
    USER_ROLE.driver: frozenset(
        {PERMISSION.view_any_orders, PERMISSION.update_order_status}
    ),
    USER_ROLE.manager: frozenset(PERMISSION),
}


class ORDER_STATUS(Enum):
    pending = (1, "Pending")
    preparing = (2, "Preparing")
    ready = (3, "Ready")
    out_for_delivery = (4, "Out for Delivery")
    delivered = (5, "Delivered")
    cancelled = (6, "Cancelled")

    def __init__(self, choice, label):
        self.choice = choice
        self.label = label

    @classmethod
    def from_choice(cls, choice):
        for status in cls:
            if status.choice == choice:
                return status
        return None


# Items columns a manager may edit, keyed by menu choice
ITEM_FIELDS = {
    1: ("ingredients", "Ingredients"),
    2: ("typeOfItem", "Type of item"),
    3: ("price", "Price"),
    4: ("description", "Description"),
}

# Users columns editable from the admin profile screen
USER_FIELDS = {
    2: ("password", "Password"),
    3: ("phoneNum", "Phone number"),
    4: ("favoriteItems", "Favorite items"),
}

SORT_DIRECTIONS = ("ASC", "DESC")

MAX_LOGIN_LENGTH = 50
RECENT_ORDER_LIMIT = 5
EXIT_KEYWORD = "exit"
DONE_KEYWORD = "done"
