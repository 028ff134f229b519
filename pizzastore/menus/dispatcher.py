import logging

from pizzastore.menus import auth, browse, orders, profile, staff
from pizzastore.service.query_executor import DatabaseError
from pizzastore.util.constant import PERMISSION

logger = logging.getLogger("menu_logger")


class MenuEntry:
    def __init__(self, choice, label, handler, permission=None, staff_only=False):
        self.choice = choice
        self.label = label
        self.handler = handler
        self.permission = permission
        self.staff_only = staff_only

    def allowed_for(self, user):
        if self.staff_only and (user is None or not user.is_staff):
            return False
        if self.permission is None:
            return True
        return user is not None and user.can(self.permission)

    def label_for(self, user):
        if callable(self.label):
            return self.label(user)
        return self.label


class Menu:
    """A numbered menu looping until its exit choice is picked.

    Entries the current role may not use are neither listed nor reachable.
    """

    def __init__(self, title, entries, exit_choice, exit_label):
        self.title = title
        self.entries = entries
        self.exit_choice = exit_choice
        self.exit_label = exit_label

    def title_for(self, user):
        if callable(self.title):
            return self.title(user)
        return self.title

    def visible_entries(self, user):
        return [entry for entry in self.entries if entry.allowed_for(user)]

    def show(self, ctx):
        console = ctx.console
        title = self.title_for(ctx.current_user)
        console.echo(f"\n{title}")
        console.echo("-" * len(title))
        for entry in self.visible_entries(ctx.current_user):
            console.echo(f"{entry.choice}. {entry.label_for(ctx.current_user)}")
        console.echo(f"{self.exit_choice}. {self.exit_label}")

    def lookup(self, user, choice):
        for entry in self.visible_entries(user):
            if entry.choice == choice:
                return entry
        return None

    def run(self, ctx):
        while True:
            self.show(ctx)
            choice = ctx.console.read_choice()
            if choice == self.exit_choice:
                return
            entry = self.lookup(ctx.current_user, choice)
            if entry is None:
                ctx.console.echo("Unrecognized choice!")
                continue
            dispatch(ctx, entry.handler)


def dispatch(ctx, handler):
    """Run one handler; a failed statement is reported and the menu goes on."""
    try:
        return handler(ctx)
    except DatabaseError as e:
        logger.info(f"{handler.__name__} failed: {e}")
        ctx.console.error(f"Database Error: {e}")
        return None


def _submenu(menu, name):
    def run_submenu(ctx):
        menu.run(ctx)

    run_submenu.__name__ = name
    return run_submenu


PROFILE_MENU = Menu(
    "Update Profile",
    [
        MenuEntry(1, "Update Password", profile.update_password),
        MenuEntry(2, "Update Phone Number", profile.update_phone),
        MenuEntry(3, "Update Favorite Items", profile.update_favorite_items),
    ],
    exit_choice=4,
    exit_label="Go Back",
)

BROWSE_MENU = Menu(
    "Browse Menu",
    [
        MenuEntry(1, "View all items", browse.show_all_items),
        MenuEntry(2, "Filter by item type", browse.filter_by_type),
        MenuEntry(3, "Filter by item price", browse.filter_by_price),
        MenuEntry(4, "Sort by price (ascending)", browse.sort_by_price_ascending),
        MenuEntry(5, "Sort by price (descending)", browse.sort_by_price_descending),
    ],
    exit_choice=6,
    exit_label="Go Back",
)

MENU_MANAGEMENT_MENU = Menu(
    "Menu Management",
    [
        MenuEntry(1, "Add new item", staff.add_menu_item, PERMISSION.manage_menu),
        MenuEntry(2, "Update existing item", staff.update_menu_item, PERMISSION.manage_menu),
        MenuEntry(3, "Delete item", staff.delete_menu_item, PERMISSION.manage_menu),
    ],
    exit_choice=4,
    exit_label="Back to staff menu",
)

STAFF_MENU = Menu(
    lambda user: f"{user.role.label} Menu",
    [
        MenuEntry(1, "View Orders for Any User", orders.view_orders, PERMISSION.view_any_orders),
        MenuEntry(
            2,
            "View Recent Orders for Any User",
            orders.view_recent_orders,
            PERMISSION.view_any_orders,
        ),
        MenuEntry(
            3,
            "Update Order Status",
            orders.update_order_status,
            PERMISSION.update_order_status,
        ),
        MenuEntry(
            4,
            "Manage Menu Items",
            _submenu(MENU_MANAGEMENT_MENU, "menu_management"),
            PERMISSION.manage_menu,
        ),
        MenuEntry(5, "Update User Role", staff.update_user_role, PERMISSION.manage_users),
        MenuEntry(6, "Update User Profile", staff.update_user_profile, PERMISSION.manage_users),
    ],
    exit_choice=9,
    exit_label="Back to Main Menu",
)

USER_MENU = Menu(
    "MAIN MENU",
    [
        MenuEntry(1, "View Profile", profile.view_profile),
        MenuEntry(2, "Update Profile", _submenu(PROFILE_MENU, "update_profile")),
        MenuEntry(3, "View Menu", _submenu(BROWSE_MENU, "view_menu")),
        MenuEntry(4, "Place Order", orders.place_order),
        MenuEntry(5, "View Order History", orders.view_own_orders),
        MenuEntry(6, "View Recent Orders", orders.view_own_recent_orders),
        MenuEntry(7, "View Order Information", orders.view_order_info),
        MenuEntry(8, "View Stores", browse.view_stores),
        MenuEntry(
            9,
            lambda user: f"{user.role.label} Access",
            _submenu(STAFF_MENU, "staff_menu"),
            staff_only=True,
        ),
    ],
    exit_choice=20,
    exit_label="Log out",
)


def _log_in_and_serve(ctx):
    user = auth.log_in(ctx)
    if user is None:
        return
    try:
        USER_MENU.run(ctx)
    finally:
        logger.info(f"User {user.login} logged out")
        ctx.current_user = None


START_MENU = Menu(
    "MAIN MENU",
    [
        MenuEntry(1, "Create user", auth.create_user),
        MenuEntry(2, "Log in", _log_in_and_serve),
    ],
    exit_choice=9,
    exit_label="< EXIT",
)


def run_menus(ctx):
    """Serve the start menu until the user exits or input runs out."""
    try:
        START_MENU.run(ctx)
    except EOFError:
        logger.info("Input closed, leaving the menus")
