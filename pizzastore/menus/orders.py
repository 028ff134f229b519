from pizzastore.menus.context import login_required, requires
from pizzastore.service import item_service, order_service
from pizzastore.service.order_service import Basket
from pizzastore.util.console import format_money
from pizzastore.util.constant import DONE_KEYWORD, ORDER_STATUS, PERMISSION


def _ask_store(ctx):
    while True:
        store_id = ctx.console.read_int("Enter the StoreID of the desired store: ")
        if store_id is None:
            ctx.console.echo("Invalid StoreID! Please enter a numeric value.")
        elif order_service.store_exists(ctx.executor, store_id):
            return store_id
        else:
            ctx.console.echo("Store ID not found. Please enter a valid store.")


def _fill_basket(ctx):
    console = ctx.console
    basket = Basket()
    while True:
        item_name = console.read_line(
            f"Enter item name (or type '{DONE_KEYWORD}' to finish ordering): "
        ).strip()
        if item_name.lower() == DONE_KEYWORD:
            return basket
        quantity = console.read_int("Enter desired quantity: ", nl=True)
        if quantity is None or quantity < 1:
            console.echo("Quantity must be a positive whole number, item skipped.")
            continue
        price = item_service.item_price(ctx.executor, item_name)
        if price is None:
            console.echo(
                "System was unable to locate item or price, please check input and try again!"
            )
            continue
        basket.add(item_name, quantity, price)


@login_required
def place_order(ctx):
    store_id = _ask_store(ctx)
    basket = _fill_basket(ctx)
    if not basket:
        ctx.console.echo("Order cancelled. No items were selected.")
        return None

    order = order_service.place_order(ctx.executor, ctx.current_user.login, store_id, basket)
    console = ctx.console
    console.echo("\n Order placed successfully!")
    console.echo(f"Order ID: {order.order_id}")
    console.echo(f"Store ID: {order.store_id}")
    console.echo(f"Total Price: {format_money(order.total_price)}")
    console.echo("Items Ordered:")
    for item_name, quantity in order.items:
        console.echo(f"- {item_name} x{quantity}")
    return order


def _print_orders(ctx, login, rows, recent=False):
    label = "recent orders" if recent else "orders"
    if not rows:
        ctx.console.echo(f"No {label} found for user: {login}")
        return
    ctx.console.echo(f"\nFound {len(rows)} {label} for user: {login}")
    ctx.console.print_rows(rows)


@login_required
def view_own_orders(ctx):
    login = ctx.current_user.login
    _print_orders(ctx, login, order_service.orders_for_user(ctx.executor, login))


@login_required
def view_own_recent_orders(ctx):
    login = ctx.current_user.login
    rows = order_service.recent_orders_for_user(ctx.executor, login)
    _print_orders(ctx, login, rows, recent=True)


@requires(PERMISSION.view_any_orders)
def view_orders(ctx):
    login = ctx.console.read_line("Which user would you like to view orders for?").strip()
    _print_orders(ctx, login, order_service.orders_for_user(ctx.executor, login))


@requires(PERMISSION.view_any_orders)
def view_recent_orders(ctx):
    login = ctx.console.read_line(
        "Which user would you like to view recent orders for?"
    ).strip()
    rows = order_service.recent_orders_for_user(ctx.executor, login)
    _print_orders(ctx, login, rows, recent=True)


@login_required
def view_order_info(ctx):
    console = ctx.console
    order_id = console.read_int("Enter Order ID to view details: ")
    if order_id is None:
        console.echo("Invalid Order ID! Please enter a numeric value.")
        return
    owner = order_service.order_owner(ctx.executor, order_id)
    if owner is None:
        console.echo("Order not found!")
        return
    user = ctx.current_user
    if owner != user.login and not user.can(PERMISSION.view_any_orders):
        console.echo("You don't have permission to view this order!")
        return

    console.echo("\n---- Order Information ----")
    order_service.print_order_info(ctx.executor, order_id)
    console.echo("\n---- Items in Order ----")
    order_service.print_order_items(ctx.executor, order_id)


@requires(PERMISSION.update_order_status)
def update_order_status(ctx):
    console = ctx.console
    order_id = console.read_int("Enter Order ID to update: ")
    if order_id is None:
        console.echo("Invalid Order ID! Please enter a numeric value.")
        return
    current = order_service.order_status(ctx.executor, order_id)
    if current is None:
        console.echo("Order not found!")
        return
    console.echo(f"Current status: {current}")

    console.echo("Select new status:")
    for status in ORDER_STATUS:
        console.echo(f"{status.choice}. {status.label}")
    status = ORDER_STATUS.from_choice(console.read_choice())
    if status is None:
        console.echo("Invalid choice!")
        return

    order_service.update_order_status(ctx.executor, order_id, status)
    console.echo("Order status updated successfully!")
