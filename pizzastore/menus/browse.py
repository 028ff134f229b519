from decimal import Decimal, InvalidOperation

from pizzastore.service import item_service, store_service


def _show(ctx, rows):
    if not rows:
        ctx.console.echo("No items found.")
        return
    ctx.console.print_rows(rows)


def show_all_items(ctx):
    _show(ctx, item_service.list_items(ctx.executor))


def filter_by_type(ctx):
    type_of_item = ctx.console.read_line("Enter type to filter by: ")
    _show(ctx, item_service.items_by_type(ctx.executor, type_of_item))


def filter_by_price(ctx):
    raw = ctx.console.read_line("Enter maximum price of item: ").strip()
    try:
        price_limit = Decimal(raw)
    except InvalidOperation:
        ctx.console.echo("Invalid price! Please enter a numeric value.")
        return
    if not price_limit.is_finite():
        ctx.console.echo("Invalid price! Please enter a numeric value.")
        return
    _show(ctx, item_service.items_up_to_price(ctx.executor, price_limit))


def sort_by_price_ascending(ctx):
    if not item_service.print_items_sorted_by_price(ctx.executor, "ASC"):
        ctx.console.echo("No items found.")


def sort_by_price_descending(ctx):
    if not item_service.print_items_sorted_by_price(ctx.executor, "DESC"):
        ctx.console.echo("No items found.")


def view_stores(ctx):
    ctx.console.echo("\n---- Available Stores ----")
    row_count = store_service.print_stores(ctx.executor)
    ctx.console.echo(f"\nTotal stores: {row_count}")
