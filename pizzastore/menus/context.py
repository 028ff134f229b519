import functools
import logging

logger = logging.getLogger("menu_logger")


class MenuContext:
    """Everything a handler needs: the executor, the console and who is logged in."""

    def __init__(self, executor, console, current_user=None):
        self.executor = executor
        self.console = console
        self.current_user = current_user

    @property
    def is_authenticated(self):
        return self.current_user is not None


def login_required(handler):
    @functools.wraps(handler)
    def wrapper(ctx, *args, **kwargs):
        if not ctx.is_authenticated:
            ctx.console.echo("Error: No user is logged in.")
            return None
        return handler(ctx, *args, **kwargs)

    return wrapper


def requires(permission):
    """Deny the handler to users whose role lacks ``permission``."""

    def decorator(handler):
        @functools.wraps(handler)
        @login_required
        def wrapper(ctx, *args, **kwargs):
            if not ctx.current_user.can(permission):
                logger.info(
                    f"{ctx.current_user.login} ({ctx.current_user.role.name}) "
                    f"denied {handler.__name__}"
                )
                ctx.console.echo(
                    "Access Denied: You do not have permission to perform this action."
                )
                return None
            return handler(ctx, *args, **kwargs)

        return wrapper

    return decorator
