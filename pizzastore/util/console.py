import sys

import click


class Console:
    """Line oriented terminal I/O for the menus.

    Streams are injectable so the menus can be driven from a script.
    """

    def __init__(self, stdin=None, stdout=None, stderr=None):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    def echo(self, message="", nl=True):
        click.echo(message, file=self.stdout or sys.stdout, nl=nl)

    def error(self, message):
        click.echo(message, file=self.stderr or sys.stderr)

    def read_line(self, prompt=None, nl=True):
        """Read one line without its newline; EOFError once input runs out."""
        if prompt is not None:
            self.echo(prompt, nl=nl)
        line = (self.stdin or sys.stdin).readline()
        if not line:
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def read_choice(self):
        # returns only once a number is given
        while True:
            raw = self.read_line("Please make your choice: ", nl=False)
            try:
                return int(raw.strip())
            except ValueError:
                self.echo("Your input is invalid!")

    def read_int(self, prompt, nl=False):
        """Return the parsed integer, or None when the input is not numeric."""
        raw = self.read_line(prompt, nl=nl).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def confirm(self, prompt):
        return self.read_line(prompt, nl=False).strip().lower() == "y"

    def print_rows(self, rows):
        for row in rows:
            self.echo(format_row(row))


def format_row(row):
    return " | ".join("" if value is None else value for value in row)


def format_money(value):
    return f"${value:,.2f}"
