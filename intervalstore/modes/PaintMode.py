import argparse
from typing import Any, Callable, List, Tuple

from rich.console import Console
from rich.markup import escape

from intervalstore.modes.IntervalStoreBaseMode import IntervalStoreBaseMode
from intervalstore.store.IntervalStore import IntervalStore
from intervalstore.store.store_utils import render_entries

PAINT_USAGE = "intervalstore paint [-h] [--lookup KEY] [--str-keys] BASE [BEGIN:END=VALUE ...]"

PAINT_EPILOG = """\
examples:
  intervalstore paint x 1:5=A 2:3=B --lookup 2
  intervalstore paint x -3:2=A 0:4=B --lookup -1
"""


def parse_assignment(text: str, key_type: Callable[[str], Any] = int) -> Tuple[Any, Any, str]:
    """
    Parse an assignment of the form BEGIN:END=VALUE.

    :param text: Assignment text.
    :param key_type: Conversion applied to both keys.
    :return: Tuple of begin, end and value.
    """
    if "=" not in text:
        raise ValueError(f"Invalid assignment '{text}', expected 'BEGIN:END=VALUE'.")
    keys, value = text.split("=", 1)

    if ":" not in keys:
        raise ValueError(f"Invalid range '{keys}', expected 'BEGIN:END'.")
    begin, end = keys.split(":", 1)

    try:
        return key_type(begin), key_type(end), value
    except ValueError as e:
        raise ValueError(f"Invalid key in assignment '{text}': {e}")


class PaintMode(IntervalStoreBaseMode):
    name = "paint"

    def __init__(self, console: Console):
        super().__init__(console)

    def run(self):
        args, assignment_texts = self._parse_args()
        key_type = str if bool(args.str_keys) else int

        assignments = [parse_assignment(a, key_type) for a in assignment_texts]
        store: IntervalStore[Any, str] = IntervalStore(args.base)

        for begin, end, value in assignments:
            result = store.assign(begin, end, value)
            message = escape(f"[{begin!r}, {end!r}) = {value!r}")
            if result.ok:
                self.console.print(message)
            else:
                self.console.print(f"[red]{message} failed: {result.kind.name} ({escape(str(result.error))})[/red]")

        self.console.print(render_entries(store.entries()))
        self.console.print(f"Canonical: {store.is_canonical()}")

        for key in args.lookup:
            key = key_type(key)
            self.console.print(f"lookup({key!r}) = {store.lookup(key)!r}")

    def _parse_args(self) -> Tuple[argparse.Namespace, List[str]]:
        parser = self._create_parser(usage=PAINT_USAGE, epilog=PAINT_EPILOG)
        parser.add_argument("base", type=str, help="Base value of the store.")
        parser.add_argument("--lookup", action="append", default=[], metavar="KEY",
                            help="Key to look up afterwards.")
        parser.add_argument("--str-keys", action="store_true", help="Keep keys as strings instead of integers.")

        # assignments may start with a minus, so they are collected from the unknown arguments
        args, assignments = parser.parse_known_args()
        return args, [a for a in assignments if a != "--"]
