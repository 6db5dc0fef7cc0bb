from typing import Any, Iterable, Optional, Sequence

from rich.table import Table


def find_canonical_violation(base_value: Any, values: Sequence[Any]) -> Optional[int]:
    """
    Find the first boundary value which restates the value active before it.

    :param base_value: Value which is active before the first boundary.
    :param values: Boundary values in key order.
    :return: Index of the first redundant boundary or None if the sequence is canonical.
    """
    previous = base_value
    for i, value in enumerate(values):
        if value == previous:
            return i
        previous = value
    return None


def render_entries(entries: Iterable[Any], title: str = "Interval Store") -> Table:
    """
    Render the output of IntervalStore.entries() as a table.

    :param entries: Base value followed by (key, value) boundary pairs.
    :param title: Title of the table.
    :return: Table with one row for the base value and one per boundary.
    """
    iterator = iter(entries)

    table = Table(title=title)
    table.add_column("Begin", justify="right", style="cyan")
    table.add_column("Value", justify="left", style="magenta")

    table.add_row("-inf", repr(next(iterator)))
    for key, value in iterator:
        table.add_row(repr(key), repr(value))

    return table
