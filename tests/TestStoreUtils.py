import unittest

from rich.console import Console

from intervalstore.store.IntervalStore import IntervalStore
from intervalstore.store.store_utils import find_canonical_violation, render_entries


class TestStoreUtils(unittest.TestCase):
    def test_canonical_sequence_has_no_violation(self):
        self.assertIsNone(find_canonical_violation('x', []))
        self.assertIsNone(find_canonical_violation('x', ['A', 'x', 'B']))

    def test_first_value_restating_base(self):
        self.assertEqual(0, find_canonical_violation('x', ['x', 'A']))

    def test_consecutive_equal_values(self):
        self.assertEqual(2, find_canonical_violation('x', ['A', 'B', 'B', 'A']))

    def test_render_entries_has_row_per_entry(self):
        store = IntervalStore[int, str]('x')
        store.assign(1, 5, 'A')
        store.assign(7, 9, 'B')

        table = render_entries(store.entries(), title="Test")

        self.assertEqual("Test", table.title)
        self.assertEqual(5, table.row_count)

    def test_render_entries_output(self):
        store = IntervalStore[int, str]('x')
        store.assign(1, 5, 'A')

        console = Console(record=True, width=80)
        console.print(render_entries(store.entries()))
        text = console.export_text()

        self.assertIn("-inf", text)
        self.assertIn("'A'", text)
        self.assertIn("5", text)


if __name__ == "__main__":
    unittest.main()
