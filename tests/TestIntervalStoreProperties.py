import unittest
from typing import Dict, List, Tuple

from hypothesis import given, settings
from hypothesis import strategies as st

from intervalstore.store.AssignResult import AssignErrorKind
from intervalstore.store.IntervalStore import IntervalStore

KEY_LIMIT = 20
DOMAIN = range(-KEY_LIMIT - 5, KEY_LIMIT + 6)

keys = st.integers(-KEY_LIMIT, KEY_LIMIT)
values = st.sampled_from("xyz")
assignments = st.lists(st.tuples(keys, keys, values), max_size=40)


def build(base: str, operations: List[Tuple[int, int, str]]) -> Tuple[IntervalStore[int, str], Dict[int, str]]:
    """
    Apply operations to a store and to a naive per-key reference model.
    """
    store = IntervalStore[int, str](base)
    model = {key: base for key in DOMAIN}

    for begin, end, value in operations:
        result = store.assign(begin, end, value)
        if result.ok:
            for key in range(begin, end):
                model[key] = value
        else:
            # only an empty store restating its base value may fail
            assert result.kind == AssignErrorKind.RedundantBaseAssignment
            assert len(store) == 0 and value == base

    return store, model


def expected_entries(base: str, model: Dict[int, str]) -> list:
    entries = [base]
    for key in DOMAIN[1:]:
        if model[key] != model[key - 1]:
            entries.append((key, model[key]))
    return entries


class TestIntervalStoreProperties(unittest.TestCase):
    @settings(max_examples=300)
    @given(base=values, operations=assignments)
    def test_lookup_matches_reference_model(self, base, operations):
        store, model = build(base, operations)

        for key in DOMAIN:
            self.assertEqual(model[key], store.lookup(key))

    @settings(max_examples=300)
    @given(base=values, operations=assignments)
    def test_representation_is_canonical_and_minimal(self, base, operations):
        store, model = build(base, operations)

        self.assertTrue(store.is_canonical())
        self.assertEqual(expected_entries(base, model), list(store.entries()))

    @given(base=values, operations=assignments, begin=keys, end=keys, value=values)
    def test_edges_after_assignment(self, base, operations, begin, end, value):
        store, _ = build(base, operations)
        begin_value = store.lookup(begin)
        end_value = store.lookup(end)
        before = list(store.entries())

        result = store.assign(begin, end, value)

        if not result.ok:
            self.assertEqual(before, list(store.entries()))
            return

        self.assertEqual(end_value, store.lookup(end))
        if begin < end:
            self.assertEqual(value, store.lookup(begin))
        else:
            self.assertEqual(begin_value, store.lookup(begin))
            self.assertEqual(before, list(store.entries()))

    @given(base=values, operations=assignments, begin=keys, end=keys, value=values)
    def test_repeated_assignment_is_idempotent(self, base, operations, begin, end, value):
        store, _ = build(base, operations)

        if not store.assign(begin, end, value).ok:
            return
        once = list(store.entries())
        store.assign(begin, end, value)

        self.assertEqual(once, list(store.entries()))

    @given(base=values, operations=assignments)
    def test_same_operations_give_same_store(self, base, operations):
        first, _ = build(base, operations)
        second, _ = build(base, operations)

        self.assertEqual(list(first.entries()), list(second.entries()))

    @given(base=values, operations=assignments, noop_key=keys, noop_value=values,
           begin=keys, end=keys, value=values)
    def test_equal_mappings_converge(self, base, operations, noop_key, noop_value, begin, end, value):
        # repeating the last step and adding an empty range reaches the same mapping another way
        other_operations = list(operations)
        if operations:
            other_operations.append(operations[-1])
        other_operations.insert(len(operations) // 2, (noop_key, noop_key, noop_value))

        first, first_model = build(base, operations)
        second, second_model = build(base, other_operations)
        self.assertEqual(first_model, second_model)

        first.assign(begin, end, value)
        second.assign(begin, end, value)

        self.assertEqual(list(first.entries()), list(second.entries()))

    @given(base=values, key=st.integers())
    def test_lookup_is_total(self, base, key):
        store = IntervalStore[int, str](base)
        self.assertEqual(base, store.lookup(key))

        store.assign(-KEY_LIMIT, KEY_LIMIT, "w")
        self.assertIn(store.lookup(key), (base, "w"))


if __name__ == "__main__":
    unittest.main()
