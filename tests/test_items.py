import unittest

from dynknap.business_objects.errors import StateValidationError
from dynknap.business_objects.items import Item


class TestItem(unittest.TestCase):

    def test_dynamic_weight_grows_with_position(self):
        it = Item(value=10, base_weight=3, group=0)
        self.assertEqual(it.dynamic_weight(0, 2), 3)
        self.assertEqual(it.dynamic_weight(1, 2), 5)
        self.assertEqual(it.dynamic_weight(4, 2), 11)

    def test_zero_rate_keeps_base_weight(self):
        it = Item(value=1, base_weight=7, group=1)
        self.assertEqual(it.dynamic_weight(5, 0), 7)

    def test_text_form(self):
        self.assertEqual(str(Item(value=10, base_weight=2, group=0)), "(v=10, w=2)")

    def test_items_are_immutable_and_compare_by_value(self):
        a = Item(5, 2, 0)
        self.assertEqual(a, Item(5, 2, 0))
        with self.assertRaises(Exception):
            a.value = 6  # type: ignore[misc]

    def test_rejects_invalid_fields(self):
        with self.assertRaises(StateValidationError):
            Item(value=-1, base_weight=1, group=0)
        with self.assertRaises(StateValidationError):
            Item(value=1, base_weight=0, group=0)
        with self.assertRaises(StateValidationError):
            Item(value=1, base_weight=1, group=-1)
        with self.assertRaises(StateValidationError):
            Item(value=1.5, base_weight=1, group=0)  # type: ignore[arg-type]
        with self.assertRaises(StateValidationError):
            Item(value=True, base_weight=1, group=0)  # type: ignore[arg-type]

    def test_zero_value_is_allowed(self):
        self.assertEqual(Item(0, 1, 0).value, 0)


if __name__ == "__main__":
    unittest.main()
