from datetime import date
import unittest
from kitchen.domain.InventoryItem import InventoryItem
from kitchen.domain.ShoppingItem import ShoppingItem


class TestInventoryItem(unittest.TestCase):

    def test_display_category_defaults(self):
        item = InventoryItem("i1", "Salt", "", 1, "kg")
        self.assertEqual(item.display_category, "Uncategorized")
        self.assertEqual(item.category, "")
        self.assertNotIn("Uncategorized", item.to_dict().values())

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValueError):
            InventoryItem("i1", "Salt", "Spices", -1, "kg")

    def test_days_until_expiry(self):
        item = InventoryItem("i1", "Milk", "Dairy", 1, "liter", date(2026, 3, 18))
        self.assertEqual(item.days_until_expiry(date(2026, 3, 16)), 2)
        self.assertIsNone(InventoryItem("i2", "Rice", "Dry", 1, "kg").days_until_expiry(date(2026, 3, 16)))

    def test_round_trip_with_and_without_expiry(self):
        with_exp = InventoryItem("i1", "Milk", "Dairy", 1, "liter", date(2026, 3, 18))
        without = InventoryItem("i2", "Rice", "Dry", 2.5, "kg")
        self.assertEqual(with_exp.to_dict()["expiryDate"], "2026-03-18")
        self.assertNotIn("expiryDate", without.to_dict())
        self.assertEqual(InventoryItem.from_dict(with_exp.to_dict()), with_exp)
        restored = InventoryItem.from_dict(without.to_dict())
        self.assertIsNone(restored.expiry_date)
        self.assertEqual(restored, without)


class TestShoppingItem(unittest.TestCase):

    def test_defaults_unchecked(self):
        item = ShoppingItem.create("s1", {"name": "Pasta", "quantity": 1, "unit": "pkg"})
        self.assertFalse(item.checked)
        self.assertEqual(item.display_category, "Uncategorized")

    def test_round_trip(self):
        item = ShoppingItem("s1", "Avocados", "Produce", 3, "pcs", checked=True)
        self.assertEqual(ShoppingItem.from_dict(item.to_dict()), item)
