from datetime import date
import unittest

from kitchen.infra.storage import MemoryStorage
from kitchen.store import KitchenStore


class TestRecipeSearch(unittest.TestCase):

    def setUp(self):
        self.store = KitchenStore(MemoryStorage(), clock=lambda: date(2026, 3, 16)).initialize()
        self.store.add_recipe({
            "name": "Chickpea Curry",
            "description": "Warming one-pot dinner",
            "ingredients": ["1 can chickpeas", "coconut milk", "curry paste"],
            "instructions": ["Simmer everything"],
            "prep_time": 10,
            "cook_time": 25,
            "servings": 4,
            "tags": ["Vegan", "dinner"],
            "image": "",
        })

    def names(self, query):
        return [r.name for r in self.store.search_recipes(query)]

    def test_blank_query_returns_everything_in_order(self):
        expected = [r.name for r in self.store.recipes]
        self.assertEqual(self.names(""), expected)
        self.assertEqual(self.names("   "), expected)

    def test_name_match_is_case_insensitive(self):
        self.assertEqual(self.names("pasta"), ["Classic Pasta Carbonara"])
        self.assertEqual(self.names("PASTA"), ["Classic Pasta Carbonara"])

    def test_tag_only_match(self):
        self.assertEqual(self.names("vegan"), ["Chickpea Curry"])

    def test_description_match(self):
        self.assertEqual(self.names("one-pot"), ["Chickpea Curry"])

    def test_ingredient_match(self):
        self.assertEqual(self.names("avocado"), ["Avocado Toast"])
        self.assertEqual(self.names("coconut"), ["Berry Smoothie Bowl", "Chickpea Curry"])

    def test_results_keep_collection_order(self):
        self.assertEqual(self.names("breakfast"), ["Avocado Toast", "Berry Smoothie Bowl"])

    def test_substring_not_tokenised(self):
        self.assertEqual(self.names("carbo"), ["Classic Pasta Carbonara"])
        self.assertEqual(self.names("zzz"), [])
