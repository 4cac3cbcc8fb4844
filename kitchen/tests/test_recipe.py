import unittest
from kitchen.domain.Recipe import Recipe


class TestRecipe(unittest.TestCase):

    def setUp(self):
        self.recipe = Recipe(
            id="r1",
            name="Pancakes",
            description="Fluffy weekend breakfast",
            ingredients=["200g flour", "300ml milk", "2 eggs"],
            instructions=["Mix ingredients", "Cook on skillet"],
            prep_time=10,
            cook_time=15,
            servings=4,
            tags=["breakfast", "vegetarian", "breakfast"],
            image="pancakes.png",
        )

    def test_tags_are_deduplicated_in_order(self):
        self.assertEqual(self.recipe.tags, ["breakfast", "vegetarian"])

    def test_total_time(self):
        self.assertEqual(self.recipe.total_time, 25)

    def test_rejects_negative_times_and_zero_servings(self):
        with self.assertRaises(ValueError):
            Recipe("x", "Bad", "", [], [], prep_time=-1, cook_time=0, servings=1)
        with self.assertRaises(ValueError):
            Recipe("x", "Bad", "", [], [], prep_time=0, cook_time=0, servings=0)

    def test_matches_each_field(self):
        self.assertTrue(self.recipe.matches("pancake"))
        self.assertTrue(self.recipe.matches("WEEKEND"))
        self.assertTrue(self.recipe.matches("vegetar"))
        self.assertTrue(self.recipe.matches("flour"))
        self.assertFalse(self.recipe.matches("skillet"))  # instructions are not searched

    def test_dict_round_trip_uses_storage_keys(self):
        data = self.recipe.to_dict()
        self.assertEqual(data["prepTime"], 10)
        self.assertEqual(data["cookTime"], 15)
        self.assertEqual(Recipe.from_dict(data), self.recipe)

    def test_create_requires_fields(self):
        with self.assertRaises(ValueError) as ctx:
            Recipe.create("r2", {"name": "Only a name"})
        self.assertIn("description", str(ctx.exception))

    def test_create_rejects_id(self):
        with self.assertRaises(ValueError):
            Recipe.create("r2", {"id": "mine", "name": "x"})

    def test_merged_replaces_one_field(self):
        updated = self.recipe.merged({"servings": 2})
        self.assertEqual(updated.servings, 2)
        self.assertEqual(updated.id, "r1")
        for field in Recipe.FIELDS:
            if field != "servings":
                self.assertEqual(getattr(updated, field), getattr(self.recipe, field))
        # original untouched
        self.assertEqual(self.recipe.servings, 4)

    def test_merged_rejects_unknown_field_and_id(self):
        with self.assertRaises(ValueError):
            self.recipe.merged({"calories": 300})
        with self.assertRaises(ValueError):
            self.recipe.merged({"id": "other"})
