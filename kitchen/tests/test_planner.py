from datetime import date, datetime, timedelta
import unittest

from kitchen.infra.pdf_utils import generate_pdf_for_week
from kitchen.infra.storage import MemoryStorage
from kitchen.logic.planner.week import set_meal, week_days, week_overview, week_start
from kitchen.store import KitchenStore

MONDAY = date(2026, 3, 16)
WEDNESDAY = MONDAY + timedelta(days=2)


class TestWeekNavigation(unittest.TestCase):

    def test_week_start_is_monday(self):
        self.assertEqual(week_start(WEDNESDAY), MONDAY)
        self.assertEqual(week_start(MONDAY), MONDAY)
        self.assertEqual(week_start(datetime(2026, 3, 22, 23, 0)), MONDAY)

    def test_week_days(self):
        days = week_days(MONDAY)
        self.assertEqual(len(days), 7)
        self.assertEqual(days[0], MONDAY)
        self.assertEqual(days[-1], date(2026, 3, 22))


class TestSetMeal(unittest.TestCase):

    def setUp(self):
        self.store = KitchenStore(MemoryStorage(), clock=lambda: MONDAY).initialize()

    def test_creates_plan_when_day_is_empty(self):
        plan = set_meal(self.store, WEDNESDAY, "lunch", "2")
        self.assertEqual(plan.day, WEDNESDAY)
        self.assertEqual(plan.meals, {"lunch": "2"})
        self.assertEqual(len(self.store.meal_plans), 2)

    def test_clearing_empty_day_creates_nothing(self):
        self.assertIsNone(set_meal(self.store, WEDNESDAY, "lunch", None))
        self.assertEqual(len(self.store.meal_plans), 1)

    def test_updates_existing_plan(self):
        plan = set_meal(self.store, MONDAY, "lunch", "1")
        self.assertEqual(plan.id, "1")
        self.assertEqual(plan.meals, {"breakfast": "1", "lunch": "1", "dinner": "2"})

    def test_clearing_removes_slot(self):
        plan = set_meal(self.store, MONDAY, "dinner", None)
        self.assertEqual(plan.meals, {"breakfast": "1", "lunch": "3"})

    def test_unknown_slot(self):
        with self.assertRaises(ValueError):
            set_meal(self.store, MONDAY, "snacks", "1")


class TestWeekOverview(unittest.TestCase):

    def setUp(self):
        self.store = KitchenStore(MemoryStorage(), clock=lambda: MONDAY).initialize()

    def test_resolves_recipes(self):
        overview = week_overview(self.store, MONDAY)
        self.assertEqual(len(overview), 7)
        monday = overview[0]
        self.assertEqual(monday["plan_id"], "1")
        self.assertEqual(monday["breakfast"]["name"], "Avocado Toast")
        self.assertEqual(monday["lunch"]["name"], "Berry Smoothie Bowl")
        self.assertEqual(monday["dinner"]["name"], "Classic Pasta Carbonara")
        self.assertIsNone(overview[1]["plan_id"])
        self.assertIsNone(overview[1]["breakfast"])

    def test_dangling_reference_resolves_to_none(self):
        self.store.delete_recipe("2")
        monday = week_overview(self.store, MONDAY)[0]
        self.assertIsNone(monday["dinner"])
        self.assertEqual(monday["breakfast"]["name"], "Avocado Toast")

    def test_snacks_skip_missing_recipes(self):
        self.store.add_meal_plan({"date": WEDNESDAY, "meals": {"snacks": ["3", "gone"]}})
        wednesday = week_overview(self.store, MONDAY)[2]
        self.assertEqual([s["name"] for s in wednesday["snacks"]], ["Berry Smoothie Bowl"])

    def test_pdf_export(self):
        pdf = generate_pdf_for_week(week_overview(self.store, MONDAY))
        self.assertTrue(pdf.startswith(b"%PDF"))
