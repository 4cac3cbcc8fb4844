from typing import Final

DATE_FORMAT: Final[str] = "%Y-%m-%d"
UNCATEGORIZED: Final[str] = "Uncategorized"

# Storage keys, one snapshot per collection
RECIPES_KEY: Final[str] = "recipes"
MEAL_PLANS_KEY: Final[str] = "mealPlans"
INVENTORY_ITEMS_KEY: Final[str] = "inventoryItems"
SHOPPING_ITEMS_KEY: Final[str] = "shoppingItems"
STORAGE_KEYS: Final[tuple[str, ...]] = (
    RECIPES_KEY, MEAL_PLANS_KEY, INVENTORY_ITEMS_KEY, SHOPPING_ITEMS_KEY
)

MEAL_SLOTS: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")
SNACKS_SLOT: Final[str] = "snacks"
