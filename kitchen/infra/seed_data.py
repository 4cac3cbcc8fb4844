"""Built-in sample records used when a collection has never been saved."""
from datetime import date, timedelta
from typing import List

from kitchen.domain.InventoryItem import InventoryItem
from kitchen.domain.MealPlan import MealPlan
from kitchen.domain.Recipe import Recipe
from kitchen.domain.ShoppingItem import ShoppingItem


def sample_recipes() -> List[Recipe]:
    return [
        Recipe(
            id="1",
            name="Avocado Toast",
            description="A simple, nutritious breakfast that's quick to make and full of healthy fats.",
            ingredients=[
                "2 slices whole grain bread",
                "1 ripe avocado",
                "2 eggs",
                "Salt and pepper to taste",
                "Red pepper flakes (optional)",
                "1 tbsp olive oil",
            ],
            instructions=[
                "Toast the bread slices until golden brown.",
                "Cut the avocado in half, remove the pit, and scoop out the flesh into a bowl.",
                "Mash the avocado with a fork, adding salt and pepper to taste.",
                "Spread the mashed avocado on the toast.",
                "Heat olive oil in a pan and fry the eggs to your liking.",
                "Place the fried eggs on top of the avocado toast.",
                "Sprinkle with red pepper flakes if desired.",
            ],
            prep_time=5,
            cook_time=5,
            servings=1,
            tags=["breakfast", "healthy", "quick", "vegetarian"],
            image="https://images.unsplash.com/photo-1525351484163-7529414344d8?q=80&w=2080&auto=format&fit=crop",
        ),
        Recipe(
            id="2",
            name="Classic Pasta Carbonara",
            description="A traditional Italian pasta dish with eggs, cheese, pancetta and black pepper.",
            ingredients=[
                "350g spaghetti",
                "150g pancetta or guanciale, diced",
                "3 large eggs",
                "75g Pecorino Romano cheese, grated",
                "50g Parmesan cheese, grated",
                "Freshly ground black pepper",
                "1 clove garlic, minced (optional)",
            ],
            instructions=[
                "Bring a large pot of salted water to a boil and cook the spaghetti according to package instructions until al dente.",
                "While the pasta is cooking, heat a large skillet over medium heat. Add the pancetta and cook until crispy, about 8-10 minutes.",
                "In a bowl, whisk together the eggs, grated cheeses, and a generous amount of black pepper.",
                "When the pasta is done, reserve 1 cup of the pasta water, then drain the pasta.",
                "Working quickly, add the hot pasta to the skillet with the pancetta. Toss to combine.",
                "Remove the skillet from the heat and pour in the egg and cheese mixture, stirring rapidly to create a creamy sauce.",
                "Add a splash of the reserved pasta water if needed to loosen the sauce.",
                "Serve immediately with extra grated cheese and black pepper.",
            ],
            prep_time=10,
            cook_time=15,
            servings=4,
            tags=["dinner", "Italian", "pasta"],
            image="https://images.unsplash.com/photo-1612874742237-6526221588e3?q=80&w=2071&auto=format&fit=crop",
        ),
        Recipe(
            id="3",
            name="Berry Smoothie Bowl",
            description="A refreshing and nutritious smoothie bowl topped with fresh fruits and granola.",
            ingredients=[
                "1 cup mixed berries (strawberries, blueberries, raspberries)",
                "1 frozen banana",
                "1/2 cup Greek yogurt",
                "1/4 cup almond milk",
                "1 tbsp honey or maple syrup",
                "Toppings: sliced fruits, granola, chia seeds, coconut flakes",
            ],
            instructions=[
                "Add the berries, frozen banana, Greek yogurt, almond milk, and honey to a blender.",
                "Blend until smooth and creamy. The consistency should be thicker than a regular smoothie.",
                "Pour into a bowl.",
                "Arrange your toppings artfully on top of the smoothie base.",
                "Serve immediately and enjoy with a spoon.",
            ],
            prep_time=5,
            cook_time=0,
            servings=1,
            tags=["breakfast", "healthy", "quick", "vegetarian"],
            image="https://images.unsplash.com/photo-1577805947697-89e18249d767?q=80&w=2098&auto=format&fit=crop",
        ),
    ]


def sample_meal_plans(today: date) -> List[MealPlan]:
    # Avocado Toast, Berry Smoothie Bowl, Pasta Carbonara
    return [MealPlan(id="1", date=today, meals={"breakfast": "1", "lunch": "3", "dinner": "2"})]


def sample_inventory_items(today: date) -> List[InventoryItem]:
    return [
        InventoryItem(id="1", name="Eggs", category="Dairy & Eggs", quantity=6, unit="pcs"),
        InventoryItem(id="2", name="Milk", category="Dairy & Eggs", quantity=1, unit="liter",
                      expiry_date=today + timedelta(days=5)),
        InventoryItem(id="3", name="Bread", category="Bakery", quantity=1, unit="loaf",
                      expiry_date=today + timedelta(days=3)),
    ]


def sample_shopping_items() -> List[ShoppingItem]:
    return [
        ShoppingItem(id="1", name="Avocados", category="Produce", quantity=3, unit="pcs"),
        ShoppingItem(id="2", name="Pasta", category="Dry Goods", quantity=1, unit="pkg"),
    ]


__all__ = ["sample_recipes", "sample_meal_plans", "sample_inventory_items", "sample_shopping_items"]
