"""Static meal templates per goal and meal type.

Each meal type carries seven variations; the plan generator picks one by
weekday index and scales it to the calories allocated to that slot.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict


class FoodTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: float
    unit: str
    calories: float
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class MealTemplate(BaseModel):
    """Reference meal; ``calories`` is the base the scale factor is computed from."""

    model_config = ConfigDict(frozen=True)

    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    foods: tuple[FoodTemplate, ...]


def _food(
    name: str,
    quantity: float,
    unit: str,
    calories: float,
    protein: float | None = None,
    carbs: float | None = None,
    fat: float | None = None,
) -> FoodTemplate:
    return FoodTemplate(
        name=name,
        quantity=quantity,
        unit=unit,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
    )


def _meal(name: str, calories: float, protein: float, carbs: float, fat: float, foods: tuple[FoodTemplate, ...]) -> MealTemplate:
    return MealTemplate(name=name, calories=calories, protein=protein, carbs=carbs, fat=fat, foods=foods)


def _menu(by_type: dict[str, tuple[MealTemplate, ...]]) -> Mapping[str, tuple[MealTemplate, ...]]:
    return MappingProxyType(by_type)


WEIGHT_LOSS_MEALS = _menu({
    "breakfast": (
        _meal("Protein-Rich Greek Yogurt Bowl", 300, 25, 25, 12, (
            _food("Greek Yogurt", 150, "g", 100, 15, 6, 0),
            _food("Berries", 100, "g", 50, 1, 12, 0),
            _food("Almonds", 15, "g", 90, 3, 3, 8),
            _food("Honey", 10, "g", 30, 0, 8, 0),
        )),
        _meal("Veggie Scrambled Eggs", 280, 22, 15, 18, (
            _food("Eggs", 2, "pieces", 140, 12, 1, 10),
            _food("Spinach", 50, "g", 10, 2, 2, 0),
            _food("Mushrooms", 50, "g", 10, 2, 2, 0),
            _food("Olive Oil", 5, "ml", 40, 0, 0, 5),
            _food("Whole Grain Toast", 1, "slice", 80, 4, 15, 1),
        )),
        _meal("Protein Smoothie Bowl", 320, 28, 30, 10, (
            _food("Protein Powder", 30, "g", 120),
            _food("Banana", 0.5, "piece", 50),
            _food("Spinach", 30, "g", 5),
            _food("Almond Milk", 200, "ml", 40),
            _food("Chia Seeds", 10, "g", 50),
        )),
        _meal("Cottage Cheese & Fruit", 290, 24, 28, 8, (
            _food("Cottage Cheese", 150, "g", 150),
            _food("Apple", 1, "piece", 80),
            _food("Walnuts", 10, "g", 65),
        )),
        _meal("Avocado Toast Light", 310, 12, 25, 20, (
            _food("Ezekiel Bread", 1, "slice", 80),
            _food("Avocado", 60, "g", 100),
            _food("Egg White", 2, "pieces", 35),
            _food("Tomato", 50, "g", 10),
            _food("Everything Seasoning", 2, "g", 5),
        )),
        _meal("Overnight Oats Protein", 295, 20, 35, 8, (
            _food("Rolled Oats", 40, "g", 150),
            _food("Protein Powder", 15, "g", 60),
            _food("Almond Milk", 150, "ml", 30),
            _food("Strawberries", 80, "g", 25),
            _food("Flax Seeds", 5, "g", 25),
        )),
        _meal("Green Smoothie Power", 285, 18, 32, 12, (
            _food("Spinach", 60, "g", 15),
            _food("Banana", 1, "piece", 100),
            _food("Greek Yogurt", 100, "g", 70),
            _food("Almond Butter", 15, "g", 90),
            _food("Coconut Water", 150, "ml", 10),
        )),
    ),
    "lunch": (
        _meal("Grilled Chicken Salad Bowl", 400, 30, 30, 18, (
            _food("Grilled Chicken", 120, "g", 200, 37, 0, 4),
            _food("Mixed Greens", 100, "g", 20, 2, 4, 0),
            _food("Cherry Tomatoes", 100, "g", 18, 1, 4, 0),
            _food("Avocado", 50, "g", 80, 1, 4, 7),
            _food("Olive Oil Dressing", 15, "ml", 120, 0, 0, 14),
        )),
        _meal("Turkey & Veggie Wrap", 380, 28, 35, 15, (
            _food("Whole Wheat Tortilla", 1, "piece", 120),
            _food("Sliced Turkey", 100, "g", 120),
            _food("Hummus", 30, "g", 80),
            _food("Cucumber", 50, "g", 8),
            _food("Bell Peppers", 50, "g", 15),
            _food("Lettuce", 30, "g", 5),
        )),
        _meal("Quinoa Buddha Bowl", 420, 18, 45, 16, (
            _food("Quinoa", 60, "g", 220),
            _food("Chickpeas", 80, "g", 130),
            _food("Roasted Vegetables", 150, "g", 60),
            _food("Tahini Dressing", 20, "g", 120),
        )),
        _meal("Tuna Salad Lettuce Wraps", 350, 32, 15, 20, (
            _food("Canned Tuna", 120, "g", 150),
            _food("Greek Yogurt", 50, "g", 35),
            _food("Celery", 50, "g", 8),
            _food("Butter Lettuce", 100, "g", 15),
            _food("Avocado", 40, "g", 65),
            _food("Lemon Juice", 10, "ml", 2),
        )),
        _meal("Veggie Soup & Protein", 390, 25, 40, 14, (
            _food("Vegetable Soup", 300, "ml", 120),
            _food("Grilled Tofu", 100, "g", 150),
            _food("Whole Grain Roll", 1, "piece", 100),
            _food("Side Salad", 80, "g", 20),
        )),
        _meal("Shrimp & Zucchini Noodles", 370, 35, 20, 18, (
            _food("Shrimp", 150, "g", 180),
            _food("Zucchini Noodles", 200, "g", 40),
            _food("Cherry Tomatoes", 100, "g", 18),
            _food("Olive Oil", 10, "ml", 90),
            _food("Garlic & Herbs", 5, "g", 5),
        )),
        _meal("Egg Salad Stuffed Avocado", 410, 20, 15, 32, (
            _food("Hard Boiled Eggs", 2, "pieces", 140),
            _food("Avocado", 1, "piece", 200),
            _food("Greek Yogurt", 30, "g", 20),
            _food("Mustard", 5, "g", 3),
            _food("Mixed Greens", 50, "g", 10),
        )),
    ),
    "dinner": (
        _meal("Baked Cod with Vegetables", 350, 35, 25, 15, (
            _food("Cod Fillet", 150, "g", 200),
            _food("Steamed Broccoli", 150, "g", 50),
            _food("Quinoa", 50, "g", 100),
        )),
        _meal("Turkey Meatballs & Zoodles", 340, 32, 18, 16, (
            _food("Turkey Meatballs", 120, "g", 180),
            _food("Zucchini Noodles", 200, "g", 40),
            _food("Marinara Sauce", 80, "g", 35),
            _food("Parmesan Cheese", 15, "g", 60),
        )),
        _meal("Grilled Chicken & Sweet Potato", 380, 38, 30, 12, (
            _food("Grilled Chicken", 140, "g", 230),
            _food("Roasted Sweet Potato", 150, "g", 130),
            _food("Green Beans", 100, "g", 35),
        )),
        _meal("Salmon & Cauliflower Rice", 360, 30, 15, 22, (
            _food("Baked Salmon", 120, "g", 250),
            _food("Cauliflower Rice", 150, "g", 40),
            _food("Asparagus", 100, "g", 25),
            _food("Lemon Butter", 10, "g", 75),
        )),
        _meal("Lean Beef Stir-Fry", 370, 28, 25, 18, (
            _food("Lean Beef", 100, "g", 180),
            _food("Mixed Vegetables", 200, "g", 60),
            _food("Brown Rice", 50, "g", 110),
            _food("Sesame Oil", 5, "ml", 45),
        )),
        _meal("Stuffed Bell Peppers", 355, 25, 30, 16, (
            _food("Ground Turkey", 100, "g", 150),
            _food("Bell Peppers", 2, "pieces", 60),
            _food("Quinoa", 40, "g", 150),
            _food("Cheese", 20, "g", 80),
        )),
        _meal("White Fish & Roasted Veggies", 345, 33, 20, 16, (
            _food("White Fish", 140, "g", 190),
            _food("Roasted Brussels Sprouts", 150, "g", 60),
            _food("Sweet Potato", 100, "g", 85),
            _food("Olive Oil", 5, "ml", 45),
        )),
    ),
    "snack": (
        _meal("Apple with Almond Butter", 150, 8, 15, 8, (
            _food("Apple", 1, "piece", 80),
            _food("Almond Butter", 12, "g", 70),
        )),
        _meal("Greek Yogurt & Berries", 140, 12, 18, 3, (
            _food("Greek Yogurt", 100, "g", 70),
            _food("Mixed Berries", 80, "g", 40),
            _food("Honey", 8, "g", 25),
        )),
        _meal("Veggie Sticks & Hummus", 130, 6, 15, 6, (
            _food("Carrot Sticks", 100, "g", 40),
            _food("Cucumber", 50, "g", 8),
            _food("Hummus", 30, "g", 80),
        )),
        _meal("Hard-Boiled Egg & Crackers", 160, 10, 12, 8, (
            _food("Hard-Boiled Egg", 1, "piece", 70),
            _food("Whole Grain Crackers", 5, "pieces", 60),
            _food("Cherry Tomatoes", 50, "g", 9),
        )),
        _meal("Protein Smoothie Mini", 145, 15, 12, 5, (
            _food("Protein Powder", 15, "g", 60),
            _food("Banana", 0.5, "piece", 50),
            _food("Almond Milk", 150, "ml", 30),
        )),
        _meal("Cottage Cheese Bowl", 155, 14, 10, 6, (
            _food("Cottage Cheese", 100, "g", 100),
            _food("Cucumber", 80, "g", 12),
            _food("Everything Seasoning", 2, "g", 5),
        )),
        _meal("Nuts & Seeds Mix", 165, 6, 8, 14, (
            _food("Almonds", 15, "g", 90),
            _food("Pumpkin Seeds", 10, "g", 55),
            _food("Dried Berries", 10, "g", 30),
        )),
    ),
})


MUSCLE_GAIN_MEALS = _menu({
    "breakfast": (
        _meal("Power Oatmeal Bowl", 500, 35, 50, 20, (
            _food("Oatmeal", 80, "g", 300, 10, 54, 6),
            _food("Banana", 1, "piece", 100, 1, 27, 0),
            _food("Protein Powder", 30, "g", 120, 24, 2, 1),
            _food("Milk", 200, "ml", 120, 8, 12, 3),
        )),
        _meal("Muscle Builder Scramble", 520, 38, 35, 25, (
            _food("Whole Eggs", 3, "pieces", 210),
            _food("Whole Grain Toast", 2, "slices", 160),
            _food("Avocado", 60, "g", 100),
            _food("Cheese", 30, "g", 120),
        )),
        _meal("Protein Pancakes Stack", 480, 32, 45, 18, (
            _food("Protein Pancake Mix", 60, "g", 240),
            _food("Banana", 1, "piece", 100),
            _food("Greek Yogurt", 100, "g", 70),
            _food("Maple Syrup", 20, "ml", 50),
            _food("Nuts", 15, "g", 90),
        )),
        _meal("Breakfast Burrito Power", 510, 30, 40, 24, (
            _food("Whole Wheat Tortilla", 1, "large", 150),
            _food("Scrambled Eggs", 2, "pieces", 140),
            _food("Black Beans", 60, "g", 80),
            _food("Cheese", 40, "g", 160),
            _food("Salsa", 30, "g", 10),
        )),
        _meal("Muscle Smoothie Bowl", 495, 35, 48, 16, (
            _food("Protein Powder", 40, "g", 160),
            _food("Frozen Berries", 150, "g", 80),
            _food("Banana", 1, "piece", 100),
            _food("Granola", 40, "g", 160),
            _food("Almond Milk", 250, "ml", 50),
        )),
        _meal("Steak & Eggs Breakfast", 530, 42, 25, 30, (
            _food("Lean Steak", 100, "g", 200),
            _food("Eggs", 2, "pieces", 140),
            _food("Hash Browns", 100, "g", 150),
            _food("Spinach", 50, "g", 10),
        )),
        _meal("Quinoa Breakfast Bowl", 485, 28, 55, 18, (
            _food("Quinoa", 80, "g", 300),
            _food("Greek Yogurt", 150, "g", 100),
            _food("Mixed Nuts", 20, "g", 120),
            _food("Dried Fruit", 25, "g", 75),
        )),
    ),
    "lunch": (
        _meal("Muscle Building Beef Bowl", 600, 45, 60, 20, (
            _food("Lean Beef", 150, "g", 300),
            _food("Brown Rice", 100, "g", 350),
            _food("Mixed Vegetables", 150, "g", 60),
        )),
        _meal("Chicken & Sweet Potato Power", 580, 42, 55, 18, (
            _food("Grilled Chicken", 150, "g", 250),
            _food("Roasted Sweet Potato", 200, "g", 180),
            _food("Quinoa", 60, "g", 220),
            _food("Broccoli", 100, "g", 35),
        )),
        _meal("Tuna & Pasta Power Bowl", 620, 38, 65, 22, (
            _food("Whole Wheat Pasta", 100, "g", 350),
            _food("Tuna", 120, "g", 150),
            _food("Olive Oil", 15, "ml", 135),
            _food("Vegetables", 100, "g", 40),
        )),
        _meal("Turkey & Rice Power Plate", 590, 40, 58, 16, (
            _food("Ground Turkey", 130, "g", 200),
            _food("Jasmine Rice", 100, "g", 350),
            _food("Black Beans", 80, "g", 110),
            _food("Peppers & Onions", 100, "g", 30),
        )),
        _meal("Salmon & Quinoa Bowl", 610, 35, 50, 28, (
            _food("Baked Salmon", 130, "g", 270),
            _food("Quinoa", 80, "g", 300),
            _food("Avocado", 60, "g", 100),
            _food("Roasted Vegetables", 120, "g", 50),
        )),
        _meal("Chicken Burrito Bowl", 595, 43, 52, 20, (
            _food("Grilled Chicken", 140, "g", 230),
            _food("Brown Rice", 80, "g", 280),
            _food("Black Beans", 60, "g", 80),
            _food("Cheese", 25, "g", 100),
            _food("Guacamole", 30, "g", 50),
        )),
        _meal("Protein Pasta Primavera", 575, 36, 62, 18, (
            _food("Whole Grain Pasta", 90, "g", 320),
            _food("Chicken Breast", 100, "g", 165),
            _food("Mixed Vegetables", 150, "g", 60),
            _food("Parmesan", 20, "g", 80),
        )),
    ),
    "dinner": (
        _meal("Steak & Potato Power Dinner", 550, 40, 45, 25, (
            _food("Lean Steak", 130, "g", 260),
            _food("Baked Potato", 200, "g", 160),
            _food("Asparagus", 150, "g", 30),
            _food("Butter", 10, "g", 75),
        )),
        _meal("Salmon Recovery Dinner", 570, 38, 42, 28, (
            _food("Grilled Salmon", 140, "g", 290),
            _food("Sweet Potato", 180, "g", 160),
            _food("Green Beans", 120, "g", 40),
            _food("Olive Oil", 8, "ml", 72),
        )),
        _meal("Chicken & Rice Power Bowl", 560, 42, 48, 20, (
            _food("Grilled Chicken Thigh", 150, "g", 280),
            _food("Basmati Rice", 80, "g", 280),
            _food("Steamed Broccoli", 150, "g", 50),
        )),
        _meal("Turkey Meatball Pasta", 545, 35, 50, 22, (
            _food("Turkey Meatballs", 140, "g", 210),
            _food("Whole Wheat Pasta", 80, "g", 280),
            _food("Marinara Sauce", 100, "g", 45),
            _food("Mozzarella", 30, "g", 85),
        )),
        _meal("Pork Tenderloin & Quinoa", 535, 40, 40, 22, (
            _food("Pork Tenderloin", 130, "g", 240),
            _food("Quinoa", 70, "g", 260),
            _food("Roasted Vegetables", 150, "g", 60),
        )),
        _meal("Fish & Chips Healthy", 555, 36, 48, 24, (
            _food("Baked Cod", 150, "g", 200),
            _food("Sweet Potato Fries", 150, "g", 200),
            _food("Coleslaw", 100, "g", 80),
            _food("Tartar Sauce", 20, "g", 60),
        )),
        _meal("Beef Stir-Fry Power", 540, 38, 45, 22, (
            _food("Lean Beef Strips", 120, "g", 220),
            _food("Jasmine Rice", 80, "g", 280),
            _food("Stir-Fry Vegetables", 200, "g", 80),
            _food("Sesame Oil", 8, "ml", 70),
        )),
    ),
    "snack": (
        _meal("Protein Power Shake", 250, 20, 20, 10, (
            _food("Protein Powder", 25, "g", 100),
            _food("Banana", 1, "piece", 100),
            _food("Peanut Butter", 15, "g", 90),
            _food("Milk", 150, "ml", 90),
        )),
        _meal("Trail Mix Power", 240, 8, 18, 16, (
            _food("Mixed Nuts", 25, "g", 150),
            _food("Dried Fruit", 20, "g", 60),
            _food("Dark Chocolate", 10, "g", 50),
        )),
        _meal("Greek Yogurt Parfait", 230, 18, 25, 8, (
            _food("Greek Yogurt", 150, "g", 100),
            _food("Granola", 30, "g", 120),
            _food("Berries", 80, "g", 40),
        )),
        _meal("Muscle Building Smoothie", 260, 22, 28, 8, (
            _food("Protein Powder", 25, "g", 100),
            _food("Oats", 30, "g", 110),
            _food("Berries", 100, "g", 50),
            _food("Almond Milk", 200, "ml", 40),
        )),
        _meal("Tuna & Crackers", 220, 20, 15, 10, (
            _food("Tuna Can", 80, "g", 100),
            _food("Whole Grain Crackers", 8, "pieces", 96),
            _food("Avocado", 30, "g", 50),
        )),
        _meal("Cottage Cheese Power Bowl", 245, 20, 15, 12, (
            _food("Cottage Cheese", 150, "g", 150),
            _food("Pineapple", 100, "g", 50),
            _food("Almonds", 15, "g", 90),
        )),
        _meal("Energy Balls", 235, 10, 22, 14, (
            _food("Oat Energy Balls", 3, "pieces", 180),
            _food("Protein Powder", 10, "g", 40),
            _food("Coconut Flakes", 5, "g", 15),
        )),
    ),
})


MAINTENANCE_MEALS = _menu({
    "breakfast": (
        _meal("Balanced Morning Bowl", 400, 20, 45, 18, (
            _food("Whole Grain Toast", 2, "slices", 160, 8, 30, 2),
            _food("Eggs", 2, "pieces", 140, 12, 1, 10),
            _food("Avocado", 50, "g", 80, 1, 4, 7),
            _food("Orange Juice", 150, "ml", 60, 1, 14, 0),
        )),
        _meal("Oatmeal & Fruit Delight", 380, 15, 55, 12, (
            _food("Rolled Oats", 60, "g", 220),
            _food("Mixed Berries", 100, "g", 50),
            _food("Almonds", 15, "g", 90),
            _food("Honey", 15, "g", 45),
        )),
        _meal("Smoothie Bowl Balance", 420, 22, 48, 16, (
            _food("Greek Yogurt", 150, "g", 100),
            _food("Banana", 1, "piece", 100),
            _food("Granola", 40, "g", 160),
            _food("Chia Seeds", 10, "g", 50),
        )),
        _meal("Whole Grain Pancakes", 390, 18, 52, 14, (
            _food("Whole Grain Pancakes", 2, "pieces", 240),
            _food("Greek Yogurt", 80, "g", 55),
            _food("Maple Syrup", 15, "ml", 40),
            _food("Strawberries", 100, "g", 32),
        )),
        _meal("Breakfast Wrap", 410, 24, 38, 20, (
            _food("Whole Wheat Tortilla", 1, "piece", 120),
            _food("Scrambled Eggs", 2, "pieces", 140),
            _food("Cheese", 25, "g", 100),
            _food("Spinach", 30, "g", 7),
            _food("Salsa", 30, "g", 10),
        )),
        _meal("Muesli & Yogurt", 385, 19, 50, 13, (
            _food("Muesli", 60, "g", 220),
            _food("Greek Yogurt", 120, "g", 80),
            _food("Apple", 1, "piece", 80),
            _food("Walnuts", 10, "g", 65),
        )),
        _meal("French Toast Light", 395, 16, 48, 16, (
            _food("Whole Grain Bread", 2, "slices", 160),
            _food("Egg", 1, "piece", 70),
            _food("Milk", 100, "ml", 60),
            _food("Butter", 8, "g", 60),
            _food("Berries", 80, "g", 40),
        )),
    ),
    "lunch": (
        _meal("Mediterranean Bowl", 450, 25, 50, 18, (
            _food("Grilled Chicken", 100, "g", 165),
            _food("Quinoa Salad", 150, "g", 200),
            _food("Mixed Vegetables", 100, "g", 40),
            _food("Dressing", 15, "ml", 45),
        )),
        _meal("Turkey & Veggie Sandwich", 430, 28, 45, 16, (
            _food("Whole Grain Bread", 2, "slices", 160),
            _food("Sliced Turkey", 100, "g", 120),
            _food("Cheese", 20, "g", 80),
            _food("Vegetables", 80, "g", 20),
            _food("Mustard", 10, "g", 5),
        )),
        _meal("Pasta Primavera", 470, 20, 65, 15, (
            _food("Whole Wheat Pasta", 80, "g", 280),
            _food("Grilled Vegetables", 150, "g", 60),
            _food("Parmesan", 25, "g", 100),
            _food("Olive Oil", 8, "ml", 72),
        )),
        _meal("Asian Chicken Salad", 440, 30, 35, 20, (
            _food("Grilled Chicken", 110, "g", 180),
            _food("Mixed Asian Greens", 120, "g", 25),
            _food("Edamame", 60, "g", 80),
            _food("Sesame Dressing", 20, "ml", 100),
            _food("Sesame Seeds", 5, "g", 30),
        )),
        _meal("Fish Tacos", 460, 26, 48, 18, (
            _food("Corn Tortillas", 2, "pieces", 120),
            _food("Grilled Fish", 100, "g", 130),
            _food("Cabbage Slaw", 80, "g", 20),
            _food("Avocado", 50, "g", 80),
            _food("Lime Crema", 30, "g", 60),
        )),
        _meal("Veggie Burger Bowl", 435, 22, 52, 16, (
            _food("Veggie Burger Patty", 1, "piece", 150),
            _food("Quinoa", 80, "g", 300),
            _food("Roasted Vegetables", 120, "g", 50),
            _food("Tahini Sauce", 15, "g", 90),
        )),
        _meal("Chicken Caesar Wrap", 455, 32, 40, 20, (
            _food("Large Tortilla", 1, "piece", 150),
            _food("Grilled Chicken", 100, "g", 165),
            _food("Romaine Lettuce", 80, "g", 15),
            _food("Caesar Dressing", 25, "ml", 125),
            _food("Parmesan", 15, "g", 60),
        )),
    ),
    "dinner": (
        _meal("Balanced Fish Dinner", 400, 30, 35, 20, (
            _food("Fish Fillet", 120, "g", 180),
            _food("Rice", 80, "g", 130),
            _food("Steamed Vegetables", 150, "g", 50),
            _food("Olive Oil", 5, "ml", 40),
        )),
        _meal("Chicken & Sweet Potato", 420, 32, 40, 16, (
            _food("Baked Chicken", 120, "g", 200),
            _food("Roasted Sweet Potato", 150, "g", 130),
            _food("Green Beans", 120, "g", 40),
            _food("Herb Butter", 8, "g", 60),
        )),
        _meal("Pork Tenderloin Dinner", 410, 28, 38, 18, (
            _food("Pork Tenderloin", 100, "g", 185),
            _food("Mashed Potatoes", 120, "g", 110),
            _food("Roasted Carrots", 100, "g", 40),
            _food("Gravy", 30, "ml", 45),
        )),
        _meal("Vegetarian Pasta", 430, 18, 58, 16, (
            _food("Whole Wheat Pasta", 85, "g", 300),
            _food("Marinara Sauce", 100, "g", 45),
            _food("Mozzarella", 30, "g", 85),
            _food("Basil & Vegetables", 80, "g", 25),
        )),
        _meal("Beef Stir-Fry", 415, 26, 42, 18, (
            _food("Lean Beef", 90, "g", 165),
            _food("Jasmine Rice", 70, "g", 245),
            _food("Stir-Fry Vegetables", 150, "g", 45),
            _food("Teriyaki Sauce", 20, "ml", 30),
        )),
        _meal("Turkey Meatloaf", 395, 30, 32, 16, (
            _food("Turkey Meatloaf", 120, "g", 180),
            _food("Baked Potato", 150, "g", 120),
            _food("Steamed Broccoli", 120, "g", 40),
            _food("Sour Cream", 20, "g", 40),
        )),
        _meal("Shrimp Scampi", 425, 28, 45, 16, (
            _food("Shrimp", 130, "g", 155),
            _food("Angel Hair Pasta", 75, "g", 265),
            _food("Garlic Butter Sauce", 15, "ml", 90),
            _food("Parsley & Lemon", 10, "g", 3),
        )),
    ),
    "snack": (
        _meal("Mixed Nuts & Fruit", 200, 10, 25, 8, (
            _food("Mixed Nuts", 20, "g", 120),
            _food("Apple", 1, "piece", 80),
        )),
        _meal("Yogurt Parfait", 180, 12, 22, 6, (
            _food("Greek Yogurt", 120, "g", 80),
            _food("Granola", 25, "g", 100),
        )),
        _meal("Cheese & Crackers", 190, 8, 18, 10, (
            _food("Whole Grain Crackers", 6, "pieces", 72),
            _food("Cheese", 30, "g", 120),
        )),
        _meal("Smoothie Light", 175, 8, 28, 4, (
            _food("Banana", 1, "piece", 100),
            _food("Greek Yogurt", 80, "g", 55),
            _food("Honey", 10, "g", 30),
        )),
        _meal("Hummus & Veggies", 165, 7, 20, 7, (
            _food("Hummus", 40, "g", 105),
            _food("Carrot Sticks", 100, "g", 40),
            _food("Bell Pepper", 50, "g", 15),
        )),
        _meal("Popcorn & Fruit", 185, 5, 32, 5, (
            _food("Air-Popped Popcorn", 30, "g", 110),
            _food("Grapes", 100, "g", 60),
        )),
        _meal("Protein Bar Mini", 195, 12, 20, 8, (
            _food("Protein Bar", 0.5, "piece", 120),
            _food("Orange", 1, "piece", 60),
        )),
    ),
})


MEAL_LIBRARY: Mapping[str, Mapping[str, tuple[MealTemplate, ...]]] = MappingProxyType({
    "weight_loss": WEIGHT_LOSS_MEALS,
    "muscle_gain": MUSCLE_GAIN_MEALS,
    "maintenance": MAINTENANCE_MEALS,
})
