# Returned whenever the model's reply cannot be parsed into a plan.


def _meal(name, calories, nutrients, ingredients, instructions):
    return {
        "name": name,
        "calories": calories,
        "nutrients": nutrients,
        "ingredients": ingredients,
        "instructions": instructions,
    }


def _snack(name, nutrients):
    return {"name": name, "calories": 180, "nutrients": nutrients, "time": "10:00 AM"}


def _day(breakfast, lunch, dinner, snack):
    return {"breakfast": breakfast, "lunch": lunch, "dinner": dinner, "snacks": [snack]}


FALLBACK_DIET_PLAN = {
    "overallScore": 75,
    "recommendations": [
        "Increase iron-rich Gujarati foods like bajra roti and green leafy vegetables",
        "Include calcium-rich foods like curd, paneer, and sesame seeds",
        "Maintain adequate protein intake through dal and legumes",
    ],
    "nutritionalInsights": {
        "strengths": ["Good overall health", "Adequate water intake"],
        "concerns": ["May need iron supplementation", "Monitor calcium intake"],
        "priorities": ["Iron-rich Gujarati diet", "Calcium supplementation"],
    },
    "weeklyMealPlan": {
        "monday": _day(
            _meal("Bajra roti with methi thepla and curd", 320, ["Iron", "Folate", "Calcium"],
                  ["Bajra flour", "Methi leaves", "Curd", "Ghee", "Spices"],
                  "Mix bajra flour with methi, make rotis, serve with curd"),
            _meal("Toor dal with brown rice and bhindi sabzi", 480, ["Iron", "Protein", "Folate"],
                  ["Toor dal", "Brown rice", "Bhindi", "Onions", "Tomatoes", "Spices"],
                  "Cook dal with rice, prepare bhindi sabzi with spices"),
            _meal("Jowar roti with palak paneer", 520, ["Protein", "Iron", "Calcium"],
                  ["Jowar flour", "Palak", "Paneer", "Onions", "Spices"],
                  "Make jowar rotis, prepare palak paneer curry"),
            _snack("Dhokla with green chutney", ["Protein", "B-vitamins"]),
        ),
        "tuesday": _day(
            _meal("Ragi dosa with coconut chutney", 320, ["Iron", "Calcium", "Protein"],
                  ["Ragi flour", "Rice flour", "Coconut", "Spices"],
                  "Make ragi dosa batter, prepare coconut chutney"),
            _meal("Moong dal khichdi with kadhi", 480, ["Protein", "Iron", "Probiotics"],
                  ["Moong dal", "Rice", "Curd", "Besan", "Spices"],
                  "Cook khichdi, prepare kadhi with curd and besan"),
            _meal("Bajra roti with dal fry and salad", 520, ["Iron", "Protein", "Fiber"],
                  ["Bajra flour", "Mixed dal", "Vegetables", "Spices"],
                  "Make bajra rotis, prepare dal fry, serve with salad"),
            _snack("Roasted chana with jaggery", ["Protein", "Iron"]),
        ),
        "wednesday": _day(
            _meal("Thepla with curd and pickle", 320, ["Iron", "Protein", "Probiotics"],
                  ["Wheat flour", "Methi", "Curd", "Pickle", "Spices"],
                  "Make thepla with methi, serve with curd and pickle"),
            _meal("Rajma dal with jeera rice", 480, ["Protein", "Iron", "Fiber"],
                  ["Rajma", "Rice", "Cumin", "Spices"],
                  "Cook rajma dal, prepare jeera rice"),
            _meal("Bajra roti with aloo sabzi", 520, ["Iron", "Carbohydrates", "Vitamins"],
                  ["Bajra flour", "Potatoes", "Onions", "Spices"],
                  "Make bajra rotis, prepare aloo sabzi"),
            _snack("Fruit chaat with chaat masala", ["Vitamins", "Fiber"]),
        ),
        "thursday": _day(
            _meal("Poha with peanuts and vegetables", 320, ["Iron", "Protein", "Vitamins"],
                  ["Poha", "Peanuts", "Vegetables", "Spices"],
                  "Prepare poha with peanuts and vegetables"),
            _meal("Chana dal with roti and sabzi", 480, ["Protein", "Iron", "Fiber"],
                  ["Chana dal", "Wheat roti", "Mixed vegetables", "Spices"],
                  "Cook chana dal, make rotis, prepare sabzi"),
            _meal("Jowar roti with dal and salad", 520, ["Iron", "Protein", "Vitamins"],
                  ["Jowar flour", "Mixed dal", "Salad vegetables"],
                  "Make jowar rotis, prepare dal, serve with salad"),
            _snack("Roasted makhana with spices", ["Protein", "Iron"]),
        ),
        "friday": _day(
            _meal("Upma with vegetables and coconut", 320, ["Iron", "Protein", "Fiber"],
                  ["Semolina", "Vegetables", "Coconut", "Spices"],
                  "Prepare upma with vegetables and coconut"),
            _meal("Masoor dal with brown rice", 480, ["Protein", "Iron", "Fiber"],
                  ["Masoor dal", "Brown rice", "Spices"],
                  "Cook masoor dal with brown rice"),
            _meal("Bajra roti with paneer sabzi", 520, ["Iron", "Protein", "Calcium"],
                  ["Bajra flour", "Paneer", "Vegetables", "Spices"],
                  "Make bajra rotis, prepare paneer sabzi"),
            _snack("Mixed nuts and dry fruits", ["Protein", "Iron", "Vitamins"]),
        ),
        "saturday": _day(
            _meal("Idli with sambar and chutney", 320, ["Protein", "Iron", "Probiotics"],
                  ["Rice", "Urad dal", "Sambar", "Coconut chutney"],
                  "Make idli batter, prepare sambar and chutney"),
            _meal("Moong dal with roti and sabzi", 480, ["Protein", "Iron", "Vitamins"],
                  ["Moong dal", "Wheat roti", "Mixed vegetables", "Spices"],
                  "Cook moong dal, make rotis, prepare sabzi"),
            _meal("Jowar roti with dal and salad", 520, ["Iron", "Protein", "Fiber"],
                  ["Jowar flour", "Mixed dal", "Salad vegetables"],
                  "Make jowar rotis, prepare dal, serve with salad"),
            _snack("Roasted chana with jaggery", ["Protein", "Iron"]),
        ),
        "sunday": _day(
            _meal("Dosa with potato filling and chutney", 320, ["Iron", "Protein", "Carbohydrates"],
                  ["Rice", "Urad dal", "Potatoes", "Coconut chutney"],
                  "Make dosa batter, prepare potato filling and chutney"),
            _meal("Toor dal with jeera rice and sabzi", 480, ["Protein", "Iron", "Fiber"],
                  ["Toor dal", "Rice", "Cumin", "Mixed vegetables", "Spices"],
                  "Cook toor dal, prepare jeera rice and sabzi"),
            _meal("Bajra roti with dal and salad", 520, ["Iron", "Protein", "Vitamins"],
                  ["Bajra flour", "Mixed dal", "Salad vegetables"],
                  "Make bajra rotis, prepare dal, serve with salad"),
            _snack("Fruit chaat with chaat masala", ["Vitamins", "Fiber"]),
        ),
    },
    "supplements": ["Iron (18mg daily)", "Folic acid (400mcg)", "Vitamin D (1000 IU)"],
    "restrictions": ["Limit caffeine", "Avoid raw fish", "Moderate sodium intake"],
    "dailyTargets": {
        "calories": 2200,
        "protein": 75,
        "iron": 27,
        "calcium": 1000,
        "folate": 600,
        "vitaminD": 600,
    },
}
