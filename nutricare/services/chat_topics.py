# Keyword routing for the chatbot: only pregnancy, lactation and nutrition
# questions are forwarded to the model.

PREGNANCY_KEYWORDS = (
    "pregnancy", "pregnant", "gestation", "trimester", "fetus", "baby",
    "delivery", "labor", "birth",
)

LACTATION_KEYWORDS = (
    "breastfeed", "lactation", "milk supply", "nursing", "breast milk", "pumping",
)

NUTRITION_KEYWORDS = (
    "nutrition", "food", "eat", "diet", "meal", "supplement", "vitamin", "mineral",
    "protein", "carbohydrate", "fat", "fiber", "calorie", "nutrient", "caffeine",
    "coffee", "tea", "alcohol", "fish", "meat", "vegetable", "fruit", "dairy", "milk",
    "water", "hydration", "iron", "calcium", "folic acid", "folate", "omega", "dha",
    "epa", "avoid", "safe", "unsafe", "healthy", "unhealthy", "organic", "processed",
    "raw", "cooked",
    # common food items
    "almond", "walnut", "cashew", "peanut", "rice", "bread", "pasta", "potato",
    "tomato", "carrot", "spinach", "broccoli", "apple", "banana", "orange", "grape",
    "chicken", "beef", "pork", "lamb", "egg", "cheese", "yogurt", "butter", "sugar",
    "salt", "oil", "honey", "chocolate", "cake", "cookie", "ice cream",
    # food-related terms
    "snack", "breakfast", "lunch", "dinner", "ingredient", "recipe", "cooking",
    "baking", "fresh", "frozen", "canned", "dried", "spice", "herb", "seasoning",
    "flavor",
    # health-related food terms
    "benefit", "good", "bad", "harmful", "nutritious", "wholesome", "natural",
    "artificial",
)

SUPPORTED_CATEGORIES = ("pregnancy", "nutrition", "lactation")

REFUSAL_MESSAGE = "I can only answer pregnancy, nutrition, and lactation-related questions."


def categorize_message(message: str) -> str:
    lower = message.lower()
    if any(k in lower for k in PREGNANCY_KEYWORDS):
        return "pregnancy"
    if any(k in lower for k in LACTATION_KEYWORDS):
        return "lactation"
    if any(k in lower for k in NUTRITION_KEYWORDS):
        return "nutrition"
    return "general"


def is_supported_topic(category: str) -> bool:
    return category in SUPPORTED_CATEGORIES
