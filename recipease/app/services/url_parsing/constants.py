"""Fixed limits and vocabularies for recipe import."""

# Closed tag vocabulary; tags outside it are discarded during normalization.
TAG_VOCABULARY = (
    "breakfast",
    "lunch",
    "dinner",
    "dessert",
    "snack",
    "appetizer",
    "soup",
    "salad",
    "pasta",
    "baking",
    "drinks",
    "vegetarian",
    "vegan",
    "gluten-free",
    "healthy",
    "quick",
    "italian",
    "asian",
    "mexican",
    "indian",
    "mediterranean",
    "american",
    "french",
)
TAG_SET = frozenset(TAG_VOCABULARY)
MAX_TAGS = 10

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 500
MAX_INGREDIENTS = 50
MAX_STEPS = 30

# Input budget for the extraction prompt
CLEANED_TEXT_LIMIT = 6000
SPLIT_JSON_LD_LIMIT = 3000
SPLIT_TEXT_LIMIT = 3000

TARGET_LANGUAGE = "English"
