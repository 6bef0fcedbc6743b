"""Constants for wpclife.

This module centralizes all magic numbers and default values used when
turning extracted text into household records.
"""


# Chore defaults
DEFAULT_CHORE_POINTS = 5
MIN_CHORE_POINTS = 5
MAX_CHORE_POINTS = 20

# Reminder defaults
DEFAULT_REMINDER_TYPE = "Custom"
REMINDER_SCHEDULE_ONCE = "ONCE"

# Grocery defaults
DEFAULT_GROCERY_CATEGORY = "Other"
DEFAULT_GROCERY_STORE = None
QUICK_ADD_DEFAULT_STORE = "Other"

# Medication defaults
MEDICATION_SCHEDULE_DAILY = "DAILY"
DEFAULT_MEDICATION_TIMES = ("08:00",)
DEFAULT_MEDICATION_INVENTORY = 30

# Timezone used when the caller's timezone is missing or unknown
DEFAULT_TIMEZONE = "UTC"

# Completion provider
OPENAI_MODEL = "gpt-4o-mini"
EXTRACTION_TEMPERATURE = 0.3
EXTRACTION_MAX_TOKENS = 2000
DEFAULT_OPENAI_TIMEOUT_SEC = 15.0

# Grocery categories (display order)
GROCERY_CATEGORIES = (
    "Vegetables",
    "Fruits",
    "Dairy",
    "Snacks",
    "Medicine",
    "Beverages",
    "Meat",
    "Pantry",
    "Frozen",
    "Other",
)
