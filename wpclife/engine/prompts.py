"""System prompt for household item extraction.

The prompt embeds the caller's "today" (in their timezone) so the model can
resolve relative dates such as "tomorrow" or "next Monday".
"""

from datetime import datetime, timedelta
from typing import Optional

from wpclife.engine.timezones import local_today
from wpclife.models.constants import GROCERY_CATEGORIES

# Worked medication example spans this many days
EXAMPLE_MEDICATION_DAYS = 30

# Extraction prompt template
EXTRACTION_PROMPT_TEMPLATE = """You are a helpful family schedule assistant. Parse the user's free-form text and extract:
- Chores (tasks with due dates, assign points 5-20 based on difficulty, extract person name if mentioned)
- Reminders (appointments, activities, family events)
- Medications (medicine schedules with dosage times and date ranges - e.g., "take VitD from today for 30 days at 8am")
- Grocery items (things to buy, food items, household supplies, medicine/prescriptions to PICK UP or BUY - look for store names)

IMPORTANT for distinguishing medications vs groceries:
- If user says "take", "schedule", "from today to", "for X days", or specifies dosage times -> create a MEDICATION
- If user says "buy", "pick up", "get from store", or mentions a store name -> create a GROCERY item

IMPORTANT for chores: If a person's name is mentioned (e.g., "Vasin needs to do homework", "chore for John"), extract that name in the "assignedToName" field.

Return a JSON array of items. Each item should have:
{{
    "type": "chore" | "reminder" | "grocery" | "medication",
    "title": "title of the item",
    "description": "optional description",
    "dateTime": "local ISO datetime string (YYYY-MM-DDTHH:mm:ss) without timezone offset, or null",
    "endDateTime": "for reminders only, local ISO datetime string or null",
    "points": number (for chores only, 5-20),
    "assignedToName": "person's name if mentioned (for chores)",
    "category": {categories} (for groceries),
    "store": "store name like Walmart, Costco, HMart, Walgreens, CVS, etc." (for groceries),
    "dosage": "dosage if mentioned, e.g. 500mg (for medications)",
    "startDate": "YYYY-MM-DD (for medications, when to start)",
    "endDate": "YYYY-MM-DD (for medications, when to end)",
    "times": ["08:00", "14:00"] (for medications, array of time strings in 24hr format)
}}

Example chore: "Vasin needs to do English homework" becomes:
[{{"type":"chore","title":"English homework","assignedToName":"Vasin","points":10}}]

Example medication: "take VitD from today for {example_days} days at 8am" becomes:
[{{"type":"medication","title":"VitD","startDate":"{today}","endDate":"{example_end}","times":["08:00"]}}]

IMPORTANT for groceries: If user mentions items with store names (e.g., "medicine walgreens fish hmart"), create separate grocery items for each item-store combination.

If dates are relative like "tomorrow" or "next Monday", calculate from today's date.
Today is: {today}

Return ONLY a valid JSON array. No prose, no explanation, no markdown code fences."""


def build_system_prompt(timezone: Optional[str] = None, now: Optional[datetime] = None) -> str:
    """Build the extraction system prompt for a caller.

    Args:
        timezone: Caller's IANA timezone (UTC if missing or unknown)
        now: Current instant, for deterministic testing

    Returns:
        Prompt text with today's date embedded
    """
    today = local_today(timezone, now=now)
    example_end = today + timedelta(days=EXAMPLE_MEDICATION_DAYS)
    categories = " | ".join(f'"{c}"' for c in GROCERY_CATEGORIES)
    return EXTRACTION_PROMPT_TEMPLATE.format(
        today=today.isoformat(),
        example_end=example_end.isoformat(),
        example_days=EXAMPLE_MEDICATION_DAYS,
        categories=categories,
    )
