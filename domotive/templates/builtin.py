"""Templates seeded on first run."""

# (title, description, category, difficulty, minutes, mood range, labels)
BUILT_IN_TEMPLATES = (
    # Low mood (1-3)
    ("Tidy Desk", "Organize and clean your workspace", "Cleaning", 1, 15, "1-4",
     "Low Energy, Home, Quick"),
    ("Listen to Music", "Play your favorite calming playlist", "Self Care", 1, 30, "1-5",
     "Low Energy, Anywhere, Self Care"),
    ("Water Plants", "Check and water your indoor plants", "Household", 1, 10, "1-6",
     "Low Energy, Home, Quick"),
    ("Make Tea", "Brew a warm, comforting cup of tea", "Self Care", 1, 10, "1-5",
     "Low Energy, Home, Quick"),
    ("Gentle Stretching", "Do light stretches or yoga", "Exercise", 2, 20, "1-6",
     "Low Energy, Home, Physical"),

    # Medium mood (4-6)
    ("Grocery Shopping", "Buy weekly groceries and essentials", "Household", 3, 60, "4-7",
     "Medium Energy, Outdoors, Administrative"),
    ("Respond to Emails", "Clear your email inbox", "Work", 3, 45, "4-8",
     "Medium Energy, Anywhere, Administrative"),
    ("Laundry", "Wash, dry, and fold clothes", "Household", 2, 90, "3-7",
     "Medium Energy, Home, Household"),
    ("Read a Book", "Read a chapter or two", "Learning", 2, 30, "3-8",
     "Medium Energy, Anywhere, Learning"),
    ("Meal Prep", "Prepare meals for tomorrow", "Household", 3, 45, "4-7",
     "Medium Energy, Home, Household"),

    # High mood (7-10)
    ("Deep Clean Room", "Thoroughly clean and organize bedroom", "Cleaning", 4, 120, "6-10",
     "High Energy, Home, Physical"),
    ("Go for a Run", "Take an energizing outdoor run", "Exercise", 4, 45, "7-10",
     "High Energy, Outdoors, Physical"),
    ("Creative Project", "Work on art, music, or writing", "Creative", 3, 90, "6-10",
     "High Energy, Anywhere, Creative"),
    ("Learn New Skill", "Practice a new language or skill", "Learning", 4, 60, "7-10",
     "High Energy, Anywhere, Learning"),
    ("Social Activity", "Call friends or plan social event", "Social", 3, 60, "7-10",
     "High Energy, Anywhere, Social"),

    # Any mood
    ("Meditation", "Practice mindfulness meditation", "Self Care", 2, 20, "1-10",
     "Any Energy, Anywhere, Self Care"),
    ("Journal Writing", "Write thoughts and reflections", "Self Care", 2, 25, "1-10",
     "Any Energy, Anywhere, Self Care"),
    ("Quick Walk", "Take a short walk around the block", "Exercise", 2, 20, "3-10",
     "Any Energy, Outdoors, Physical"),
    ("Organize Photos", "Sort and organize digital photos", "Administrative", 2, 45, "3-8",
     "Medium Energy, Anywhere, Administrative"),
    ("Plan Tomorrow", "Review and plan next day's schedule", "Administrative", 3, 30, "4-9",
     "Medium Energy, Anywhere, Administrative"),
)
