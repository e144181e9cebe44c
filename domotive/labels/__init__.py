"""Labels - free-text tags for tasks and templates

Labels are stored with display metadata (colour, emoji) and usage counts so
pickers can show the most-used ones first. Tasks and templates carry labels
as a comma-separated string of names.
"""

# (name, category, colour, emoji)
BUILT_IN_LABELS = (
    # Energy
    ("High Energy", "Energy", "#FF6B6B", "⚡️"),
    ("Medium Energy", "Energy", "#4ECDC4", "🔋"),
    ("Low Energy", "Energy", "#95A5A6", "😴"),
    # Location
    ("Home", "Location", "#3498DB", "🏠"),
    ("Office", "Location", "#9B59B6", "🏢"),
    ("Outdoors", "Location", "#27AE60", "🌳"),
    ("Anywhere", "Location", "#F39C12", "📍"),
    # Type
    ("Creative", "Type", "#E74C3C", "🎨"),
    ("Physical", "Type", "#E67E22", "💪"),
    ("Mental", "Type", "#8E44AD", "🧠"),
    ("Social", "Type", "#1ABC9C", "👥"),
    ("Administrative", "Type", "#34495E", "📋"),
    # Duration
    ("Quick", "Duration", "#2ECC71", "⚡️"),
    ("Medium", "Duration", "#F1C40F", "⏰"),
    ("Long", "Duration", "#E74C3C", "⏳"),
    # Category
    ("Cleaning", "Category", "#3498DB", "🧹"),
    ("Exercise", "Category", "#E74C3C", "🏃‍♂️"),
    ("Self Care", "Category", "#9B59B6", "🧘‍♀️"),
    ("Learning", "Category", "#27AE60", "📚"),
    ("Work", "Category", "#34495E", "💼"),
)

# Palette for labels created without an explicit colour
LABEL_COLORS = (
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4",
    "#FFEAA7", "#DDA0DD", "#98D8C8", "#F7DC6F",
)

__all__ = ["BUILT_IN_LABELS", "LABEL_COLORS"]
