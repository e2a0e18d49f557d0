"""Category and difficulty catalog used when picking a question set."""

CATEGORY_IDS: dict[str, int] = {
    "general": 9,
    "science": 17,
    "sports": 21,
    "history": 23,
}

# Display labels keyed by catalog id.
CATEGORY_LABELS: dict[int, str] = {
    9: "General",
    17: "Science",
    21: "Sports",
    23: "History",
}

# Names the trivia service uses in its result payloads.
SERVICE_CATEGORY_NAMES: dict[str, int] = {
    "general knowledge": 9,
    "science & nature": 17,
    "sports": 21,
    "history": 23,
}

CATEGORY_OPTIONS: tuple[str, ...] = ("General", "History", "Science", "Sports")
DIFFICULTY_OPTIONS: tuple[str, ...] = ("Beginner", "Intermediate", "Expert")
