# edugames/topics.py
import random
from typing import Dict, Optional, Tuple

# Subject -> subtopics. Read-only after import.
TOPIC_CATALOG: Dict[str, Tuple[str, ...]] = {
    "Mathematics": (
        "Algebra", "Geometry", "Fractions", "Percentages",
        "Calculus", "Probability", "Number Patterns", "Mental Arithmetic",
    ),
    "Physics": (
        "Motion", "Forces", "Gravity", "Energy",
        "Electricity", "Magnetism", "Light", "Sound",
    ),
    "Biology": (
        "Plants", "Animals", "Human Body", "Cells",
        "Ecosystems", "Genetics", "Crops and Farming", "Nutrition",
    ),
    "History": (
        "Ancient India", "Mughal Empire", "Freedom Struggle", "World Wars",
        "Ancient Civilizations", "Famous Inventors", "Indian Constitution",
    ),
    "Technology": (
        "Computers", "Internet", "Programming Basics", "Robots",
        "Farm Machinery", "Mobile Phones",
    ),
    "General Knowledge": (
        "Capitals", "Rivers", "Festivals", "Sports",
        "Famous Monuments", "Space", "Animals", "Inventions",
    ),
}


def pick_subtopic(subject: str, rng: Optional[random.Random] = None) -> str:
    """Return a random subtopic of ``subject``, or ``subject`` itself if unknown."""
    subtopics = TOPIC_CATALOG.get(subject)
    if not subtopics:
        return subject
    return (rng or random).choice(subtopics)
