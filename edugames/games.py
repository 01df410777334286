# edugames/games.py
import math
import random
from typing import Iterable, Optional

from edugames.schemas import MathProblem, ShotResult

MARKET_ITEMS = ("Potatoes", "Onions", "Rice", "Lentils", "Tomatoes")

GRAVITY = 9.8
SIX_DISTANCE = 70
FOUR_DISTANCE = 35

# 0 = open, 1 = wall, 3 = goal; the robot starts top-left
TECH_GRID = (
    (0, 0, 0),
    (1, 1, 0),
    (0, 0, 3),
)
WALL = 1
GOAL = 3
# command code -> (row delta, column delta): up, down, left, right
MOVES = {0: (-1, 0), 1: (1, 0), 2: (0, -1), 3: (0, 1)}


def math_problem(rng: Optional[random.Random] = None) -> MathProblem:
    """A market shopping word problem: price per kg times quantity."""
    rng = rng or random
    price = rng.randint(10, 49)
    qty = rng.randint(1, 5)
    return MathProblem(
        item=rng.choice(MARKET_ITEMS),
        price_per_kg=price,
        quantity=qty,
        correct_answer=price * qty,
    )


def physics_shot(angle_deg: float, force: float) -> ShotResult:
    """Projectile range on flat ground for a cricket shot."""
    angle = math.radians(angle_deg)
    distance = force ** 2 * math.sin(2 * angle) / GRAVITY
    if distance > SIX_DISTANCE:
        result = "SIX! 🏏"
    elif distance > FOUR_DISTANCE:
        result = "FOUR! 🏃"
    else:
        result = "CAUGHT! 👐"
    return ShotResult(distance=distance, result=result)


def tech_run(commands: Iterable[int]) -> str:
    """Drive the tractor robot across TECH_GRID. Returns WIN, CRASH or Lost."""
    row, col = 0, 0
    size = len(TECH_GRID)
    for cmd in commands:
        dr, dc = MOVES.get(cmd, (0, 0))
        row, col = row + dr, col + dc
        if not (0 <= row < size and 0 <= col < size) or TECH_GRID[row][col] == WALL:
            return "CRASH"
        if TECH_GRID[row][col] == GOAL:
            return "WIN"
    return "Lost"
