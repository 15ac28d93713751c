"""API routes package"""

from . import health, accounts, clients, programs, food_plans, library, activity, nutrition

__all__ = [
    "health",
    "accounts",
    "clients",
    "programs",
    "food_plans",
    "library",
    "activity",
    "nutrition",
]
