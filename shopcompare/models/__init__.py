"""Domain models (read-only inputs to the ranking engine)."""

from .catalog import CatalogEntry, Coupon, KeySpecs, Offer
from .profile import (
    BudgetRange,
    Interaction,
    InteractionKind,
    PriorityMode,
    UseCase,
    UserProfile,
)

__all__ = [
    "CatalogEntry",
    "Coupon",
    "KeySpecs",
    "Offer",
    "BudgetRange",
    "Interaction",
    "InteractionKind",
    "PriorityMode",
    "UseCase",
    "UserProfile",
]
