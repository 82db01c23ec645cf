"""Bento data models for API resources and configuration."""

from .bento import (
    Address,
    AddressType,
    ApiApplication,
    Business,
    Card,
    CardStatus,
    CardType,
    Category,
    PanAndCvv,
    Payee,
    Period,
    SpendingLimit,
    Transaction,
    Transactions,
    User,
)
from .config import Config

__all__ = [
    "Address",
    "AddressType",
    "ApiApplication",
    "Business",
    "Card",
    "CardStatus",
    "CardType",
    "Category",
    "PanAndCvv",
    "Payee",
    "Period",
    "SpendingLimit",
    "Transaction",
    "Transactions",
    "User",
    "Config",
]
