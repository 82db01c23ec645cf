"""Client for the Bento for Business card API."""

from .errors import (
    BentoClientError,
    BusinessError,
    InvalidResponseError,
    MissingAuthTokenError,
    TransportError,
    UnboundCardError,
    UnexpectedStateError,
)
from .models import (
    Address,
    AddressType,
    ApiApplication,
    Business,
    Card,
    CardStatus,
    CardType,
    Category,
    Config,
    PanAndCvv,
    Payee,
    Period,
    SpendingLimit,
    Transaction,
    Transactions,
    User,
)
from .session import (
    PRODUCTION_URI,
    SANDBOX_URI,
    Session,
    get_configured_session,
    get_production_session,
    get_session,
    get_test_session,
)
from .transport import RequestsTransport, Transport

__all__ = [
    "BentoClientError",
    "BusinessError",
    "InvalidResponseError",
    "MissingAuthTokenError",
    "TransportError",
    "UnboundCardError",
    "UnexpectedStateError",
    "Address",
    "AddressType",
    "ApiApplication",
    "Business",
    "Card",
    "CardStatus",
    "CardType",
    "Category",
    "Config",
    "PanAndCvv",
    "Payee",
    "Period",
    "SpendingLimit",
    "Transaction",
    "Transactions",
    "User",
    "PRODUCTION_URI",
    "SANDBOX_URI",
    "Session",
    "get_configured_session",
    "get_production_session",
    "get_session",
    "get_test_session",
    "RequestsTransport",
    "Transport",
]
