"""Pydantic models for Bento API resources."""

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from bento.errors import InvalidResponseError, UnboundCardError, UnexpectedStateError

if TYPE_CHECKING:
    from bento.session import Session

T = TypeVar("T")


class AddressType(str, Enum):
    BUSINESS_ADDRESS = "BUSINESS_ADDRESS"
    USER_ADDRESS = "USER_ADDRESS"


class Period(str, Enum):
    """Period for a SpendingLimit."""
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    CUSTOM = "Custom"


class CardType(str, Enum):
    BUSINESS_OWNER_CARD = "BusinessOwnerCard"
    EMPLOYEE_CARD = "EmployeeCard"
    CATEGORY_CARD = "CategoryCard"


class CardStatus(str, Enum):
    CANCELED = "CANCELED"
    FRAUD_PREVENTION = "FRAUD_PREVENTION"
    TURNED_ON = "TURNED_ON"
    TURNED_OFF = "TURNED_OFF"
    WEEKLY_RESTRICTION = "WEEKLY_RESTRICTION"


class BentoModel(BaseModel):
    """Base for API records: camelCase on the wire, unset fields omitted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with wire names and without unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode(type_: Type[T], body: bytes) -> T:
    """Decode response bytes into type_, raising InvalidResponseError on mismatch."""
    try:
        return TypeAdapter(type_).validate_json(body)
    except ValidationError as e:
        raise InvalidResponseError(f"Unexpected response shape: {e}", body) from e


class Address(BentoModel):
    active: Optional[bool] = None
    address_type: Optional[str] = None
    city: Optional[str] = None
    id: Optional[int] = None
    state: Optional[str] = None
    street: Optional[str] = None
    zip_code: Optional[str] = None


class Business(BentoModel):
    business_id: Optional[int] = None
    company_name: Optional[str] = None
    name_on_card: Optional[str] = None
    phone: Optional[str] = None
    account_number: Optional[str] = None
    business_structure: Optional[str] = None
    status: Optional[str] = None
    created_date: Optional[int] = None
    approval_date: Optional[int] = None
    approval_status: Optional[str] = None
    balance: Optional[float] = None
    time_zone: Optional[str] = None
    addresses: Optional[List[Address]] = None


class ApiApplication(BentoModel):
    """Application descriptor returned when a session is opened."""
    api_application_id: Optional[int] = None
    name: Optional[str] = None
    access_key: Optional[str] = None
    business: Optional[Business] = None


class SpendingLimit(BentoModel):
    active: Optional[bool] = None
    amount: Optional[float] = None
    period: Optional[str] = None
    custom_start_date: Optional[int] = None
    custom_end_date: Optional[int] = None


class User(BentoModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[int] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    user_id: Optional[int] = None
    mobile_access: Optional[bool] = None
    deleted: Optional[bool] = None
    created: Optional[int] = None
    bento_type: Optional[str] = None


class Category(BentoModel):
    """Transaction category, also used to restrict where a card can spend."""
    transaction_category_id: Optional[int] = None
    description: Optional[str] = None
    group: Optional[str] = None
    mccs: Optional[List[int]] = None
    name: Optional[str] = None
    type: Optional[str] = None
    bento_type: Optional[str] = None


class PanAndCvv(BentoModel):
    pan: Optional[str] = None
    cvv: Optional[str] = None


class Card(BentoModel):
    """A Bento card.

    Cards returned by a Session remember it, so lifecycle calls such as
    turn_on() or reissue() need no further arguments. Every call returns a
    new Card reflecting what Bento confirmed; the receiver is left untouched.
    """

    card_id: Optional[int] = None
    type: Optional[str] = None
    lifecycle_status: Optional[str] = None
    status: Optional[str] = None
    expiration: Optional[str] = None
    last_four: Optional[str] = None
    virtual_card: Optional[bool] = None
    alias: Optional[str] = None
    available_amount: Optional[float] = None
    allowed_days_active: Optional[bool] = None
    allowed_days: Optional[List[str]] = None
    allowed_categories_active: Optional[bool] = None
    allowed_categories: Optional[List[Category]] = None
    transaction_category_id: Optional[int] = None
    created_on: Optional[int] = None
    updated_on: Optional[int] = None
    spending_limit: Optional[SpendingLimit] = None
    user: Optional[User] = None
    permissions: Optional[Dict[str, bool]] = None
    bento_type: Optional[str] = None

    _session: Any = PrivateAttr(default=None)

    def __eq__(self, other: Any) -> bool:
        # Field data only; the bound session does not take part.
        if not isinstance(other, Card):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__

    @property
    def session(self) -> Optional["Session"]:
        return self._session

    def _bind(self, session: "Session") -> "Card":
        self._session = session
        return self

    def _require_session(self) -> "Session":
        if self._session is None:
            raise UnboundCardError(f"Card {self.card_id} was not obtained through a Session")
        return self._session

    def _path(self, suffix: str = "") -> str:
        return f"/cards/{self.card_id}{suffix}"

    def _card_call(self, method: str, suffix: str = "", payload: Any = None) -> "Card":
        session = self._require_session()
        body = session.dispatch(method, self._path(suffix), payload)
        return decode(Card, body)._bind(session)

    def _address_call(self, method: str, payload: Optional[Address] = None) -> Address:
        session = self._require_session()
        body = session.dispatch(method, self._path("/billingAddress"), payload)
        return decode(Address, body)

    def put(self) -> "Card":
        """Replace the card on Bento with this record."""
        return self._card_call("PUT", payload=self)

    def delete(self) -> "Card":
        return self._card_call("DELETE")

    def activate(self, last_four: str) -> "Card":
        """Activate a physical card, proving possession with its last four digits."""
        return self._card_call("POST", "/activation", self.model_copy(update={"last_four": last_four}))

    def reissue(self) -> "Card":
        return self._card_call("POST", "/reissue")

    def _set_status(self, status: CardStatus) -> "Card":
        requested = self.model_copy(update={"status": status.value})
        card = requested.put()
        if card.status != status.value:
            raise UnexpectedStateError(status.value, card.status, card)
        return card

    def turn_on(self) -> "Card":
        """Turn the card on. Raises UnexpectedStateError if Bento leaves it in another state."""
        return self._set_status(CardStatus.TURNED_ON)

    def turn_off(self) -> "Card":
        """Turn the card off. Raises UnexpectedStateError if Bento leaves it in another state."""
        return self._set_status(CardStatus.TURNED_OFF)

    def get_pan_and_cvv(self) -> PanAndCvv:
        session = self._require_session()
        return decode(PanAndCvv, session.dispatch("GET", self._path("/pan")))

    def get_billing_address(self) -> Address:
        return self._address_call("GET")

    def set_billing_address(self, address: Address) -> Address:
        return self._address_call("POST", address)

    def update_billing_address(self, address: Address) -> Address:
        return self._address_call("PUT", address)


class Payee(BentoModel):
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip: Optional[str] = None


class Transaction(BentoModel):
    card_transaction_id: Optional[int] = None
    amount: Optional[float] = None
    approval_code: Optional[str] = None
    available_balance: Optional[float] = None
    card: Optional[Card] = None
    category: Optional[Category] = None
    currency: Optional[str] = None
    deleted: Optional[bool] = None
    fees: Optional[float] = None
    ledger_balance: Optional[float] = None
    note: Optional[str] = None
    settlement_date: Optional[int] = None
    status: Optional[str] = None
    tags: Optional[List[str]] = None
    transaction_date: Optional[int] = None
    type: Optional[str] = None
    payee: Optional[Payee] = None


class Transactions(BentoModel):
    """Page of card transactions returned by /transactions."""
    amount: Optional[float] = None
    size: Optional[int] = None
    card_transactions: List[Transaction] = Field(default_factory=list)

    @field_validator("card_transactions", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        return [] if value is None else value
