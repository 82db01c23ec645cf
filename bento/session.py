"""Authenticated session against the Bento for Business API.

Open a session with get_production_session() or get_test_session(), then
use its methods to read the business, list and create cards, and pull
transactions. Cards returned by a session carry it along, so further
calls (turn_on, reissue, billing address, ...) are made on the card itself.
"""

import json
import logging
from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from bento.errors import InvalidResponseError, MissingAuthTokenError, check_error
from bento.logger import discard_logger, get_logger
from bento.models.bento import ApiApplication, Business, Card, CardType, Transactions, decode
from bento.models.config import PRODUCTION_URI, SANDBOX_URI, Config
from bento.transport import DEFAULT_TIMEOUT, RequestsTransport, Transport

logger = get_logger("bento.session")

# Bento assigns the real value when the card is created
PLACEHOLDER_LAST_FOUR = 3215


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _is_json(body: bytes) -> bool:
    try:
        json.loads(body, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def _encode(payload: Any) -> bytes:
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    return json.dumps(payload).encode("utf-8")


class Session:
    """Entry point to the API; one per credential pair."""

    def __init__(
        self,
        api_uri: str,
        authorization: str,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
        application: Optional[ApiApplication] = None,
    ):
        self.api_uri = api_uri
        self.authorization = authorization
        self.transport = transport or RequestsTransport()
        self.logger = logger or discard_logger()
        self.application = application

    def set_logger(self, logger: logging.Logger):
        """Swap the diagnostic sink that requests and responses are written to."""
        self.logger = logger

    def dispatch(self, method: str, path: str, payload: Any = None) -> bytes:
        """Make an authenticated call and return the raw JSON body.

        Raises TransportError, InvalidResponseError for non-JSON bodies, and
        BusinessError when Bento answers with an error envelope.
        """
        uri = f"{self.api_uri}{path}"
        headers = {"Accept": "*/*", "Authorization": self.authorization}

        body = None
        if payload is not None:
            body = _encode(payload)
            headers["Content-Type"] = "application/json"
            self.logger.info("Sending request: [method: %s] [uri: %s] body: %s",
                             method, uri, body.decode("utf-8"))
        else:
            self.logger.info("Sending request: [method: %s] [uri: %s]", method, uri)

        response = self.transport.send(method, self.api_uri, path, body, headers)
        self.logger.info("Received response: %s", response.decode("utf-8", errors="replace"))

        if not _is_json(response):
            raise InvalidResponseError(
                f"Server returned non-json value: [{response.decode('utf-8', errors='replace')}]",
                response,
            )

        error = check_error(response)
        if error is not None:
            raise error

        return response

    def _bind_all(self, cards: List[Card]) -> List[Card]:
        return [card._bind(self) for card in cards]

    def get_business(self) -> Business:
        """Get the business that owns the API credentials."""
        return decode(Business, self.dispatch("GET", "/businesses/me"))

    def get_cards(self) -> List[Card]:
        return self._bind_all(decode(List[Card], self.dispatch("GET", "/cards")))

    def get_card(self, card_id: int) -> Card:
        return decode(Card, self.dispatch("GET", f"/cards/{card_id}"))._bind(self)

    def new_card(self, card_type: CardType, alias: str) -> Card:
        """Create a physical card of the given type."""
        payload = {
            "type": CardType(card_type).value,
            "alias": alias,
            "virtualCard": False,
            "lastFour": PLACEHOLDER_LAST_FOUR,
        }
        return decode(Card, self.dispatch("POST", "/cards", payload))._bind(self)

    def get_transactions(self) -> Transactions:
        transactions = decode(Transactions, self.dispatch("GET", "/transactions"))
        for transaction in transactions.card_transactions:
            if transaction.card is not None:
                transaction.card._bind(self)
        return transactions


def get_session(
    api_uri: str,
    access_key: str,
    secret_key: str,
    transport: Optional[RequestsTransport] = None,
    session_logger: Optional[logging.Logger] = None,
) -> Session:
    """Exchange an access key and secret key for an authenticated Session.

    Args:
        api_uri: Base URI of the environment (SANDBOX_URI or PRODUCTION_URI)
        access_key: Bento API access key
        secret_key: Bento API secret key
        transport: Transport to use; defaults to a fresh RequestsTransport
        session_logger: Diagnostic sink for the new Session; defaults to discarding

    Returns:
        Session carrying the bearer token Bento returned

    Raises:
        TransportError: The request could not be made
        InvalidResponseError: Bento did not answer with JSON
        MissingAuthTokenError: Bento did not return an Authorization header
    """
    transport = transport or RequestsTransport()
    body = json.dumps({"accessKey": access_key, "secretKey": secret_key}).encode("utf-8")
    headers = {"Content-Type": "application/json", "Accept": "*/*"}

    response = transport.exchange("POST", f"{api_uri}/sessions", body, headers)

    if not _is_json(response.content):
        raise InvalidResponseError(
            f"Invalid json response: [{response.text}]", response.content
        )

    authorization = response.headers.get("Authorization")
    if authorization is None:
        raise MissingAuthTokenError("Server did not return an authorization token.")

    try:
        application = ApiApplication.model_validate_json(response.content)
    except ValidationError as e:
        logger.debug(f"Session opened but application descriptor did not decode: {e}")
        application = None

    return Session(api_uri, authorization, transport, session_logger, application)


def get_production_session(access_key: str, secret_key: str, **kwargs) -> Session:
    return get_session(PRODUCTION_URI, access_key, secret_key, **kwargs)


def get_test_session(access_key: str, secret_key: str, **kwargs) -> Session:
    """Open a session against the Bento sandbox."""
    return get_session(SANDBOX_URI, access_key, secret_key, **kwargs)


def get_configured_session(
    config: Optional[Config] = None,
    session_logger: Optional[logging.Logger] = None,
) -> Session:
    """Open a session from stored credentials and settings."""
    config = config or Config.load()
    transport = RequestsTransport(timeout=config.timeout or DEFAULT_TIMEOUT)
    logger.debug(f"Opening {config.environment} session at {config.api_uri}")
    return get_session(config.api_uri, config.access_key, config.secret_key, transport=transport,
                       session_logger=session_logger)
