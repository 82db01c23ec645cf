"""Shared fixtures: sample Bento payloads and a canned transport."""

import logging
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from bento.errors import TransportError
from bento.session import Session

SAMPLE_BUSINESS = """{
  "businessId": 12345,
  "companyName": "My Company Inc",
  "nameOnCard": "My Company",
  "phone": "9998881234",
  "accountNumber": "820187766",
  "businessStructure": "LLC",
  "status": "APPROVED",
  "createdDate": 1495759408,
  "approvalDate": 1495759408,
  "approvalStatus": "Approved",
  "balance": 100.99,
  "timeZone": "America/Los_Angeles",
  "addresses": [
    {
      "active": true,
      "addressType": "BUSINESS_ADDRESS",
      "city": "San Francisco",
      "id": 12345,
      "state": "CA",
      "street": "123 Main Street",
      "zipCode": "94123"
    }
  ]
}"""

SAMPLE_CARD = """{
  "cardId": 12345,
  "type": "CategoryCard",
  "lifecycleStatus": "ACTIVATED",
  "status": "TURNED_ON",
  "expiration": "1221",
  "lastFour": "1234",
  "virtualCard": false,
  "alias": "My Card",
  "availableAmount": 123.45,
  "allowedDays": [
    "MONDAY"
  ],
  "allowedCategoriesActive": true,
  "allowedCategories": [
    {
      "transactionCategoryId": 10
    }
  ],
  "createdOn": 1495759408,
  "updatedOn": 1495759408,
  "spendingLimit": {
    "active": true,
    "amount": 123.45,
    "period": "Day",
    "customStartDate": 1495759408,
    "customEndDate": 1495759408
  },
  "user": {
    "firstName": "John",
    "lastName": "Smith",
    "birthDate": 1495759408,
    "email": "me@myemail.com",
    "phone": "9998887654",
    "userId": 12345,
    "mobileAccess": true,
    "deleted": false,
    "created": 1495759408
  }
}"""

SAMPLE_ADDRESS = """{
  "active": true,
  "addressType": "USER_ADDRESS",
  "city": "Oakland",
  "id": 777,
  "state": "CA",
  "street": "1 Broadway",
  "zipCode": "94607"
}"""

SAMPLE_TRANSACTIONS = """{
  "amount": 42.5,
  "size": 1,
  "cardTransactions": [
    {
      "cardTransactionId": 9001,
      "amount": 42.5,
      "currency": "USD",
      "status": "SETTLED",
      "tags": ["travel"],
      "card": {"cardId": 12345, "status": "TURNED_ON"},
      "category": {"transactionCategoryId": 10, "name": "Travel"},
      "payee": {"name": "Airline", "city": "Denver", "country": "US"}
    }
  ]
}"""


class FakeTransport:
    """Transport answering from a table keyed by (method, path); records every call."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def send(self, method, api_uri, path, body, headers):
        self.calls.append(SimpleNamespace(
            method=method, api_uri=api_uri, path=path, body=body, headers=headers
        ))
        try:
            response = self.responses[(method, path)]
        except KeyError:
            raise TransportError(f"No such testing endpoint: {method} {path}")
        return response.encode("utf-8") if isinstance(response, str) else response


def standard_responses():
    return {
        ("GET", "/businesses/me"): SAMPLE_BUSINESS,
        ("GET", "/cards"): f"[{SAMPLE_CARD},{SAMPLE_CARD}]",
        ("POST", "/cards"): SAMPLE_CARD,
        ("GET", "/cards/12345"): SAMPLE_CARD,
        ("PUT", "/cards/12345"): SAMPLE_CARD,
        ("DELETE", "/cards/12345"): SAMPLE_CARD,
        ("POST", "/cards/12345/activation"): SAMPLE_CARD,
        ("POST", "/cards/12345/reissue"): SAMPLE_CARD,
        ("GET", "/cards/12345/pan"): '{"pan": "4111111111111234", "cvv": "123"}',
        ("GET", "/cards/12345/billingAddress"): SAMPLE_ADDRESS,
        ("POST", "/cards/12345/billingAddress"): SAMPLE_ADDRESS,
        ("PUT", "/cards/12345/billingAddress"): SAMPLE_ADDRESS,
        ("GET", "/transactions"): SAMPLE_TRANSACTIONS,
    }


@pytest.fixture
def transport():
    return FakeTransport(standard_responses())


@pytest.fixture
def session(transport):
    return Session("https://bento.test/api", "Bearer test-token", transport)


@pytest.fixture(autouse=True)
def isolated_bento_home(tmp_path):
    with patch("bento.paths.get_bento_home", return_value=tmp_path):
        yield tmp_path


class RecordingHandler(logging.Handler):
    """Keeps every record it is handed."""

    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def root_records():
    """Records that reach the root logger during the test."""
    handler = RecordingHandler()
    root = logging.getLogger()
    root.addHandler(handler)
    yield handler.records
    root.removeHandler(handler)
