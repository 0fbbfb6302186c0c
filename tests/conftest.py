"""
Pytest configuration and shared fixtures for JSON Redactor tests.

Clears JSON_REDACTOR_* variables around every test so configuration
tests and server tests start from a known, empty environment.
"""

import os
import sys

import pytest

# Add parent directory to path for server imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


BASIC_JSON = """{
    "a": "1",
    "b": 2
}"""

# a: string
# b: number
# c: boolean
# d: object (e: property on object, f: object on object,
#            g: array of strings, h: array of objects)
# i: array of arrays
# j: null
COMPLEX_JSON = """{
    "a": "A",
    "b": 2,
    "c": true,
    "d": {
        "e": "EEEEE",
        "f": {
            "x": 6
        },
        "g": [ "GGGGGGG", "GGGGGGG" ],
        "h": [
            { "y": 8 },
            { "y": 8 }
        ]
    },
    "i": [ [9, 9], [9, 9] ],
    "j": null
}"""


@pytest.fixture(autouse=True)
def clean_redactor_env(monkeypatch):
    """
    Remove redactor configuration from the environment.
    This runs automatically before each test.
    """
    for name in list(os.environ):
        if name.startswith("JSON_REDACTOR_"):
            monkeypatch.delenv(name)
    yield


@pytest.fixture
def basic_json():
    return BASIC_JSON


@pytest.fixture
def complex_json():
    return COMPLEX_JSON


@pytest.fixture
def billing_history():
    """A user billing record mixing always-secret and payment-type-gated fields."""
    return {
        "id": 42,
        "username": "jdoe",
        "password": "P@ssw0rd5",
        "passwordHistory": ["P@ssw0rd1", "P@ssw0rd2", "P@ssw0rd3"],
        "socialSecurityNumber": 1234567890,
        "billing": [
            {
                "type": "check",
                "amount": 25.5,
                "checkNumber": "2468",
            },
            {
                "type": "creditCard",
                "amount": 99.99,
                "creditCardData": {
                    "brand": "Visa",
                    "number": "4111111111111111",
                    "expiration": "04/25",
                    "cvv": "258",
                    "isDebit": False,
                },
            },
            {
                "type": "creditCard",
                "amount": 12.0,
                "checkNumber": "1357",
            },
        ],
    }
