"""
Shared test documents and models for all test files.

Consolidates the JSON fixtures and Pydantic models used across the test
suite so that every test file navigates the same documents.
"""

from typing import Optional

from pydantic import BaseModel

# =============================================================================
# Documents
# =============================================================================

SIMPLE_JSON = b"""{
    "object": {
        "strKey": "strValue",
        "boolKey": true,
        "intKey": 42,
        "floatKey": 1.21,
        "arrayObjKey": [
            {"val": 1},
            {"val": 2}
        ],
        "nestedArrayKey": [
            [3, 4, 5]
        ],
        "arrayStrKey": [
            "str1",
            "str2"
        ]
    }
}"""

PEOPLE_JSON = b"""{
    "people": [
        {
            "name": "alice",
            "score": 89.5,
            "friends": ["bob"],
            "deleted": false
        },
        {
            "name": "bob",
            "score": 75.5,
            "friends": [],
            "deleted": false
        }
    ]
}"""


# =============================================================================
# Models
# =============================================================================


class Person(BaseModel):
    """A person entry of PEOPLE_JSON."""

    name: str
    score: float
    friends: list[str]
    deleted: bool


class Account(BaseModel):
    """Model whose required field PEOPLE_JSON entries do not have."""

    id: int
    name: Optional[str] = None


class Counter(BaseModel):
    """An arrayObjKey entry of SIMPLE_JSON."""

    val: int
