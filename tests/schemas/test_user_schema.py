"""User Schemas: wire names, defaults for missing fields, strict types."""

import pytest
from pydantic import ValidationError

from roster.core.user_store import User
from roster.schemas.user import UserPayload, UserResponse


def test_payload_maps_userage_to_age():
    payload = UserPayload.model_validate({"id": 3, "username": "bob", "userage": 30})
    assert payload.to_domain() == User(id=3, username="bob", age=30)


def test_missing_fields_bind_to_empty_values():
    payload = UserPayload.model_validate({})
    assert payload.to_domain() == User(id=0, username="", age=0)


def test_null_username_passes_through_to_store_checks():
    assert UserPayload.model_validate({"username": None}).to_domain().username is None


def test_unknown_fields_ignored():
    payload = UserPayload.model_validate({"username": "bob", "userage": 1, "role": "admin"})
    assert not hasattr(payload, "role")


@pytest.mark.parametrize("body", [
    {"username": "bob", "userage": "30"},
    {"username": "bob", "userage": 30.5},
    {"username": 12, "userage": 30},
    {"id": "1", "username": "bob", "userage": 30},
])
def test_wrong_types_rejected(body):
    with pytest.raises(ValidationError):
        UserPayload.model_validate(body)


def test_response_uses_wire_names():
    out = UserResponse.from_domain(User(id=1, username="alice", age=25)).model_dump()
    assert out == {"id": 1, "username": "alice", "userage": 25}


@pytest.mark.parametrize("body", [
    {"username": "bob", "userage": 2**31},
    {"username": "bob", "userage": 10**30},
    {"username": "bob", "userage": -(2**31) - 1},
    {"id": 2**31, "username": "bob", "userage": 30},
])
def test_integers_outside_int32_rejected(body):
    with pytest.raises(ValidationError):
        UserPayload.model_validate(body)


def test_int32_bounds_accepted():
    payload = UserPayload.model_validate(
        {"id": -(2**31), "username": "bob", "userage": 2**31 - 1},
    )
    assert payload.to_domain() == User(id=-(2**31), username="bob", age=2**31 - 1)
