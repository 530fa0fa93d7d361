"""Service Response: envelope constructors and invariants.

Tests:
    - success()/failure() set the flag and default status codes
    - success must agree with status_code < 400
    - failures never carry a payload
    - envelopes are frozen and serialize with camelCase keys
"""

import pytest
from pydantic import ValidationError

from lofty_api.core.service_response import ServiceResponse, failure, success


def test_success_defaults_to_200():
    env = success("Users found", [1, 2])
    assert env.success is True
    assert env.status_code == 200
    assert env.response_object == [1, 2]


def test_success_with_custom_status():
    env = success("User created successfully", {"id": 3}, status_code=201)
    assert env.status_code == 201


def test_failure_has_no_payload():
    env = failure("User not found", status_code=404)
    assert env.success is False
    assert env.response_object is None
    assert env.status_code == 404


def test_failure_with_payload_rejected():
    with pytest.raises(ValidationError):
        failure("Leaky", payload={"id": 1}, status_code=500)


@pytest.mark.parametrize("status_code", [400, 404, 500])
def test_success_with_error_status_rejected(status_code):
    with pytest.raises(ValidationError):
        success("Not really", None, status_code=status_code)


@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_failure_with_success_status_rejected(status_code):
    with pytest.raises(ValidationError):
        failure("Not really", status_code=status_code)


def test_envelope_is_frozen():
    env = success("ok", None)
    with pytest.raises(ValidationError):
        env.message = "changed"


def test_to_body_uses_camel_case():
    assert failure("Invalid input", status_code=400).to_body() == {
        "success": False,
        "message": "Invalid input",
        "responseObject": None,
        "statusCode": 400,
    }


def test_accepts_camel_case_on_input():
    env = ServiceResponse.model_validate({
        "success": True, "message": "ok",
        "responseObject": {"a": 1}, "statusCode": 200,
    })
    assert env.response_object == {"a": 1}
