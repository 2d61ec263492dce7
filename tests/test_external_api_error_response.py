"""Tests for shared error payload helpers."""

from server_utils.external_api import (
    configuration_error,
    error_output,
    error_response,
    validation_error,
)


def test_error_output_includes_optional_fields():
    result = error_output("Something went wrong", status_code=400, details="blank")

    assert result == {
        "output": {
            "error": "Something went wrong",
            "status_code": 400,
            "details": "blank",
        }
    }


def test_error_output_omits_missing_optional_fields():
    result = error_output("basic error")

    assert result == {"output": {"error": "basic error"}}


def test_error_response_includes_type():
    result = error_response("boom", error_type="api_error", status_code=500)

    assert result["output"]["error"] == {
        "message": "boom",
        "type": "api_error",
        "status_code": 500,
    }


def test_configuration_error_names_setting():
    result = configuration_error("Missing or empty 'api_secret' setting", "api_secret")

    assert result["output"]["error"]["type"] == "configuration_error"
    assert result["output"]["error"]["status_code"] == 400
    assert result["output"]["error"]["details"] == {"setting": "api_secret"}


def test_validation_error_includes_field():
    validation = validation_error("bad", field="event", status_code=422)

    assert validation["output"]["error"]["details"] == {"field": "event"}
    assert validation["output"]["error"]["status_code"] == 422
