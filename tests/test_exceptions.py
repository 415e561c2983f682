"""Tests for custom exceptions."""

from command_center.core.exceptions import (
    CommandCenterException,
    DomainNotFoundError,
    ExternalServiceError,
    MissionNotFoundError,
    ModelTierNotFoundError,
    NotFoundError,
    ValidationError,
    sanitize_error,
)


def test_not_found_error_attributes() -> None:
    error = NotFoundError("Widget", "w-1")
    assert error.message == "Widget with ID 'w-1' not found"
    assert error.code == "NOT_FOUND"
    assert error.status_code == 404
    assert error.details == {"resource": "Widget", "resource_id": "w-1"}


def test_not_found_error_without_id() -> None:
    assert NotFoundError("Widget").message == "Widget not found"


def test_domain_not_found_error_attributes() -> None:
    error = DomainNotFoundError("space")
    assert error.message == "Domain with ID 'space' not found"
    assert error.status_code == 404
    assert isinstance(error, NotFoundError)


def test_mission_not_found_error_attributes() -> None:
    error = MissionNotFoundError("mission-1")
    assert error.message == "Mission with ID 'mission-1' not found"
    assert error.code == "NOT_FOUND"


def test_model_tier_not_found_lists_tiers() -> None:
    error = ModelTierNotFoundError("t9", ["t1_fast", "t2_power"])
    assert error.message == "Tier not found. Use: t1_fast, t2_power"
    assert str(error) == error.message
    assert error.status_code == 404
    assert error.details["available"] == ["t1_fast", "t2_power"]


def test_validation_error_attributes() -> None:
    error = ValidationError("Bad tempo", field="tempo", details={"allowed": ["a"]})
    assert error.code == "VALIDATION_ERROR"
    assert error.status_code == 400
    assert error.details == {"allowed": ["a"], "field": "tempo"}


def test_external_service_error_attributes() -> None:
    error = ExternalServiceError("harness")
    assert error.message == "Error communicating with harness"
    assert error.code == "EXTERNAL_SERVICE_ERROR"
    assert error.status_code == 502
    assert error.details == {"service": "harness"}
    assert not isinstance(error, ValidationError)


def test_all_errors_share_base_class() -> None:
    for error in (
        NotFoundError("x"),
        ValidationError("x"),
        ExternalServiceError("x"),
    ):
        assert isinstance(error, CommandCenterException)


def test_sanitize_error_uses_nearest_mapped_ancestor() -> None:
    assert sanitize_error(MissionNotFoundError("m")) == "The requested resource was not found."
    assert sanitize_error(ExternalServiceError("harness")) == (
        "An external service is temporarily unavailable."
    )


def test_sanitize_error_default_message() -> None:
    assert sanitize_error(RuntimeError("secret detail")) == "An error occurred. Please try again."
