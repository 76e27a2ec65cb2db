"""Tests for the service error types and their Problem Details rendering."""

from compliance.core.exceptions import (
    BaseError,
    ClientError,
    ErrorCategory,
    PayloadTooLargeError,
    ValidationError,
)


def _server_fault(**overrides):
    kwargs = dict(
        message="Rule table failed to load",
        error_code="RULES_UNAVAILABLE",
        category=ErrorCategory.SERVER_ERROR,
        http_status=503,
    )
    kwargs.update(overrides)
    return BaseError(**kwargs)


class TestBaseError:
    def test_keeps_constructor_values(self):
        error = _server_fault(details={"detail": "registry empty"}, retryable=True)

        assert str(error) == "Rule table failed to load"
        assert error.error_code == "RULES_UNAVAILABLE"
        assert error.category is ErrorCategory.SERVER_ERROR
        assert error.http_status == 503
        assert error.retryable is True
        assert error.details == {"detail": "registry empty"}

    def test_details_are_copied(self):
        supplied = {"detail": "registry empty"}
        error = _server_fault(details=supplied)
        supplied["detail"] = "changed"

        assert error.details["detail"] == "registry empty"

    def test_problem_members(self):
        problem = _server_fault(details={"detail": "registry empty"}).to_dict()

        assert problem == {
            "type": "/errors/RULES_UNAVAILABLE",
            "title": "Rule table failed to load",
            "status": 503,
            "detail": "registry empty",
            "code": "RULES_UNAVAILABLE",
            "category": "server_error",
            "retryable": False,
        }

    def test_detail_is_none_without_details(self):
        error = _server_fault()

        assert error.details == {}
        assert error.to_dict()["detail"] is None


class TestClientErrors:
    def test_client_error_is_400_and_final(self):
        error = ClientError("Bad input", "BAD_INPUT")

        assert (error.http_status, error.category, error.retryable) == (
            400,
            ErrorCategory.CLIENT_ERROR,
            False,
        )

    def test_validation_error_names_the_field(self):
        error = ValidationError("Analysis result must be a JSON object", field="analysisResult")

        assert error.http_status == 422
        assert error.error_code == "VALIDATION_ERROR"
        assert error.details["field"] == "analysisResult"
        assert error.to_dict()["detail"] == "analysisResult: Analysis result must be a JSON object"

    def test_validation_error_merges_details(self):
        error = ValidationError("Too long", field="organizationName", details={"max_length": 300})

        assert error.details["max_length"] == 300
        assert error.details["field"] == "organizationName"

    def test_validation_error_keeps_explicit_detail(self):
        error = ValidationError("Too long", field="fein", details={"detail": "FEIN is too long"})

        assert error.to_dict()["detail"] == "FEIN is too long"

    def test_payload_too_large(self):
        error = PayloadTooLargeError(max_length=100, actual_length=250)

        assert isinstance(error, ClientError)
        assert error.http_status == 413
        assert error.error_code == "PAYLOAD_TOO_LARGE"
        assert error.details == {"max_length": 100, "actual_length": 250}
        assert "250" in error.message and "100" in error.message

