"""Unit tests for response envelopes and pure builders.

Tests cover:
- EmptyResponse singleton and serialization
- ApiResponse / ErrorResponse shapes and aliases
- build_success defaulting rules
- build_error status resolution and message override
- Builder purity (equal inputs, equal envelopes)
"""

import copy
from http import HTTPStatus

import pytest
from pydantic import BaseModel, ValidationError

from apicommon.core.errors import CommonErrorCode, ErrorCodeEnum, unique_error_codes
from apicommon.presentation.responses import (
    DEFAULT_CREATED_MESSAGE,
    DEFAULT_MESSAGE,
    DEFAULT_NO_CONTENT_MESSAGE,
    DEFAULT_OK_MESSAGE,
    EMPTY_RESPONSE,
    ApiResponse,
    ApiStatus,
    EmptyResponse,
    ErrorResponse,
    build_error,
    build_success,
    resolve_default_message,
    resolve_status,
)


@unique_error_codes
class InventoryErrorCode(ErrorCodeEnum):
    OUT_OF_STOCK = (HTTPStatus.CONFLICT, "INVENTORY-001", "Item is out of stock.")
    WAREHOUSE_TIMEOUT = (
        HTTPStatus.GATEWAY_TIMEOUT,
        "INVENTORY-002",
        "Warehouse did not respond.",
    )


class UserOut(BaseModel):
    id: int
    email: str


@pytest.mark.unit
class TestEmptyResponse:
    """Unit tests for the empty payload sentinel."""

    def test_get_instance_returns_shared_instance(self):
        assert EmptyResponse.get_instance() is EmptyResponse.get_instance()
        assert EmptyResponse.get_instance() is EMPTY_RESPONSE

    def test_copies_return_same_instance(self):
        assert copy.copy(EMPTY_RESPONSE) is EMPTY_RESPONSE
        assert copy.deepcopy(EMPTY_RESPONSE) is EMPTY_RESPONSE

    def test_is_immutable(self):
        with pytest.raises(ValidationError):
            EMPTY_RESPONSE.result = "changed"  # type: ignore[misc]

    def test_serializes_to_no_content_result(self):
        assert EMPTY_RESPONSE.model_dump(mode="json") == {"result": "No content"}


@pytest.mark.unit
class TestBuildSuccess:
    """Unit tests for build_success defaulting."""

    def test_no_arguments(self):
        """Test all defaults: 200 message and empty payload."""
        envelope = build_success()

        assert envelope.status == ApiStatus.SUCCESS
        assert envelope.message == DEFAULT_OK_MESSAGE
        assert envelope.data is EMPTY_RESPONSE

    def test_no_arguments_serialized(self):
        assert build_success().to_content() == {
            "status": "SUCCESS",
            "message": DEFAULT_OK_MESSAGE,
            "data": {"result": "No content"},
        }

    @pytest.mark.parametrize(
        ("status", "message"),
        [
            (HTTPStatus.OK, DEFAULT_OK_MESSAGE),
            (HTTPStatus.CREATED, DEFAULT_CREATED_MESSAGE),
            (HTTPStatus.NO_CONTENT, DEFAULT_NO_CONTENT_MESSAGE),
            (HTTPStatus.ACCEPTED, DEFAULT_MESSAGE),
            (202, DEFAULT_MESSAGE),
        ],
    )
    def test_default_message_keyed_by_status(self, status, message):
        assert build_success(status).message == message
        assert resolve_default_message(status) == message

    def test_caller_message_wins(self):
        envelope = build_success(HTTPStatus.CREATED, "User registered.")

        assert envelope.message == "User registered."

    def test_payload_is_kept(self):
        user = UserOut(id=1, email="a@example.com")

        envelope = build_success(data=user)

        assert envelope.data is user
        assert envelope.to_content()["data"] == {"id": 1, "email": "a@example.com"}

    @pytest.mark.parametrize("payload", [0, False, "", [], {}])
    def test_falsy_payloads_are_not_replaced(self, payload):
        """Test only None is replaced by the sentinel."""
        assert build_success(data=payload).data == payload
        assert build_success(data=payload).data is not EMPTY_RESPONSE

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    def test_rejects_error_statuses(self, status):
        with pytest.raises(ValueError, match="use build_error"):
            build_success(status)

    def test_is_pure(self):
        assert build_success(data={"a": 1}) == build_success(data={"a": 1})
        assert build_success() == build_success()

    def test_envelope_is_frozen(self):
        envelope = build_success()

        with pytest.raises(ValidationError):
            envelope.message = "changed"  # type: ignore[misc]

    def test_parametrized_envelope_accepts_sentinel(self):
        envelope = ApiResponse[UserOut](
            status=ApiStatus.SUCCESS, message="ok", data=EMPTY_RESPONSE
        )

        assert envelope.data is EMPTY_RESPONSE


@pytest.mark.unit
class TestBuildError:
    """Unit tests for build_error."""

    @pytest.mark.parametrize("error_code", list(CommonErrorCode) + list(InventoryErrorCode))
    def test_status_and_code_come_from_identity(self, error_code):
        envelope = build_error(error_code)

        assert envelope.status_code == int(error_code.http_status)
        assert envelope.error_code == error_code.code
        assert envelope.message == error_code.message

    @pytest.mark.parametrize("error_code", list(CommonErrorCode) + list(InventoryErrorCode))
    def test_status_kind_follows_status_class(self, error_code):
        envelope = build_error(error_code)

        if int(error_code.http_status) >= 500:
            assert envelope.status == ApiStatus.ERROR
        else:
            assert envelope.status == ApiStatus.FAILURE

    def test_message_override(self):
        envelope = build_error(InventoryErrorCode.WAREHOUSE_TIMEOUT, "X")

        assert envelope.message == "X"
        assert envelope.status == ApiStatus.ERROR

    def test_parameter_id_scenario(self):
        envelope = build_error(CommonErrorCode.PARAMETER_ID_VALUE)

        assert envelope.to_content() == {
            "status": "FAILURE",
            "statusCode": 400,
            "errorCode": "COMMON-003",
            "message": "ID value must be greater than zero.",
        }

    def test_serialization_has_no_data_field(self):
        content = build_error(CommonErrorCode.INTERNAL_SERVER_ERROR).to_content()

        assert set(content) == {"status", "statusCode", "errorCode", "message"}

    def test_is_pure(self):
        assert build_error(CommonErrorCode.PARAMETER_NULL) == build_error(
            CommonErrorCode.PARAMETER_NULL
        )

    def test_of_matches_build_error(self):
        assert ErrorResponse.of(CommonErrorCode.NO_ENDPOINT, "gone") == build_error(
            CommonErrorCode.NO_ENDPOINT, "gone"
        )

    def test_accepts_field_names_and_aliases(self):
        by_name = ErrorResponse(
            status=ApiStatus.FAILURE,
            status_code=400,
            error_code="COMMON-001",
            message="m",
        )
        by_alias = ErrorResponse.model_validate(
            {
                "status": "FAILURE",
                "statusCode": 400,
                "errorCode": "COMMON-001",
                "message": "m",
            }
        )

        assert by_name == by_alias


@pytest.mark.unit
class TestResolveStatus:
    """Unit tests for outcome kind resolution."""

    @pytest.mark.parametrize("status", [400, 401, 404, 409, 422, 499])
    def test_client_errors_are_failures(self, status):
        assert resolve_status(status) == ApiStatus.FAILURE

    @pytest.mark.parametrize("status", [500, 502, 503, 504, 599])
    def test_server_errors_are_errors(self, status):
        assert resolve_status(status) == ApiStatus.ERROR
