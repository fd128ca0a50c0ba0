"""Error hierarchy — status codes and response envelope."""

from petadoption.core.errors import (
    AlreadyAdoptedError, AuthenticationError, DatabaseError, ErrorCategory,
    ExternalServiceError, ImageStorageError, PetAdoptionError, ResourceNotFoundError,
)


def test_already_adopted_is_400_with_fixed_message():
    err = AlreadyAdoptedError("1.2.3.4")
    assert err.http_status == 400
    assert err.category == ErrorCategory.BUSINESS_RULE
    assert err.to_response() == {
        "error": "You have already adopted a pet", "code": "ALREADY_ADOPTED",
    }


def test_database_error_keeps_raw_message():
    err = DatabaseError("no such table: pets", "query")
    assert err.http_status == 500
    assert err.to_response()["error"] == "no such table: pets"


def test_status_codes():
    assert AuthenticationError().http_status == 401
    assert ResourceNotFoundError("Pet", "9").http_status == 404
    assert ExternalServiceError("Error fetching IP", "ip_lookup").http_status == 500
    assert ImageStorageError("disk full").http_status == 500


def test_all_errors_share_base():
    for err in (
        AlreadyAdoptedError("x"), AuthenticationError(), DatabaseError("m", "op"),
        ResourceNotFoundError("Pet", "1"), ExternalServiceError("m", "s"),
    ):
        assert isinstance(err, PetAdoptionError)
