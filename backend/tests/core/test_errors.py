"""Error taxonomy — codes, HTTP mapping, operation context and cause retention."""

from checkin.core.errors import (
    BadRequest, CheckinError, ErrorCategory, ErrorSeverity,
    NotFound, NotUnique, ServerError,
)


def test_every_kind_is_a_checkin_error():
    errors = [
        BadRequest("bad", "op"), NotFound("missing", "op"),
        NotUnique("taken", "op"), ServerError(RuntimeError("boom"), "op"),
    ]
    assert all(isinstance(e, CheckinError) for e in errors)


def test_http_status_mapping():
    assert NotFound("missing").http_status == 404
    assert NotUnique("taken").http_status == 400
    assert BadRequest("bad").http_status == 400
    assert ServerError(RuntimeError("boom")).http_status == 500


def test_operation_is_carried_in_context():
    err = NotFound("Missing Facility '7'", "FacilityRepository.delete")
    assert err.operation == "FacilityRepository.delete"
    assert err.context.operation == "FacilityRepository.delete"
    assert err.message == "Missing Facility '7'"


def test_server_error_retains_cause_without_leaking_it():
    cause = RuntimeError("password=hunter2 in DSN")
    err = ServerError(cause, "FacilityRepository.list")
    assert err.cause is cause
    assert err.__cause__ is cause
    assert err.category == ErrorCategory.DATABASE
    assert err.severity == ErrorSeverity.CRITICAL
    assert "hunter2" not in err.message
    assert "FacilityRepository.list" in err.message
    assert err.context.debug_info == {"cause_type": "RuntimeError"}


def test_bad_request_keeps_field():
    err = BadRequest("name too long", "FacilityRepository.create", field="name")
    assert err.field == "name"
    assert err.category == ErrorCategory.VALIDATION


def test_to_response_envelope():
    body = NotUnique("taken", "FacilityRepository.create").to_response()["error"]
    assert body["code"] == "NOT_UNIQUE"
    assert body["message"] == "taken"
    assert body["category"] == "conflict"
    assert body["severity"] == "error"
    assert body["context"] == {"operation": "FacilityRepository.create"}
    assert "timestamp" in body
