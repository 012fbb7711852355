"""Unit tests for decoding failure bodies."""

import pytest

from .error_payload import decode_error
from .errors import FieldError, GenericError, UnparseableError, ValidationFailed


def describe_decode_error():
    def it_decodes_validation_failures():
        body = b'{"message":"Validation Failed","errors":[{"resource":"Issue","field":"title","code":"missing"}]}'
        error = decode_error(body, 422)
        assert isinstance(error, ValidationFailed)
        assert error.status == 422
        assert error.message == "Validation Failed"
        assert error.field_errors == (FieldError(resource="Issue", field="title", code="missing"),)

    def it_keeps_field_error_order_and_details():
        body = {
            "message": "Validation Failed",
            "errors": [
                {"resource": "Release", "code": "custom", "message": "Published releases must have a valid tag"},
                {"resource": "Release", "field": "tag_name", "code": "already_exists"},
            ],
            "documentation_url": "https://docs.github.com/rest/releases",
        }
        error = decode_error(body, 422)
        assert [e.code for e in error.field_errors] == ["custom", "already_exists"]
        assert error.field_errors[0].field is None
        assert error.field_errors[0].message == "Published releases must have a valid tag"
        assert error.documentation_url == "https://docs.github.com/rest/releases"
        assert error.by_field()["tag_name"][0].code == "already_exists"

    def it_decodes_message_only_failures():
        error = decode_error(b'{"message":"Not Found","documentation_url":"https://docs.github.com"}', 404)
        assert type(error) is GenericError
        assert error.message == "Not Found"
        assert error.documentation_url == "https://docs.github.com"

    def it_treats_an_empty_error_list_as_generic():
        assert type(decode_error(b'{"message":"Bad","errors":[]}', 400)) is GenericError

    def it_falls_back_to_generic_on_malformed_field_errors():
        error = decode_error(b'{"message":"Bad","errors":["just a string"]}', 400)
        assert type(error) is GenericError
        assert error.message == "Bad"

    @pytest.mark.parametrize(
        "body",
        [b'{"foo":"bar"}', b"[1, 2]", b"upstream timed out", b"", b'{"message": 5}', b"null"],
    )
    def it_never_raises_on_unknown_shapes(body):
        error = decode_error(body, 500)
        assert isinstance(error, UnparseableError)
        assert error.status == 500
        assert error.raw_body == body.decode()

    def it_replaces_undecodable_bytes():
        error = decode_error(b"\xff\xfe", 502)
        assert isinstance(error, UnparseableError)
        assert error.raw_body == "\ufffd\ufffd"
