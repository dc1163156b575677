import asyncio
import copy
import logging
import pickle

import pytest

from docerrors.config import ConfigStore
from docerrors.exceptions import UnsupportedModel
from docerrors.validation import FriendlyValidationError, handle_validation_error, validate_document


class Users:
    schema = {
        "username": {"type": "String", "$name": "account name"},
        "fullName": {"type": "String", "minlength": 3},
        "age": {"type": "Number", "max": 200},
    }


class MultiFailure(Exception):
    def __init__(self, errors):
        super().__init__("Validation failed")
        self.errors = errors


class UserDocument:
    schema = Users.schema

    def __init__(self, failure=None, raise_failure=False):
        self.failure = failure
        self.raise_failure = raise_failure

    def validate(self):
        if self.raise_failure:
            raise self.failure
        return self.failure


class AsyncUserDocument(UserDocument):
    async def validate(self):
        return self.failure


def _multi():
    return {
        "name": "ValidationError",
        "errors": {
            "username": {"kind": "required", "path": "username"},
            "fullName": {"kind": "minlength", "path": "fullName", "value": "Bi", "properties": {"minlength": 3}},
            "age": {"name": "CastError", "kind": "Number", "path": "age", "value": "old"},
        },
    }


def test_multi_failure_composite():
    store = ConfigStore.with_defaults()
    error = handle_validation_error(Users, _multi(), store=store)

    assert isinstance(error, FriendlyValidationError)
    assert error.messages == [
        "Account name is required",
        "FullName must be at least 3 characters long",
        "Age must be a number",
    ]
    assert error.message == ", ".join(error.messages)
    assert str(error) == error.message
    assert error.model_name == "Users"
    assert error.options == {"package": "DEFAULT", "exclude_errors": []}
    assert error.name == "ValidationError"
    assert error.code == "ERR_DOCUMENT_VALIDATION"
    assert [detail["context"]["kind"] for detail in error.errors] == ["required", "minlength", "type"]
    assert error["errors"][1]["template"] == "{path_name} must be at least {min_length} characters long"


def test_order_follows_declaration_with_custom_templates():
    store = ConfigStore.with_defaults()
    store.set_message_templates({"DEFAULT": "{path} bad", "minlength": "{path} short"}, "en")
    error = handle_validation_error(Users, _multi(), store=store, package="en")
    assert error.messages == ["Username bad", "FullName short", "Age bad"]


def test_exclusion_filters_per_field():
    error = handle_validation_error(
        Users, _multi(), store=ConfigStore.with_defaults(), exclude_errors=["required", "type"]
    )
    assert error.messages == ["FullName must be at least 3 characters long"]
    assert error.options["exclude_errors"] == ["required", "type"]


def test_full_exclusion_yields_none():
    raw = {"name": "ValidatorError", "kind": "required", "path": "username"}
    assert handle_validation_error(Users, raw, store=ConfigStore.with_defaults(), exclude_errors="required") is None


def test_exclusion_matches_raw_and_resolved_kinds():
    raw = {"errors": {"age": {"name": "CastError", "kind": "Number", "path": "age"}}}
    store = ConfigStore.with_defaults()
    assert handle_validation_error(Users, raw, store=store, exclude_errors="type") is None
    raw = {"errors": {"username": {"kind": "user defined", "path": "username", "message": "taken"}}}
    assert handle_validation_error(Users, raw, store=store, exclude_errors="user defined") is None


def test_unsupported_shape_returns_original_object():
    raw = {"message": "connection reset"}
    assert handle_validation_error(Users, raw, store=ConfigStore.with_defaults()) is raw
    exc = RuntimeError("boom")
    assert handle_validation_error(Users, exc, store=ConfigStore.with_defaults()) is exc


def test_unsupported_model_raises():
    with pytest.raises(UnsupportedModel):
        handle_validation_error("Users", _multi(), store=ConfigStore.with_defaults())


def test_unique_failure_scenario():
    store = ConfigStore.with_defaults()
    raw = {
        "name": "MongoError",
        "code": 11000,
        "message": 'E11000 duplicate key error collection: test.Users index: username_1 dup key: { : "bob" }',
    }
    error = handle_validation_error(Users, raw, store=store)
    assert error.messages == ["Account name bob has already been used, please choose another"]
    assert error.errors[0]["context"]["index"] == "username_1"
    assert error.errors[0]["context"]["direction"] == "1"


def test_exception_with_errors_attribute():
    failure = MultiFailure({"username": {"kind": "required", "path": "username"}})
    error = handle_validation_error(Users, failure, store=ConfigStore.with_defaults())
    assert error.messages == ["Account name is required"]


def test_link_options_and_additional_fields():
    store = ConfigStore.with_defaults()
    store.configure(
        {
            "link_to_errors": "details",
            "link_to_origin_error": "origin",
            "msg_delimiter": "; ",
            "additional_error_fields": {"status": 422},
        }
    )
    raw = _multi()
    error = handle_validation_error(Users, raw, store=store)
    payload = error.to_dict()
    assert "errors" not in payload
    assert len(payload["details"]) == 3
    assert payload["origin"] is raw
    assert payload["status"] == 422
    assert payload["message"].count("; ") == 2


def test_link_to_errors_disabled():
    store = ConfigStore.with_defaults()
    store.configure({"link_to_errors": None})
    error = handle_validation_error(Users, _multi(), store=store)
    assert "errors" not in error
    with pytest.raises(AttributeError):
        error.errors


def test_transformation_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="docerrors.validation.pipeline")
    handle_validation_error(Users, _multi(), store=ConfigStore.with_defaults())
    messages = [record.message for record in caplog.records if record.name == "docerrors.validation.pipeline"]
    assert any("handle_validation_error took" in message for message in messages)


def test_validate_document_valid_resolves_none():
    assert asyncio.run(validate_document(UserDocument(), store=ConfigStore.with_defaults())) is None


def test_validate_document_returned_failure():
    document = UserDocument(_multi())
    error = asyncio.run(validate_document(document, store=ConfigStore.with_defaults(), package="DEFAULT"))
    assert isinstance(error, FriendlyValidationError)
    assert error.model_name == "UserDocument"


def test_validate_document_raised_failure():
    document = UserDocument(MultiFailure({"age": {"kind": "max", "path": "age", "properties": {"max": 200}}}), True)
    error = asyncio.run(validate_document(document, store=ConfigStore.with_defaults()))
    assert error.messages == ["Age must not be greater than 200"]


def test_validate_document_awaits_coroutine():
    document = AsyncUserDocument({"kind": "required", "path": "username"})
    error = asyncio.run(validate_document(document, store=ConfigStore.with_defaults()))
    assert error.messages == ["Account name is required"]


def test_validate_document_reraises_unrelated_exceptions():
    document = UserDocument(RuntimeError("database down"), True)
    with pytest.raises(RuntimeError):
        asyncio.run(validate_document(document, store=ConfigStore.with_defaults()))


@pytest.mark.parametrize("document", [None, "user", {"schema": {}}, object()])
def test_validate_document_rejects_non_documents(document):
    with pytest.raises(UnsupportedModel):
        asyncio.run(validate_document(document, store=ConfigStore.with_defaults()))


def test_camel_case_context_field_renders():
    store = ConfigStore.with_defaults()
    store.merge_error_contexts({"type": {"stringValue": "stringValue"}})
    store.set_message_templates({"type": "{path_name} got {stringValue}", "DEFAULT": "{path_name}"}, "en")
    raw = {"errors": {"age": {"name": "CastError", "kind": "Number", "path": "age", "stringValue": '"old"'}}}
    error = handle_validation_error(Users, raw, store=store, package="en")
    assert error.messages == ['Age got "old"']


def test_composite_survives_pickle_and_deepcopy():
    error = handle_validation_error(Users, _multi(), store=ConfigStore.with_defaults())
    for clone in (pickle.loads(pickle.dumps(error)), copy.deepcopy(error)):
        assert isinstance(clone, FriendlyValidationError)
        assert clone.messages == error.messages
        assert clone.message == error.message
        assert clone.model_name == "Users"
        assert clone.code == "ERR_DOCUMENT_VALIDATION"
        assert clone.to_dict() == error.to_dict()


class DuplicateKeyError(Exception):
    def __init__(self, error, code, details):
        super().__init__(f"{error}, full error: {details}")
        self.code = code
        self.details = details


def test_driver_duplicate_key_exception_is_translated():
    message = 'E11000 duplicate key error collection: test.Users index: username_1 dup key: { : "bob" }'
    exc = DuplicateKeyError(message, 11000, {"errmsg": message, "code": 11000})
    error = handle_validation_error(Users, exc, store=ConfigStore.with_defaults())
    assert isinstance(error, FriendlyValidationError)
    assert error.messages == ["Account name bob has already been used, please choose another"]
