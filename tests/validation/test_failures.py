from collections import OrderedDict

from docerrors.validation import FailureKind, ValidationFailure
from docerrors.validation.failures import is_duplicate_key_error, sub_failures_of


class CastError(Exception):
    def __init__(self, kind, path, value):
        super().__init__(f"Cast to {kind} failed for value {value!r} at path {path!r}")
        self.kind = kind
        self.path = path
        self.value = value
        self.stringValue = repr(value)
        self._private = "hidden"


def test_from_mapping_adds_snake_case_aliases():
    raw = {
        "kind": "enum",
        "path": "role",
        "value": "super",
        "properties": {"enumValues": ["admin", "normal"]},
        "reason": None,
    }
    failure = ValidationFailure.from_raw(raw)
    assert failure.properties["enum_values"] == ["admin", "normal"]
    assert failure.properties["enumValues"] == ["admin", "normal"]
    assert failure.extra == {"reason": None}
    assert failure.is_leaf
    assert raw["properties"] == {"enumValues": ["admin", "normal"]}


def test_from_exception_reads_attributes():
    failure = ValidationFailure.from_raw(CastError("Number", "age", "old"))
    assert failure.name == "CastError"
    assert failure.is_cast_error
    assert failure.kind == "Number"
    assert failure.message == "Cast to Number failed for value 'old' at path 'age'"
    assert failure.extra == {"stringValue": "'old'", "string_value": "'old'"}


def test_enum_kinds_are_accepted():
    failure = ValidationFailure.from_raw({"kind": FailureKind.REQUIRED, "path": "a"})
    assert failure.kind == "required"


def test_to_record_flattens_extra():
    failure = ValidationFailure(kind="unique", path="username", extra={"index": "username_1"})
    record = failure.to_record()
    assert record["index"] == "username_1"
    assert record["kind"] == "unique"
    assert record["properties"] == {}


def test_sub_failures_preserve_order():
    errors = OrderedDict([("b", {"kind": "required"}), ("a", {"kind": "required"})])
    assert list(sub_failures_of({"errors": errors})) == ["b", "a"]
    assert sub_failures_of({"errors": {}}) is None
    assert sub_failures_of("errors") is None


def test_duplicate_key_marker():
    assert is_duplicate_key_error({"name": "MongoServerError", "code": 11000})
    assert not is_duplicate_key_error({"name": "MongoServerError", "code": 121})
    assert not is_duplicate_key_error({"name": "ValidationError", "code": 11000})
