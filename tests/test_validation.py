"""Tests for request and job id validation."""

import uuid

import pytest

from reelcompose.errors import ValidationError
from reelcompose.templates import TemplateRegistry
from reelcompose.validation import validate_job_id, validate_request

from conftest import make_template


@pytest.fixture
def registry():
    return TemplateRegistry([
        make_template(id="zoom"),
        make_template(id="short", search_length=(2, 20), title_length_bounds=(2, 20)),
    ])


def _request(**overrides):
    r = {"search": "mountain lake", "title": "Summer Trip", "soundtrack": "disco"}
    r.update(overrides)
    return r


class TestValidateRequest:
    def test_valid_request_uses_default_template(self, registry):
        clean, template = validate_request(_request(), registry)
        assert template.id == "zoom"
        assert clean == {
            "search": "mountain lake",
            "title": "Summer Trip",
            "soundtrack": "disco",
            "template": "zoom",
        }

    def test_explicit_template(self, registry):
        _, template = validate_request(_request(template="short"), registry)
        assert template.id == "short"

    def test_unknown_template(self, registry):
        with pytest.raises(ValidationError, match="template"):
            validate_request(_request(template="nope"), registry)

    @pytest.mark.parametrize("field", ["search", "title", "soundtrack"])
    def test_missing_field(self, registry, field):
        r = _request()
        del r[field]
        with pytest.raises(ValidationError, match=field):
            validate_request(r, registry)

    @pytest.mark.parametrize("value", ["cats!", "a-b", "x\ny", "über"])
    def test_rejects_non_alphanumeric_search(self, registry, value):
        with pytest.raises(ValidationError, match="letters, digits and spaces"):
            validate_request(_request(search=value), registry)

    def test_too_short_title(self, registry):
        with pytest.raises(ValidationError, match="between 2 and 30"):
            validate_request(_request(title="x"), registry)

    def test_length_bounds_are_per_template(self, registry):
        title = "a" * 25
        validate_request(_request(title=title), registry)
        with pytest.raises(ValidationError, match="between 2 and 20"):
            validate_request(_request(title=title, template="short"), registry)

    def test_unknown_soundtrack(self, registry):
        with pytest.raises(ValidationError, match="soundtrack"):
            validate_request(_request(soundtrack="jazz"), registry)

    @pytest.mark.parametrize("soundtrack", [["disco"], {"disco": 1}, 7])
    def test_non_string_soundtrack(self, registry, soundtrack):
        with pytest.raises(ValidationError, match="soundtrack: must be a string"):
            validate_request(_request(soundtrack=soundtrack), registry)

    def test_non_string_field(self, registry):
        with pytest.raises(ValidationError, match="must be a string"):
            validate_request(_request(title=42), registry)

    def test_validation_error_is_value_error(self, registry):
        with pytest.raises(ValueError):
            validate_request(_request(search=""), registry)


class TestValidateJobId:
    def test_accepts_uuid4(self):
        job_id = str(uuid.uuid4())
        assert validate_job_id(job_id) == job_id

    def test_accepts_uuid5(self):
        job_id = str(uuid.uuid5(uuid.NAMESPACE_URL, "https://example.com"))
        assert validate_job_id(job_id) == job_id

    def test_rejects_uuid1(self):
        with pytest.raises(ValidationError, match="version"):
            validate_job_id(str(uuid.uuid1()))

    @pytest.mark.parametrize("value", ["", "not-a-uuid", "1234", None])
    def test_rejects_malformed(self, value):
        with pytest.raises(ValidationError):
            validate_job_id(value)

    def test_rejects_unhyphenated(self):
        with pytest.raises(ValidationError, match="not a valid UUID"):
            validate_job_id(uuid.uuid4().hex)
