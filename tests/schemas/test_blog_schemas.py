# tests/schemas/test_blog_schemas.py
"""Tests for blog payload models."""

import pytest
from pydantic import ValidationError

from app.errors import BadRequestAlertError
from app.schemas import BlogCreate, BlogUpdate

OWNER = {"login": "alice"}


class TestBlogCreate:
    """Tests for BlogCreate."""

    def test_valid_payload(self) -> None:
        blog = BlogCreate.model_validate({"name": "Travel notes", "handle": "travel", "user": OWNER})

        assert blog.id is None
        assert blog.user.login == "alice"

    @pytest.mark.parametrize(
        "payload",
        [
            {"id": 7, "name": "Travel notes", "handle": "travel", "user": OWNER},
            {"id": 7, "name": "ab", "handle": "x", "user": OWNER},
            {"id": 7},
            {"id": "not-a-number"},
        ],
    )
    def test_id_rejected_before_fields(self, payload: dict[str, object]) -> None:
        with pytest.raises(BadRequestAlertError) as exc_info:
            BlogCreate.model_validate(payload)

        assert exc_info.value.error_key == "idexists"
        assert exc_info.value.status_code == 400

    def test_explicit_null_id_is_accepted(self) -> None:
        blog = BlogCreate.model_validate(
            {"id": None, "name": "Travel notes", "handle": "travel", "user": OWNER},
        )

        assert blog.id is None

    def test_invalid_fields_without_id(self) -> None:
        with pytest.raises(ValidationError):
            BlogCreate.model_validate({"name": "ab", "handle": "travel", "user": OWNER})


class TestBlogUpdate:
    """Tests for BlogUpdate."""

    def test_valid_payload(self) -> None:
        blog = BlogUpdate.model_validate(
            {"id": 3, "name": "Travel notes", "handle": "travel", "user": OWNER},
        )

        assert blog.id == 3

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Travel notes", "handle": "travel", "user": OWNER},
            {"id": None, "name": "Travel notes", "handle": "travel", "user": OWNER},
            {"name": "ab", "handle": "x"},
            {},
        ],
    )
    def test_missing_id_rejected_before_fields(self, payload: dict[str, object]) -> None:
        with pytest.raises(BadRequestAlertError) as exc_info:
            BlogUpdate.model_validate(payload)

        assert exc_info.value.error_key == "idnull"

    def test_invalid_fields_with_id(self) -> None:
        with pytest.raises(ValidationError):
            BlogUpdate.model_validate({"id": 3, "name": "ab", "handle": "travel", "user": OWNER})
