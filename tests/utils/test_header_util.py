# tests/utils/test_header_util.py
"""Tests for the alert header builders."""

from app.utils.header_util import (
    create_alert,
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
    create_failure_alert,
)


class TestCreateAlert:
    def test_header_names_use_application_name(self) -> None:
        headers = create_alert("blogApp", "blogApp.blog.created", "1")

        assert headers == {
            "X-blogApp-alert": "blogApp.blog.created",
            "X-blogApp-params": "1",
        }

    def test_param_is_url_encoded(self) -> None:
        headers = create_alert("blogApp", "msg", "a b/c&d")

        assert headers["X-blogApp-params"] == "a%20b%2Fc%26d"


class TestEntityAlerts:
    def test_translated_messages(self) -> None:
        assert create_entity_creation_alert("blogApp", True, "blog", "3")["X-blogApp-alert"] == (
            "blogApp.blog.created"
        )
        assert create_entity_update_alert("blogApp", True, "blog", "3")["X-blogApp-alert"] == (
            "blogApp.blog.updated"
        )
        assert create_entity_deletion_alert("blogApp", True, "blog", "3")["X-blogApp-alert"] == (
            "blogApp.blog.deleted"
        )

    def test_plain_messages(self) -> None:
        assert create_entity_creation_alert("blogApp", False, "blog", "3")["X-blogApp-alert"] == (
            "A new blog is created with identifier 3"
        )
        assert create_entity_update_alert("blogApp", False, "blog", "3")["X-blogApp-alert"] == (
            "A blog is updated with identifier 3"
        )
        assert create_entity_deletion_alert("blogApp", False, "blog", "3")["X-blogApp-alert"] == (
            "A blog is deleted with identifier 3"
        )

    def test_params_carry_identifier(self) -> None:
        headers = create_entity_deletion_alert("blogApp", True, "blog", "42")

        assert headers["X-blogApp-params"] == "42"


class TestFailureAlert:
    def test_translated(self) -> None:
        headers = create_failure_alert("blogApp", True, "blog", "idexists", "Already has an id")

        assert headers == {"X-blogApp-error": "error.idexists", "X-blogApp-params": "blog"}

    def test_plain(self) -> None:
        headers = create_failure_alert("blogApp", False, "blog", "idnull", "Invalid id")

        assert headers["X-blogApp-error"] == "Invalid id"
