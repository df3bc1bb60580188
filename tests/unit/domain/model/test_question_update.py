"""Unit tests for QuestionUpdate field selection."""

from datetime import datetime

import pytest

from lighter.domain.error import ValidationError
from lighter.domain.model import QuestionUpdate
from tests.conftest import make_question


class TestQuestionUpdateFromRequest:
    """Tests for QuestionUpdate.from_request."""

    def test_only_present_fields_are_selected(self):
        update = QuestionUpdate.from_request(summary="why", content="new body")

        assert update.changed_fields() == {"content": "new body"}
        assert update.comment.content == "why"

    def test_blank_text_and_empty_tags_are_absent(self):
        update = QuestionUpdate.from_request(
            summary="why", title="  ", content="", tags=[]
        )

        assert update.changed_fields() == {}

    def test_tags_are_deduplicated(self):
        update = QuestionUpdate.from_request(summary="why", tags=["a", "b", "a"])

        assert [t.root for t in update.changed_fields()["tags"]] == ["a", "b"]

    def test_blank_summary_raises(self):
        with pytest.raises(ValidationError):
            QuestionUpdate.from_request(summary="\t")

    def test_invalid_tag_raises(self):
        """Tags longer than 50 characters fail validation."""
        with pytest.raises(ValueError):
            QuestionUpdate.from_request(summary="why", tags=["x" * 51])

    def test_title_over_limit_raises(self):
        """Titles follow the question's 300 character limit."""
        with pytest.raises(ValueError, match="title"):
            QuestionUpdate.from_request(summary="why", title="x" * 301)

    def test_content_over_limit_raises(self):
        with pytest.raises(ValueError, match="content"):
            QuestionUpdate.from_request(summary="why", content="x" * 50001)


class TestQuestionUpdateApplyTo:
    """Tests for QuestionUpdate.apply_to."""

    def test_apply_keeps_untouched_fields(self):
        question = make_question(title="Title", content="Body", tags=["rust"])
        update = QuestionUpdate.from_request(summary="retitle", title="New title")

        updated = update.apply_to(question)

        assert updated.title == "New title"
        assert updated.content == "Body"
        assert updated.tags == question.tags
        assert updated.id == question.id
        assert [c.content for c in updated.comments] == ["retitle"]
        assert updated.comments[0].created_at <= datetime.now()


class TestQuestionTitle:
    """Tests for Question title validation."""

    def test_whitespace_title_raises(self):
        with pytest.raises(ValueError, match="must not be blank"):
            make_question(title="   ")

    def test_title_with_surrounding_space_is_kept(self):
        question = make_question(title="  Padded  ")

        assert question.title == "  Padded  "
