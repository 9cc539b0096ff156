"""数据模型单元测试。"""

import pytest

from skillswap.models import (
    Account,
    Candidate,
    Decision,
    Direction,
    Location,
    Message,
    Profile,
    ValidationError,
    clean_skills,
)


class TestProfile:
    """测试 Profile 数据类。"""

    def test_blank_skills_are_filtered(self):
        """测试创建时过滤空白技能。"""
        profile = Profile(
            id="u1",
            display_name="Test",
            teach_skills=["Yoga", "", "   ", " Cooking "],
            want_skills=["", ""],
        )

        assert profile.teach_skills == ["Yoga", "Cooking"]
        assert profile.want_skills == []

    def test_default_values(self):
        profile = Profile(id="u1", display_name="Min")

        assert profile.teach_skills == []
        assert profile.want_skills == []
        assert profile.location is None
        assert profile.matches == []

    def test_place(self, stranger):
        assert stranger.place == "Delhi, India"
        assert Profile(id="x", display_name="X").place == ""

    def test_to_dict_from_dict(self, yogi):
        data = yogi.to_dict()

        assert data["location"] == {"lat": 19.07, "lng": 72.87}
        assert Profile.from_dict(data) == yogi

    def test_from_dict_with_missing_optional_fields(self):
        """测试 from_dict 处理缺失的可选字段。"""
        profile = Profile.from_dict({"id": "u1", "display_name": "Partial"})

        assert profile.city == ""
        assert profile.teach_skills == []
        assert profile.location is None

    @pytest.mark.parametrize("data", [
        {"display_name": "No id"},
        {"id": "u1"},
        {"id": "u1", "display_name": "   "},
        {"id": 7, "display_name": "Numeric id"},
        {"id": "u1", "display_name": "X", "teach_skills": "Yoga"},
        {"id": "u1", "display_name": "X", "want_skills": ["ok", 3]},
        {"id": "u1", "display_name": "X", "location": {"lat": "19"}},
        {"id": "u1", "display_name": "X", "location": [1, 2]},
        "not a dict",
    ])
    def test_from_dict_rejects_invalid_records(self, data):
        """测试非法记录在边界处被拒绝。"""
        with pytest.raises(ValidationError):
            Profile.from_dict(data)


class TestLocation:

    def test_from_dict_accepts_ints(self):
        assert Location.from_dict({"lat": 1, "lng": 2}) == Location(1.0, 2.0)

    def test_rejects_bool(self):
        with pytest.raises(ValidationError):
            Location.from_dict({"lat": True, "lng": 2})


class TestMessageAndAccount:

    def test_message_roundtrip(self):
        message = Message(id="1", sender_id="a", receiver_id="b", text="hi", timestamp=1700000000000)

        restored = Message.from_dict(message.to_dict())

        assert restored == message
        assert restored.is_ai_suggestion is False

    def test_message_requires_sender(self):
        with pytest.raises(ValidationError):
            Message.from_dict({"id": "1", "receiver_id": "b", "text": "hi", "timestamp": 1})

    def test_account_requires_hash(self):
        with pytest.raises(ValidationError):
            Account.from_dict({"user_id": "u1", "email": "a@b.c"})


class TestMatchModels:

    def test_candidate_to_dict_extends_profile(self, linguist):
        candidate = Candidate(profile=linguist, match_score=4, matching_teach_skills=["Spanish"])

        data = candidate.to_dict()

        assert data["id"] == "u-ling"
        assert data["match_score"] == 4
        assert data["matching_teach_skills"] == ["Spanish"]
        assert data["matching_want_skills"] == []

    def test_decision_to_dict(self):
        assert Decision("u2", Direction.REJECT).to_dict() == {"candidate_id": "u2", "direction": "reject"}


def test_clean_skills_keeps_order():
    assert clean_skills(["b", " ", "a", "c "]) == ["b", "a", "c"]
