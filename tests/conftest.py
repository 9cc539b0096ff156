"""测试配置和共享 Fixtures。"""

import pytest

from skillswap.models import Location, Profile
from skillswap.services import ChatStore, ProfileStore


# ============================================================================
# Mock Services
# ============================================================================

class MockLLMService:
    """测试用 Mock LLM 服务。

    可以通过设置 response 属性来控制返回值。
    可以通过设置 should_fail 来模拟失败。
    """

    def __init__(self):
        self.response = "Trade 1 hour of Yoga for 1 hour of Spanish, weekly, at the park."
        self.should_fail = False
        self.call_count = 0
        self.last_prompt = None

    def call(self, prompt: str) -> str:
        self.call_count += 1
        self.last_prompt = prompt
        if self.should_fail:
            raise Exception("Mock LLM failure")
        return self.response


class FakeGeocoder:
    """固定返回坐标的 Geocoder。"""

    def __init__(self, location=None):
        self.location = location or Location(19.076, 72.8777)
        self.calls = []

    def geocode(self, country, region, city, postal_code):
        self.calls.append((country, region, city, postal_code))
        return self.location


# ============================================================================
# Profile Fixtures
# ============================================================================

@pytest.fixture
def yogi() -> Profile:
    """想学西班牙语、会教瑜伽的用户。"""
    return Profile(
        id="u-yogi",
        display_name="Asha",
        city="Mumbai",
        region="Maharashtra",
        country="India",
        postal_code="400001",
        teach_skills=["Beginner Yoga", "Cooking"],
        want_skills=["Spanish", "Guitar"],
        location=Location(19.07, 72.87),
    )


@pytest.fixture
def linguist() -> Profile:
    """会教西班牙语、想学瑜伽的用户。"""
    return Profile(
        id="u-ling",
        display_name="Diego",
        city="Pune",
        region="Maharashtra",
        country="India",
        postal_code="411001",
        teach_skills=["Spanish"],
        want_skills=["Yoga"],
        location=Location(18.52, 73.85),
    )


@pytest.fixture
def stranger() -> Profile:
    """技能完全不相关的用户（无坐标）。"""
    return Profile(
        id="u-str",
        display_name="Mei",
        city="Delhi",
        country="India",
        teach_skills=["Pottery"],
        want_skills=["Chess"],
    )


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_llm() -> MockLLMService:
    """创建 Mock LLM 服务。"""
    return MockLLMService()


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def profile_store(tmp_path) -> ProfileStore:
    return ProfileStore(tmp_path / "profiles.json")


@pytest.fixture
def chat_store(tmp_path) -> ChatStore:
    return ChatStore(tmp_path / "chats")


@pytest.fixture
def client(tmp_path, mock_llm, fake_geocoder):
    """指向临时数据目录的 Flask 测试客户端。"""
    from app import app, init_services

    app.config["TESTING"] = True
    init_services(app, tmp_path / "data", llm_service=mock_llm, geocoder=fake_geocoder)
    with app.test_client() as test_client:
        yield test_client
