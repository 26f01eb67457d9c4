import pytest
from fastapi.testclient import TestClient

from emojicopy import config
from emojicopy.catalog import store as emoji_store
from emojicopy.catalog.schemas import EmojiIn
from emojicopy.main import app
from emojicopy.pages import store as page_store

SAMPLE_EMOJIS = [
    EmojiIn(
        emoji="😂",
        name="Face with Tears of Joy",
        category="Smileys & Emotion",
        subcategory="face-smiling",
        description="Laughing so hard it brings tears",
        keywords=["laugh", "lol", "crying", "tears"],
    ),
    EmojiIn(
        emoji="❤️",
        name="Red Heart",
        category="Smileys & Emotion",
        subcategory="heart",
        description="Classic love and affection",
        keywords=["love", "heart", "red"],
    ),
    EmojiIn(
        emoji="💔",
        name="Broken Heart",
        category="Smileys & Emotion",
        subcategory="heart",
        description="Heartbreak and sadness",
        keywords=["heartbreak", "sad"],
    ),
    EmojiIn(
        emoji="🐶",
        name="Dog Face",
        category="Animals & Nature",
        keywords=["dog", "puppy", "pet"],
    ),
    EmojiIn(
        emoji="🔥",
        name="Fire",
        category="Travel & Places",
        keywords=["hot", "lit", "flame"],
    ),
]


@pytest.fixture(autouse=True)
def clean_stores(monkeypatch):
    monkeypatch.setattr(config, "PAGES_FILE", None)
    emoji_store.clear()
    page_store.clear()
    yield
    emoji_store.clear()
    page_store.clear()


@pytest.fixture
def emojis():
    return emoji_store.create_emojis(SAMPLE_EMOJIS)


@pytest.fixture
def client():
    # No context manager: the startup seed stays out of unit tests.
    return TestClient(app)
