from fastapi.testclient import TestClient

from emojicopy import config
from emojicopy.catalog import store as emoji_store
from emojicopy.main import app
from emojicopy.pages import store as page_store
from emojicopy.seed import TOP_KEYWORDS, build_page_stubs, load_emoji_data, seed_database
from emojicopy.text import slugify

from .conftest import SAMPLE_EMOJIS


def test_build_page_stubs():
    (stub,) = build_page_stubs(["fire emoji"])
    assert stub == {
        "slug": "fire-emoji",
        "keyword": "fire emoji",
        "title": "Fire Emoji - Copy & Paste",
        "meta_description": (
            "Copy and paste fire emoji instantly! Find the best fire emoji "
            "for messages, social media, and more."
        ),
        "is_generated": False,
    }


def test_seed_populates_once():
    assert seed_database(SAMPLE_EMOJIS, ["fire emoji", "dog emoji"]) is True
    assert emoji_store.count_emojis() == 5
    assert page_store.count_pages() == 2

    assert seed_database(SAMPLE_EMOJIS, ["cat emoji"]) is False
    assert emoji_store.count_emojis() == 5
    assert page_store.count_pages() == 2


def test_seed_ignores_duplicate_slugs():
    seed_database(SAMPLE_EMOJIS, ["heart emoji", "Heart Emoji", "heart-emoji"])
    assert [p.slug for p in page_store.list_pages()] == ["heart-emoji"]


def test_seed_batches_keep_file_order(monkeypatch):
    monkeypatch.setattr(config, "SEED_BATCH_SIZE", 2)
    seed_database(SAMPLE_EMOJIS, [])
    assert [e.name for e in emoji_store.list_emojis()] == [e.name for e in SAMPLE_EMOJIS]


def test_packaged_dataset_has_unique_slugs():
    data = load_emoji_data()
    assert len(data) > 50
    slugs = [slugify(e.name) for e in data]
    assert len(set(slugs)) == len(slugs)
    assert all(e.keywords for e in data)


def test_startup_seeds_catalog_and_stubs(monkeypatch):
    monkeypatch.setattr(config, "SEED_ON_STARTUP", True)
    with TestClient(app) as client:
        emojis = client.get("/api/emojis").json()
        pages = client.get("/api/pages").json()

    assert len(emojis) == len(load_emoji_data())
    assert len(pages) == len({slugify(k) for k in TOP_KEYWORDS})
    assert not any(p["is_generated"] for p in pages)
