from emojicopy.catalog import store as emoji_store
from emojicopy.pages.content import generate_seo_content, page_meta_description, page_title


def test_title_and_meta_description():
    assert page_title("heart emoji") == "Heart Emoji - Copy & Paste"
    assert page_meta_description("heart emoji") == (
        "Copy and paste heart emoji instantly! Find the best heart emoji "
        "for messages, social media, and more."
    )


def test_content_lists_related_emojis(emojis):
    related = emoji_store.list_emojis(search="heart")
    content = generate_seo_content("heart emoji", related)

    assert content.startswith("# Heart Emoji - Copy & Paste\n")
    assert "## Popular Heart Emojis" in content
    assert "- ❤️ **Red Heart** - Classic love and affection" in content
    assert "- 💔 **Broken Heart** - Heartbreak and sadness" in content
    assert "Related emojis include ❤️ Red Heart, 💔 Broken Heart." in content
    assert "### How do I copy the heart emoji?" in content
    assert "express feelings related to heart." in content


def test_missing_description_falls_back_to_keyword(emojis):
    content = generate_seo_content("fire emoji", emoji_store.list_emojis(search="fire"))
    assert "- 🔥 **Fire** - A popular emoji for expressing fire" in content


def test_no_related_emojis(emojis):
    content = generate_seo_content("unicorn emoji", [])
    assert "Related emojis include" not in content
    assert "## Frequently Asked Questions" in content


def test_only_first_ten_are_listed(emojis):
    many = emoji_store.list_emojis() * 3
    content = generate_seo_content("emoji", many)
    listed = [line for line in content.splitlines() if line.startswith("- ") and "**" in line and " - " in line]
    # The "Where to Use" bullets have bold labels but no glyph prefix.
    glyph_lines = [line for line in listed if not line.startswith("- **")]
    assert len(glyph_lines) == 10


def test_content_is_deterministic(emojis):
    related = emoji_store.list_emojis(search="heart")
    assert generate_seo_content("heart emoji", related) == generate_seo_content("heart emoji", related)
