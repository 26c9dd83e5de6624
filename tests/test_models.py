import pytest
from markupsafe import Markup
from conftest import BLOG
from errors import DecodeError
from models import BlogPost, EXCERPT_LENGTH


def test_blog_content_is_trusted_markup():
    blog = BlogPost.from_json(BLOG)
    assert isinstance(blog.content, Markup)
    assert str(blog.content) == BLOG["content"]


def test_excerpt_strips_tags():
    blog = BlogPost.from_json(BLOG)
    assert blog.excerpt == "Bloom the grounds for 30 seconds."


def test_excerpt_keeps_paragraphs_apart():
    blog = BlogPost.from_json(dict(BLOG, content="<p>Grind fine.</p><p>Tamp <b>hard</b>!</p>"))
    assert blog.excerpt == "Grind fine. Tamp hard!"


def test_excerpt_truncates_long_posts():
    blog = BlogPost.from_json(dict(BLOG, content="<p>" + "word " * 200 + "</p>"))
    assert blog.excerpt.endswith("…")
    assert len(blog.excerpt) <= EXCERPT_LENGTH + 1


@pytest.mark.parametrize("field", ["id", "owner_username", "title", "content", "created_at", "updated_at"])
def test_missing_field_is_decode_error(field):
    data = dict(BLOG)
    del data[field]
    with pytest.raises(DecodeError):
        BlogPost.from_json(data)


def test_bool_id_is_rejected():
    with pytest.raises(DecodeError):
        BlogPost.from_json(dict(BLOG, id=True))


@pytest.mark.parametrize("stamp, micro", [
    ("2024-03-01T09:15:00.5Z", 500000),
    ("2024-03-01T09:15:00.12345Z", 123450),
    ("2024-03-01T09:15:00.123Z", 123000),
    ("2024-03-01T09:15:00.123456789Z", 123456),
    ("2024-03-01T09:15:00Z", 0),
])
def test_short_and_long_fractions_decode(stamp, micro):
    blog = BlogPost.from_json(dict(BLOG, created_at=stamp))
    assert blog.created_at.microsecond == micro
    assert blog.created_at.utcoffset().total_seconds() == 0


def test_offset_timestamps_keep_their_zone():
    blog = BlogPost.from_json(dict(BLOG, updated_at="2024-03-01T09:15:00.25+02:00"))
    assert blog.updated_at.microsecond == 250000
    assert blog.updated_at.utcoffset().total_seconds() == 7200
