import datetime
import logging
from zoneinfo import ZoneInfo

from llamablog.services.content_parser import ContentParser
from llamablog.site_config import SITE
from tests.conftest import post_markdown


def test_parse_reads_frontmatter_and_body(write_post):
    path = write_post(
        "stack-and-heap.md",
        post_markdown(
            title="Stack and Heap",
            tags="[C++, memory]",
            featured="true",
            body="# Intro\n\nBody text.",
        ),
    )

    parsed = ContentParser().parse(path, "stack-and-heap")

    assert parsed is not None
    assert parsed.id == "stack-and-heap"
    assert parsed.file_path == "stack-and-heap.md"
    assert parsed.frontmatter.title == "Stack and Heap"
    assert parsed.frontmatter.tags == ["C++", "memory"]
    assert parsed.frontmatter.featured is True
    assert parsed.frontmatter.author == SITE.author
    assert parsed.content.startswith("# Intro")


def test_missing_tags_default_to_others(write_post):
    path = write_post("a.md", post_markdown())
    parsed = ContentParser().parse(path, "a")
    assert parsed.frontmatter.tags == ["others"]


def test_blank_tags_are_dropped(write_post):
    path = write_post("a.md", post_markdown(tags='["", "  ", debuggers]'))
    parsed = ContentParser().parse(path, "a")
    assert parsed.frontmatter.tags == ["debuggers"]


def test_naive_dates_use_site_timezone(write_post):
    path = write_post("a.md", post_markdown(pub="2024-07-01 10:00:00"))
    parsed = ContentParser().parse(path, "a")
    assert parsed.frontmatter.pubDatetime.tzinfo == ZoneInfo("Europe/London")
    assert parsed.frontmatter.pubDatetime.hour == 10


def test_bare_dates_become_midnight(write_post):
    path = write_post("a.md", post_markdown(pub="2024-07-01", timezone="UTC"))
    parsed = ContentParser().parse(path, "a")
    assert parsed.frontmatter.pubDatetime == datetime.datetime(
        2024, 7, 1, tzinfo=ZoneInfo("UTC")
    )


def test_post_timezone_overrides_site(write_post):
    path = write_post(
        "a.md", post_markdown(pub="2024-07-01 10:00:00", timezone="America/New_York")
    )
    parsed = ContentParser().parse(path, "a")
    assert parsed.frontmatter.pubDatetime.tzinfo == ZoneInfo("America/New_York")


def test_missing_frontmatter_returns_none(write_post, caplog):
    path = write_post("plain.md", "Just text, no metadata.\n")

    with caplog.at_level(logging.WARNING):
        assert ContentParser().parse(path, "plain") is None
    assert "No front-matter" in caplog.text


def test_invalid_frontmatter_returns_none(write_post):
    text = "---\ntitle: No date\ndescription: d\n---\nbody\n"
    path = write_post("broken.md", text)
    assert ContentParser().parse(path, "broken") is None


def test_blank_title_is_rejected(write_post):
    path = write_post("blank.md", post_markdown(title='"   "'))
    assert ContentParser().parse(path, "blank") is None


def test_unknown_timezone_is_rejected(write_post):
    path = write_post("tz.md", post_markdown(timezone="Mars/Olympus"))
    assert ContentParser().parse(path, "tz") is None


def test_bad_yaml_returns_none(write_post):
    path = write_post("yaml.md", "---\ntitle: [unclosed\n---\nbody\n")
    assert ContentParser().parse(path, "yaml") is None


def test_unreadable_file_returns_none(content_dir):
    assert ContentParser().parse(content_dir / "missing.md", "missing") is None
