import datetime

import pytest

from blog.exceptions import (
    InvalidPostDateError,
    MalformedFrontMatterError,
    PostNotFoundError,
)
from blog.schemas.blog import BASIC_META_TAGS, PostField
from blog.services.content_parser import ContentParser
from blog.services.posts_service import (
    PostsService,
    filter_published,
    parse_post_date,
    project_fields,
    sort_posts_by_date,
)
from tests.conftest import FakeRepo


def _service(sources: dict[str, str]) -> PostsService:
    return PostsService(repo=FakeRepo(sources), parser=ContentParser())


FULL_POST = """
---
title: Module federation in practice
date: 2023-06-18
author: Bartosz
keywords: [webpack, module-federation]
ogTitle: Module federation
series: frontend-architecture
---
Sharing code between **apps**.
"""


def test_get_post_by_slug_omits_missing_fields():
    service = _service(
        {
            "x": """
            ---
            title: "X"
            date: "2020-01-01"
            ---
            body
            """
        }
    )

    result = service.get_post_by_slug("x", ["title", "excerpt"])

    assert result == {"title": "X"}


def test_full_field_load_returns_exactly_header_fields_plus_content():
    service = _service({"federation": FULL_POST})

    result = service.get_post_by_slug("federation")

    assert set(result) == {"title", "date", "author", "keywords", "ogTitle", "content"}
    assert result["date"] == datetime.date(2023, 6, 18)
    assert result["keywords"] == ["webpack", "module-federation"]
    assert result["content"].strip() == "Sharing code between **apps**."


@pytest.mark.parametrize(
    "fields",
    [
        ["title"],
        ["slug", "excerpt"],
        ["content"],
        ["series", "date"],
        [],
    ],
)
def test_restricted_fields_never_leak_other_keys(fields):
    service = _service({"federation": FULL_POST})

    result = service.get_post_by_slug("federation", fields)

    assert set(result) <= set(fields)


def test_unknown_header_fields_are_returned_when_requested():
    service = _service({"federation": FULL_POST})

    assert service.get_post_by_slug("federation", ["series"]) == {
        "series": "frontend-architecture"
    }


def test_content_is_populated_even_when_body_is_empty():
    service = _service({"empty": "---\ntitle: Empty\n---\n"})

    result = service.get_post_by_slug("empty", ["content", "excerpt"])

    assert list(result) == ["content"]
    assert result["content"].strip() == ""


def test_fields_accept_enum_members():
    service = _service({"federation": FULL_POST})

    result = service.get_post_by_slug("federation", [PostField.TITLE, PostField.CONTENT])

    assert set(result) == {"title", "content"}


def test_get_post_by_slug_strips_extension():
    repo = FakeRepo({"federation": FULL_POST})
    service = PostsService(repo=repo, parser=ContentParser())

    service.get_post_by_slug("federation.md", ["title"])

    assert repo.reads == ["federation"]


def test_get_post_by_slug_raises_for_missing_post():
    with pytest.raises(PostNotFoundError):
        _service({}).get_post_by_slug("ghost")


def test_get_all_posts_keeps_store_order():
    service = _service(
        {
            "b": "---\ntitle: B\ndate: 2021-01-01\n---\n",
            "a": "---\ntitle: A\ndate: 2023-01-01\n---\n",
        }
    )

    result = service.get_all_posts(["title"])

    assert result == [{"title": "B"}, {"title": "A"}]


def test_get_all_posts_propagates_malformed_header():
    service = _service(
        {
            "good": "---\ntitle: Good\n---\nbody\n",
            "bad": "---\ntitle: [oops\n---\nbody\n",
        }
    )

    with pytest.raises(MalformedFrontMatterError):
        service.get_all_posts()


def test_get_all_posts_with_slugs_prefers_header_slug():
    service = _service(
        {
            "2023-06-18-federation": "---\ntitle: Federation\nslug: federation\n---\n",
            "single-spa": "---\ntitle: Single spa\n---\n",
        }
    )

    result = service.get_all_posts_with_slugs(["title", "slug"])

    assert [p["slug"] for p in result] == ["federation", "single-spa"]


def test_default_fields_cover_social_metadata():
    assert "twitterCard" in BASIC_META_TAGS
    assert "ogURL" in BASIC_META_TAGS
    assert "draft" not in BASIC_META_TAGS


def test_sort_posts_by_date_example():
    posts = [
        {"title": "first", "date": "2021-01-01"},
        {"title": "latest", "date": "2023-06-18"},
        {"title": "middle", "date": "2022-06-20"},
    ]

    result = sort_posts_by_date(posts)

    assert [p["date"] for p in result] == ["2023-06-18", "2022-06-20", "2021-01-01"]


def test_sort_posts_by_date_is_idempotent_and_stable():
    posts = [
        {"title": "a", "date": datetime.date(2022, 6, 20)},
        {"title": "b", "date": "2022-06-20"},
        {"title": "undated"},
        {"title": "c", "date": "2023-06-18"},
    ]

    once = sort_posts_by_date(posts)
    twice = sort_posts_by_date(once)

    assert [p["title"] for p in once] == ["c", "a", "b", "undated"]
    assert once == twice


def test_sort_posts_by_date_compares_dates_not_strings():
    posts = [
        {"title": "old", "date": "2021-12-31"},
        {"title": "new", "date": datetime.datetime(2022, 1, 2, 8, 30)},
    ]

    assert [p["title"] for p in sort_posts_by_date(posts)] == ["new", "old"]


def test_sort_posts_by_date_does_not_mutate_input():
    posts = [{"date": "2020-01-01"}, {"date": "2024-01-01"}]

    sort_posts_by_date(posts)

    assert posts == [{"date": "2020-01-01"}, {"date": "2024-01-01"}]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-06-18", datetime.date(2023, 6, 18)),
        (" 2023-06-18 ", datetime.date(2023, 6, 18)),
        ("2023-06-18T10:15:00", datetime.date(2023, 6, 18)),
        ("2023-06-18T23:15:00Z", datetime.date(2023, 6, 18)),
        (datetime.date(2021, 1, 1), datetime.date(2021, 1, 1)),
        (datetime.datetime(2021, 1, 1, 12, 0), datetime.date(2021, 1, 1)),
    ],
)
def test_parse_post_date(value, expected):
    assert parse_post_date(value) == expected


@pytest.mark.parametrize("value", ["yesterday", "18/06/2023", 20230618, ["2023-06-18"]])
def test_parse_post_date_rejects_garbage(value):
    with pytest.raises(InvalidPostDateError):
        parse_post_date(value)


def test_filter_published_drops_drafts():
    posts = [
        {"title": "live"},
        {"title": "draft", "draft": True},
        {"title": "text draft", "draft": "true"},
        {"title": "explicitly live", "draft": False},
    ]

    assert [p["title"] for p in filter_published(posts)] == ["live", "explicitly live"]


def test_project_fields_direct():
    metadata = {"title": "T", "excerpt": "E"}

    assert project_fields(metadata, "body", ["excerpt", "content", "author"]) == {
        "excerpt": "E",
        "content": "body",
    }


def test_get_slug_index_maps_published_slugs_to_files():
    service = _service(
        {
            "2023-06-18-federation": "---\ntitle: Federation\nslug: federation\n---\n",
            "single-spa": "---\ntitle: Single spa\n---\n",
        }
    )

    assert service.get_slug_index() == {
        "federation": "2023-06-18-federation",
        "single-spa": "single-spa",
    }


def test_get_post_by_public_slug_reads_the_backing_file():
    repo = FakeRepo({"2023-06-18-federation": "---\ntitle: Federation\nslug: federation\n---\n"})
    service = PostsService(repo=repo, parser=ContentParser())

    result = service.get_post_by_public_slug("federation", ["title"])

    assert result == {"title": "Federation", "slug": "federation"}
    assert repo.reads[-1] == "2023-06-18-federation"


def test_get_post_by_public_slug_raises_for_unknown_slug():
    service = _service({"single-spa": "---\ntitle: Single spa\n---\n"})

    with pytest.raises(PostNotFoundError):
        service.get_post_by_public_slug("federation")
