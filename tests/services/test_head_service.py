from blog.services.head_service import build_post_head


def _as_dict(tags):
    return {(t.attribute, t.key): t.content for t in tags}


def test_build_post_head_full_post(site):
    post = {
        "title": "Single-spa basics",
        "description": "How single-spa mounts apps",
        "coverImage": "/static/images/spa.png",
        "keywords": ["single-spa", "react"],
        "author": "Bartosz",
        "ogTitle": "Single-spa basics",
        "ogImage": "https://cdn.example.com/og.png",
        "twitterCard": "summary_large_image",
        "twitterSite": "@BartoszEbiowski",
    }

    tags = _as_dict(build_post_head(post, site))

    assert tags[("name", "description")] == "How single-spa mounts apps"
    assert tags[("name", "image")] == "https://example.com/static/images/spa.png"
    assert tags[("name", "keywords")] == "single-spa, react"
    assert tags[("itemprop", "name")] == "Single-spa basics"
    assert tags[("name", "og:image")] == "https://cdn.example.com/og.png"
    assert tags[("name", "og:type")] == "Article"
    assert tags[("name", "article:section")] == "Technology"
    assert tags[("name", "article:author")] == "Bartosz"
    assert tags[("name", "article:tag")] == "single-spa, react"
    assert tags[("name", "twitter:card")] == "summary_large_image"


def test_build_post_head_omits_missing_fields():
    tags = build_post_head({"title": "Bare"})

    assert [(t.attribute, t.key) for t in tags] == [
        ("itemprop", "name"),
        ("name", "og:type"),
        ("name", "article:section"),
    ]


def test_build_post_head_keeps_relative_images_without_site():
    tags = _as_dict(build_post_head({"coverImage": "/static/images/a.png"}))

    assert tags[("name", "image")] == "/static/images/a.png"
