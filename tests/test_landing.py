from pathlib import Path

import pytest
import yaml
from bs4 import BeautifulSoup

from pagegen.landing import build_landing
from pagegen.models import Feature, LandingContent, Link, SiteConfig
from pagegen.page import assemble
from pagegen.render import render_to_string

SAMPLE = '<div data-signal-count="0">\n  <button data-on-click="$count++">+</button>\n</div>\n'


def _content(**overrides) -> LandingContent:
    payload = {
        "headline": "Declarative HTML",
        "tagline": "Fast & simple",
        "languages": ["Go", "Python", "Zig"],
        "codeSampleTitle": "Simple count example code",
        "codeSample": SAMPLE,
        "dependencyCount": 2,
        "features": [
            {"description": "Fine Grained Reactivity", "details": ["No Virtual DOM."]},
            {"description": "Batteries Included", "details": ["Signals", "Refs", "Focus"]},
        ],
        "links": [
            {"label": "Docs", "href": "/docs", "style": "primary"},
            {"label": "Why?", "href": "/why"},
        ],
        "author": {"label": "Delaney", "href": "http://github.com/delaneyj"},
        "builtWith": ["HTML", "Go"],
    }
    payload.update(overrides)
    return LandingContent.model_validate(payload)


def _soup(content: LandingContent, **kwargs) -> BeautifulSoup:
    return BeautifulSoup(render_to_string(build_landing(content, **kwargs)), "html.parser")


def test_one_badge_per_language_in_order() -> None:
    soup = _soup(_content())

    badges = soup.select("div.avatar > span")
    assert [badge.get_text() for badge in badges] == ["Go", "Python", "Zig"]
    assert [badge["title"] for badge in badges] == ["Go", "Python", "Zig"]


def test_one_item_per_feature() -> None:
    soup = _soup(_content())

    items = soup.select("div.card-body > ul > li")
    assert len(items) == 2
    assert "Fine Grained Reactivity" in items[0].get_text()
    assert items[1].select("div.breadcrumbs li")[1].get_text() == "Refs"


def test_bundle_size_badge() -> None:
    soup = _soup(_content(), bundle_size="12 kB")
    badges = [badge.get_text() for badge in soup.select("div.badge-accent")]

    assert badges == ["12 kB w/ all extensions", "2 Dependencies", "Fully Tree Shakeable"]


def test_bundle_size_badge_is_omitted_when_unknown() -> None:
    soup = _soup(_content(treeShakeable=False))
    badges = [badge.get_text() for badge in soup.select("div.badge-accent")]

    assert badges == ["2 Dependencies"]


def test_code_sample_is_escaped_text() -> None:
    rendered = render_to_string(build_landing(_content()))
    soup = BeautifulSoup(rendered, "html.parser")

    assert "&lt;div data-signal-count=\"0\"&gt;" in rendered
    assert soup.find("button") is None
    assert soup.find("code").get_text() == SAMPLE


def test_action_links() -> None:
    soup = _soup(_content())
    links = soup.select("a.btn")

    assert [link["href"] for link in links] == ["/docs", "/why"]
    assert links[0]["class"] == ["btn", "btn-lg", "flex-1", "btn-primary"]
    assert soup.find("a", string="Delaney")["href"] == "http://github.com/delaneyj"


def test_minimal_content() -> None:
    content = LandingContent(headline="Only a headline")
    soup = _soup(content)

    assert soup.h1.get_text() == "Only a headline"
    assert soup.find("pre") is None
    assert soup.select("div.avatar") == []
    assert soup.select("a") == []


def test_feature_with_icon_embeds_markup() -> None:
    feature = Feature(description="Icons", icon='<svg class="icon"></svg>', details=["x"])
    soup = _soup(LandingContent(headline="h", features=[feature]))

    assert soup.select_one("li svg.icon") is not None


def test_link_style_is_validated() -> None:
    with pytest.raises(ValueError):
        Link(label="x", href="/", style="loud")


def test_bundled_site_config_validates_and_renders() -> None:
    path = Path(__file__).resolve().parents[1] / "config" / "site.yaml"
    config = SiteConfig.model_validate(yaml.safe_load(path.read_text(encoding="utf-8")))

    rendered = render_to_string(assemble(build_landing(config.content), config.page))
    soup = BeautifulSoup(rendered, "html.parser")
    assert soup.title.string == config.page.title
    assert len(soup.select("div.avatar")) == len(config.content.languages)
    assert len(soup.select("div.card-body > ul > li")) == len(config.content.features)


def test_live_example_section() -> None:
    live = {
        "title": "Global count example from Backend",
        "elementId": "global-count-example",
        "endpoint": "/api/globalCount",
        "loadingText": "Loading example on delay...",
        "note": "Open the console",
    }
    soup = _soup(_content(liveExample=live))

    target = soup.find(id="global-count-example")
    assert target["data-signal-get"] == "'/api/globalCount'"
    assert target["data-on-load"] == "@get"
    assert target.span.get_text() == "Loading example on delay..."
    assert soup.find("h5").get_text() == "Open the console"


def test_live_example_is_omitted_by_default() -> None:
    soup = _soup(_content())

    assert soup.select("[data-signal-get]") == []
