from bs4 import BeautifulSoup

from pagegen.builder import cls, div, h1, p
from pagegen.models import PageMetadata, ScriptRef
from pagegen.page import assemble
from pagegen.render import render_to_bytes, render_to_string


def _meta(**overrides) -> PageMetadata:
    payload = {
        "title": "Declarative HTML",
        "description": "Rendered on the server",
        "stylesheets": ["/static/site.css", "/static/theme.css"],
        "scripts": [
            {"src": "/static/app.js", "defer": True},
            {"src": "/static/late.js", "type": "text/javascript", "inHead": False},
        ],
        "bodyClass": "flex flex-col min-h-screen",
    }
    payload.update(overrides)
    return PageMetadata.model_validate(payload)


def _content():
    return div(cls("hero"), h1("Hello"), p("World & friends"))


def test_assemble_is_byte_for_byte_deterministic() -> None:
    meta = _meta()

    first = render_to_bytes(assemble(_content(), meta))
    second = render_to_bytes(assemble(_content(), meta))

    assert first == second
    assert assemble(_content(), meta) == assemble(_content(), meta)


def test_document_skeleton() -> None:
    rendered = render_to_string(assemble(_content(), _meta()))

    assert rendered.startswith('<!DOCTYPE html><html lang="en"><head><meta charset="utf-8"/>')
    soup = BeautifulSoup(rendered, "html.parser")
    assert [child.name for child in soup.html.children] == ["head", "body"]
    assert soup.title.string == "Declarative HTML"

    viewport = soup.find("meta", attrs={"name": "viewport"})
    assert "width=device-width" in viewport["content"]
    description = soup.find("meta", attrs={"name": "description"})
    assert description["content"] == "Rendered on the server"


def test_stylesheets_and_scripts_are_placed_in_order() -> None:
    soup = BeautifulSoup(render_to_string(assemble(_content(), _meta())), "html.parser")

    links = soup.head.find_all("link")
    assert [link["href"] for link in links] == ["/static/site.css", "/static/theme.css"]
    assert all(link["rel"] == ["stylesheet"] for link in links)

    head_scripts = soup.head.find_all("script")
    assert [script["src"] for script in head_scripts] == ["/static/app.js"]
    assert head_scripts[0]["type"] == "module"
    assert head_scripts[0].has_attr("defer")

    body_children = [child for child in soup.body.children]
    assert body_children[0]["class"] == ["hero"]
    assert body_children[-1].name == "script"
    assert body_children[-1]["src"] == "/static/late.js"
    assert not body_children[-1].has_attr("defer")


def test_body_class_and_content_position() -> None:
    soup = BeautifulSoup(render_to_string(assemble(_content(), _meta())), "html.parser")

    assert soup.body["class"] == ["flex", "flex-col", "min-h-screen"]
    assert soup.body.h1.string == "Hello"
    assert soup.body.p.string == "World & friends"


def test_optional_metadata_is_omitted() -> None:
    meta = PageMetadata(title="Bare", lang="ja")
    rendered = render_to_string(assemble(p("x"), meta))

    assert rendered == (
        '<!DOCTYPE html><html lang="ja"><head><meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        "<title>Bare</title></head><body><p>x</p></body></html>"
    )


def test_title_is_escaped() -> None:
    rendered = render_to_string(assemble(p("x"), PageMetadata(title="</title><script>")))

    assert "<title>&lt;/title&gt;&lt;script&gt;</title>" in rendered


def test_script_ref_defaults() -> None:
    ref = ScriptRef(src="/a.js")

    assert (ref.type, ref.defer, ref.in_head) == ("module", False, True)
