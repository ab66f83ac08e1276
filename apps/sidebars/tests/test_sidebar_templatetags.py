import pytest
from django.template import Context, Template
from django.test import RequestFactory

from apps.sidebars import Sidebars
from apps.widgets.text import register_text_widget


@pytest.fixture
def sidebars(host, hooks):
    sidebars = Sidebars(host, hooks=hooks, sidebars=[{"id": "primary"}])
    sidebars.register_defaults()
    return sidebars


def _render(source, **context):
    return Template("{% load sidebars %}" + source).render(Context(context))


def test_render_sidebar_tag_outputs_container(sidebars):
    register_text_widget(slug="hello", zone="primary", text="Hello")

    html = _render('{% render_sidebar "main" "primary" "extra" %}', sidebars=sidebars)

    assert html.startswith('<div id="main" class="aside main-aside extra" role="complementary">')
    assert "Hello" in html


def test_render_sidebar_tag_is_not_autoescaped(sidebars):
    register_text_widget(slug="hello", zone="primary", text="Hello")

    html = _render('{% render_sidebar "main" "primary" %}', sidebars=sidebars)

    assert "&lt;div" not in html


def test_render_sidebar_tag_passes_request(sidebars, hooks):
    seen = []
    hooks.add_action("no-main-widgets", lambda **kw: seen.append(kw["location"]))
    request = RequestFactory().get("/")

    html = _render('{% render_sidebar "main" "primary" %}', sidebars=sidebars, request=request)

    assert seen == ["main"]
    assert html.endswith("</div><!-- #main .aside-main -->")


def test_render_sidebar_tag_without_instance_renders_nothing():
    assert _render('{% render_sidebar "main" "primary" %}') == ""


def test_sidebar_is_active_tag(sidebars):
    source = '{% sidebar_is_active "primary" as active %}{{ active }}'

    assert _render(source, sidebars=sidebars) == "False"

    register_text_widget(slug="hello", zone="primary", text="Hello")
    assert _render(source, sidebars=sidebars) == "True"
    assert _render(source) == "False"
