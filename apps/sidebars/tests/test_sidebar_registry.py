import logging

import pytest

from apps.sidebars.registry import SidebarRegistry
from apps.sidebars.specs import RegistrationRecord, SidebarRegistration, SidebarSpec


class RecordingHost:
    def __init__(self):
        self.calls = []

    def register_area(self, spec, record):
        self.calls.append((spec, record))


@pytest.fixture
def recording_host():
    return RecordingHost()


def test_register_applies_defaults(recording_host, hooks):
    SidebarRegistry(recording_host, hooks).register({"id": "primary"})

    [(spec, record)] = recording_host.calls
    assert spec == SidebarSpec(id="primary", name="", description="", editable=1)
    assert record == RegistrationRecord()
    assert record.before_widget == '<aside id="{widget_id}" class="widget {widget_class}">'
    assert record.before_title == '<h1 class="widget-title">'


@pytest.mark.parametrize(
    ("given", "expected"),
    [("yes", 1), (0, 0), (True, 1), ("", 0), (None, 0), (7, 1)],
)
def test_register_coerces_editable(recording_host, hooks, given, expected):
    SidebarRegistry(recording_host, hooks).register({"id": "primary", "editable": given})

    assert recording_host.calls[0][0].editable == expected


def test_register_escapes_attributes(recording_host, hooks):
    SidebarRegistry(recording_host, hooks).register(
        {"id": 'side"bar', "name": "<b>Side</b>", "description": "Tom & Jerry"}
    )

    spec = recording_host.calls[0][0]
    assert spec.id == "side&quot;bar"
    assert spec.name == "&lt;b&gt;Side&lt;/b&gt;"
    assert spec.description == "Tom &amp; Jerry"


def test_register_accepts_sidebar_spec(recording_host, hooks):
    SidebarRegistry(recording_host, hooks).register(SidebarSpec(id="footer", editable="no"))

    assert recording_host.calls[0][0] == SidebarSpec(id="footer", editable=1)


def test_markup_filters_rewrite_fragments(recording_host, hooks):
    seen = []

    def before_widget(markup, sidebar_id, spec):
        seen.append((sidebar_id, spec.name))
        return '<section id="{widget_id}">'

    hooks.add_filter("sidebars-before-widget", before_widget)
    hooks.add_filter("sidebars-after-widget", lambda markup, *args: "</section>")
    hooks.add_filter("sidebars-before-title", lambda markup, *args: "<h3>")
    hooks.add_filter("sidebars-after-title", lambda markup, *args: "</h3>")

    SidebarRegistry(recording_host, hooks).register({"id": "primary", "name": "Primary"})

    record = recording_host.calls[0][1]
    assert record == RegistrationRecord(
        before_widget='<section id="{widget_id}">',
        after_widget="</section>",
        before_title="<h3>",
        after_title="</h3>",
    )
    assert seen == [("primary", "Primary")]


def test_register_filter_can_replace_registration(recording_host, hooks):
    def rename(registration, raw):
        assert isinstance(registration, SidebarRegistration)
        spec = SidebarSpec(id=registration.spec.id, name=f"{raw.name} (theme)")
        return SidebarRegistration(spec=spec, record=registration.record)

    hooks.add_filter("sidebars-register", rename)

    SidebarRegistry(recording_host, hooks).register({"id": "primary", "name": "Primary"})

    assert recording_host.calls[0][0].name == "Primary (theme)"


def test_register_filter_returning_wrong_type_keeps_default(recording_host, hooks, caplog):
    hooks.add_filter("sidebars-register", lambda registration, raw: None)

    with caplog.at_level(logging.WARNING, logger="apps.sidebars.registry"):
        SidebarRegistry(recording_host, hooks, [{"id": "primary", "name": "Primary"}]).register_defaults()

    [(spec, record)] = recording_host.calls
    assert spec == SidebarSpec(id="primary", name="Primary")
    assert record == RegistrationRecord()
    assert "Ignoring sidebars-register result None" in caplog.text


def test_register_defaults_registers_each_entry_in_order(recording_host, hooks):
    configured = [{"id": "primary"}, {"id": "secondary"}, SidebarSpec(id="footer")]

    SidebarRegistry(recording_host, hooks, configured).register_defaults()

    assert [spec.id for spec, _ in recording_host.calls] == ["primary", "secondary", "footer"]


def test_register_defaults_with_empty_configuration(recording_host, hooks):
    SidebarRegistry(recording_host, hooks, []).register_defaults()

    assert recording_host.calls == []


def test_register_without_id_is_not_applied_by_host(host, hooks):
    SidebarRegistry(host, hooks).register({"name": "Nameless"})

    assert list(host.iter_areas()) == []
