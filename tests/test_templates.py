# tests/test_templates.py
import dataclasses

import pytest

from resume_renderer.layout_engine.templates import CLASSIC, TEMPLATES, SectionSpec
from resume_renderer.normalizer import CONTENT_FIELDS


def _fields(config):
    fields = [spec.field for row in config.sections for spec in row]
    if config.sidebar is not None:
        fields.extend(spec.field for spec in config.sidebar.sections)
    return fields


@pytest.mark.parametrize("config", TEMPLATES, ids=lambda config: config.name)
def test_every_field_is_placed_exactly_once(config):
    assert sorted(_fields(config)) == sorted(CONTENT_FIELDS)


def test_names_are_unique_and_lower_case():
    names = [config.name for config in TEMPLATES]
    assert len(set(names)) == 8
    assert all(name == name.strip().lower() for name in names)


def test_unknown_section_mode_is_rejected():
    row = (SectionSpec("SKILLS", "skills", "marquee"),)
    with pytest.raises(ValueError, match="marquee"):
        dataclasses.replace(CLASSIC, sections=(row,))


def test_rows_hold_at_most_two_sections():
    row = tuple(SectionSpec(name.upper(), name) for name in ("skills", "languages", "projects"))
    with pytest.raises(ValueError):
        dataclasses.replace(CLASSIC, sections=(row,))


def test_unknown_title_rule_is_rejected():
    with pytest.raises(ValueError, match="zigzag"):
        dataclasses.replace(CLASSIC, title_rule="zigzag")


def test_configs_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CLASSIC.name = "changed"
