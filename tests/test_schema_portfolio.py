import pytest
from pydantic import ValidationError

from schema_portfolio import PORTFOLIO_SCHEMA, Portfolio, ProjectEntry

from conftest import make_portfolio_data


def test_lists_become_tuples_in_input_order(portfolio):
    assert portfolio.skills == ("Go",)
    assert [link.label for link in portfolio.profile.links] == ["Email", "Notes"]


def test_contact_blurb_keeps_its_json_spelling(portfolio):
    assert portfolio.profile.contact_blurb == "Letters welcome."


def test_document_is_frozen(portfolio):
    with pytest.raises(ValidationError):
        portfolio.profile.name = "Grace"


def test_absent_optional_fields_are_none():
    project = ProjectEntry.model_validate({"name": "X", "description": "d"})
    assert project.year is None
    assert project.tags is None
    assert project.links is None


def test_empty_tags_stay_distinct_from_absent():
    project = ProjectEntry.model_validate({"name": "X", "description": "d", "tags": []})
    assert project.tags == ()


def test_project_key_disambiguates_by_year():
    a = ProjectEntry(name="Engine", description="d", year="1842")
    b = ProjectEntry(name="Engine", description="d", year="1843")
    assert a.key == "Engine-1842"
    assert a.key != b.key
    assert ProjectEntry(name="Engine", description="d").key == "Engine-"


def test_experience_key_uses_title_company_start():
    data = make_portfolio_data(experience=[{
        "title": "Analyst", "company": "Babbage & Co", "location": "London",
        "start": "1842", "end": "1843", "summary": "Notes on the engine.",
    }])
    assert Portfolio.model_validate(data).experience[0].key == "Analyst-Babbage & Co-1842"


def test_missing_required_field_is_rejected():
    data = make_portfolio_data(projects=[{"name": "X"}])
    with pytest.raises(ValidationError):
        Portfolio.model_validate(data)


def test_canonical_schema_lists_every_profile_field():
    assert set(PORTFOLIO_SCHEMA) == {"profile", "skills", "experience", "projects"}
    assert "contactBlurb" in PORTFOLIO_SCHEMA["profile"]
