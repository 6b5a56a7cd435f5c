"""
Portfolio content schema.

The models are frozen and every list becomes a tuple, so a loaded document
cannot be changed after validation. Optional project fields stay ``None``
when absent; the renderer relies on that to omit their containers.
"""

from __future__ import annotations
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from utils import display_key

# canonical schema (empty lists – no placeholders)
PORTFOLIO_SCHEMA = {
    "profile": {
        "name": "",
        "role": "",
        "headline": "",
        "summary": "",
        "about": "",
        "location": "",
        "email": "",
        "contactBlurb": "",
        "highlights": [],
        "links": [],
    },
    "skills": [],
    "experience": [],
    "projects": [],
}


class _Content(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class SocialLink(_Content):
    label: str
    href: str


class ProjectLink(_Content):
    label: str
    href: str


class Profile(_Content):
    name: str
    role: str
    headline: str
    summary: str
    about: str
    location: str
    email: str
    contact_blurb: str = Field(alias="contactBlurb")
    highlights: Tuple[str, ...]
    links: Tuple[SocialLink, ...]


class ExperienceEntry(_Content):
    title: str
    company: str
    location: str
    start: str
    end: str
    summary: str

    @property
    def key(self) -> str:
        return display_key(self.title, self.company, self.start)


class ProjectEntry(_Content):
    name: str
    description: str
    year: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    links: Optional[Tuple[ProjectLink, ...]] = None

    @property
    def key(self) -> str:
        # two releases of the same project differ by year
        return display_key(self.name, self.year or "")


class Portfolio(_Content):
    profile: Profile
    skills: Tuple[str, ...]
    experience: Tuple[ExperienceEntry, ...]
    projects: Tuple[ProjectEntry, ...]
