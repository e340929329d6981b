from __future__ import annotations

from datetime import date

import pytest

from resumegen.config import ESCAPE_ENV_VAR
from resumegen.models import (
    DateRange,
    EducationItem,
    ExperienceItem,
    InPerson,
    Link,
    Moment,
    ProjectItem,
    Remote,
    TechnicalSkillItem,
    TitleBlock,
)


@pytest.fixture(autouse=True)
def _clear_escape_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment from changing rendered output."""
    monkeypatch.delenv(ESCAPE_ENV_VAR, raising=False)


@pytest.fixture
def title_block() -> TitleBlock:
    return TitleBlock(
        first_name="Jane",
        middle_initial=None,
        last_name="Doe",
        phone_number="555-1234",
        email="jane@x.com",
    )


@pytest.fixture
def education_item() -> EducationItem:
    return EducationItem(
        school="MIT",
        location=Remote(),
        degree="BS",
        dates=Moment(date(2020, 5, 1)),
    )


@pytest.fixture
def experience_item() -> ExperienceItem:
    return ExperienceItem(
        position="Software Engineer Intern",
        dates=DateRange(date(2021, 6, 1), date(2021, 8, 31)),
        organization="Acme Corp",
        location=InPerson("San Francisco", "CA"),
        bullets=["Built REST APIs", "Reduced latency by 30%"],
    )


@pytest.fixture
def project_item() -> ProjectItem:
    return ProjectItem(
        title="ResumeGen",
        keywords=["Python", "LaTeX"],
        dates=DateRange(date(2022, 1, 1), date(2022, 6, 1)),
        bullets=["Rendered resumes"],
    )


@pytest.fixture
def skill_item() -> TechnicalSkillItem:
    return TechnicalSkillItem(label="Languages", skills=["Python", "Go", "SQL"])


@pytest.fixture
def github_link() -> Link:
    return Link("https://github.com/janedoe", "github.com/janedoe")
