"""Tests for full document rendering."""

from __future__ import annotations

import logging
from datetime import date

from resumegen.config import ESCAPE_ENV_VAR
from resumegen.models import (
    Document,
    EducationItem,
    ExperienceItem,
    InPerson,
    Moment,
    Section,
    TechnicalSkillItem,
)
from resumegen.templates.jake import DOCUMENT_BEGIN, DOCUMENT_END, PREAMBLE


class TestPreamble:
    def test_first_line(self):
        assert PREAMBLE.splitlines()[0] == "%-------------------------"

    def test_unicode_glyph_mapping_enabled(self):
        assert r"\input{glyphtounicode}" in PREAMBLE
        assert "\\pdfgentounicode=1\n" in PREAMBLE

    def test_custom_commands_defined(self):
        for command in (
            r"\newcommand{\resumeItem}[1]",
            r"\newcommand{\resumeSubheading}[4]",
            r"\newcommand{\resumeSubSubheading}[2]",
            r"\newcommand{\resumeProjectHeading}[2]",
            r"\newcommand{\resumeSubHeadingListStart}",
            r"\newcommand{\resumeItemListEnd}",
        ):
            assert command in PREAMBLE

    def test_ends_with_blank_line(self):
        assert PREAMBLE.endswith("%\n\n")
        assert not PREAMBLE.endswith("\n\n\n")
        assert "RESUME STARTS HERE" in PREAMBLE.splitlines()[-2]


class TestDocument:
    def test_smoke(self, title_block, education_item):
        section = Section(EducationItem)
        section.add_item(education_item)
        tex = Document([title_block, section]).render()

        assert tex.startswith("%-------------------------\n")
        assert r"\textbf{\Huge \scshape Jane Doe}" in tex
        assert r"\section{Education}" in tex
        assert "MIT" in tex
        assert "Remote" in tex
        assert "May 2020" in tex
        assert tex.endswith(r"\end{document}")

    def test_exact_layout(self, title_block, education_item):
        section = Section(EducationItem, [education_item])
        tex = Document([title_block, section]).render()
        assert tex == (
            PREAMBLE
            + DOCUMENT_BEGIN
            + "\n\n"
            + title_block.render()
            + "\n\n"
            + section.render()
            + "\n\n"
            + DOCUMENT_END
        )

    def test_empty_document(self):
        assert Document().render() == PREAMBLE + "\\begin{document}\n\n\\end{document}"

    def test_elements_in_insertion_order(self, title_block, skill_item, experience_item):
        doc = Document([title_block])
        doc.add(Section(TechnicalSkillItem, [skill_item]))
        doc.add(Section(ExperienceItem, [experience_item]))
        tex = doc.render()
        assert (
            tex.index(r"\begin{center}")
            < tex.index(r"\section{Technical Skills}")
            < tex.index(r"\section{Experience}")
        )

    def test_same_kind_twice(self, education_item):
        doc = Document([Section(EducationItem, [education_item]), Section(EducationItem)])
        assert doc.render().count(r"\section{Education}") == 2

    def test_render_is_idempotent(self, title_block, experience_item):
        doc = Document([title_block, Section(ExperienceItem, [experience_item])])
        assert doc.render() == doc.render()

    def test_render_logs_element_count(self, title_block, caplog):
        with caplog.at_level(logging.DEBUG, logger="resumegen.models.document"):
            Document([title_block]).render()
        assert "Rendering document with 1 elements" in caplog.text


class TestDocumentEscaping:
    def _doc(self, **kwargs) -> Document:
        item = ExperienceItem(
            position="R&D Engineer",
            dates=Moment(date(2020, 1, 1)),
            organization="Acme",
            location=InPerson("Austin", "TX"),
        )
        return Document([Section(ExperienceItem, [item])], **kwargs)

    def test_off_by_default(self):
        assert self._doc().escape is False
        assert "{R&D Engineer}" in self._doc().render()

    def test_explicit_escape(self):
        assert r"{R\&D Engineer}" in self._doc(escape=True).render()

    def test_environment_default(self, monkeypatch):
        monkeypatch.setenv(ESCAPE_ENV_VAR, "true")
        doc = self._doc()
        assert doc.escape is True
        assert r"{R\&D Engineer}" in doc.render()

    def test_explicit_overrides_environment(self, monkeypatch):
        monkeypatch.setenv(ESCAPE_ENV_VAR, "1")
        assert "{R&D Engineer}" in self._doc(escape=False).render()

    def test_preamble_never_escaped(self):
        assert self._doc(escape=True).render().startswith(PREAMBLE)
