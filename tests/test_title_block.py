"""Tests for the résumé heading."""

from __future__ import annotations

from resumegen.models import Link, TitleBlock


class TestTitleBlock:
    def test_render_without_links(self, title_block):
        assert title_block.render() == (
            "\\begin{center}\n"
            "  \\textbf{\\Huge \\scshape Jane Doe} \\\\ \\vspace{1pt}\n"
            "  \\small 555-1234 $|$ \\href{mailto:jane@x.com}{\\underline{jane@x.com}}\n"
            "\\end{center}"
        )

    def test_no_trailing_separator_without_links(self, title_block):
        tex = title_block.render()
        assert tex.count("$|$") == 1
        assert not tex.replace("\n", "").endswith(r"$|$\end{center}")

    def test_middle_initial(self, title_block):
        title_block.middle_initial = "Q"
        assert title_block.full_name == "Jane Q. Doe"
        assert r"\scshape Jane Q. Doe}" in title_block.render()

    def test_empty_middle_initial_omitted(self, title_block):
        title_block.middle_initial = ""
        assert title_block.full_name == "Jane Doe"

    def test_links_joined_in_order(self, title_block, github_link):
        title_block.urls = [Link("https://janedoe.dev", "janedoe.dev"), github_link]
        assert title_block.render() == (
            "\\begin{center}\n"
            "  \\textbf{\\Huge \\scshape Jane Doe} \\\\ \\vspace{1pt}\n"
            "  \\small 555-1234 $|$ \\href{mailto:jane@x.com}{\\underline{jane@x.com}} $|$\n"
            "  \\href{https://janedoe.dev}{\\underline{janedoe.dev}} $|$\n"
            "  \\href{https://github.com/janedoe}{\\underline{github.com/janedoe}}\n"
            "\\end{center}"
        )

    def test_single_link_has_no_trailing_separator(self, title_block, github_link):
        title_block.urls = [github_link]
        tex = title_block.render()
        assert tex.count("$|$") == 2
        assert tex.endswith("{\\underline{github.com/janedoe}}\n\\end{center}")

    def test_escape_keeps_mailto_target(self):
        block = TitleBlock("Jo", None, "O_Neil", "555", "jo_o@x.com")
        tex = block.render(escape=True)
        assert r"\href{mailto:jo_o@x.com}{\underline{jo\_o@x.com}}" in tex
        assert r"\scshape Jo O\_Neil}" in tex
