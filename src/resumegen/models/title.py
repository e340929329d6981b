"""Résumé heading: name, contact details and links."""

from __future__ import annotations

from dataclasses import dataclass, field

from pylatex import NoEscape

from resumegen.models.values import Link
from resumegen.templates.base import DocElement, latex_text

__all__ = ["TitleBlock"]

_SEPARATOR = r" $|$"


@dataclass
class TitleBlock(DocElement):
    """Centered name and contact block at the top of the page."""

    first_name: str
    middle_initial: str | None
    last_name: str
    phone_number: str
    email: str
    urls: list[Link] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        """``First M. Last``, or ``First Last`` without a middle initial."""
        middle = f"{self.middle_initial}. " if self.middle_initial else ""
        return f"{self.first_name} {middle}{self.last_name}"

    def render(self, *, escape: bool = False) -> NoEscape:
        name = latex_text(self.full_name, escape=escape)
        phone = latex_text(self.phone_number, escape=escape)
        email = latex_text(self.email, escape=escape)

        contact = rf"  \small {phone} $|$ \href{{mailto:{self.email}}}{{\underline{{{email}}}}}"
        lines = [
            r"\begin{center}",
            rf"  \textbf{{\Huge \scshape {name}}} \\ \vspace{{1pt}}",
        ]
        if self.urls:
            lines.append(contact + _SEPARATOR)
            links = [f"  {url.render(escape=escape)}" for url in self.urls]
            lines.append((_SEPARATOR + "\n").join(links))
        else:
            lines.append(contact)
        lines.append(r"\end{center}")
        return NoEscape("\n".join(lines))
