"""Help page output as HTML."""

from __future__ import annotations

import sys
from typing import TextIO

_XML_ESCAPES = {
    "&": "&amp;",
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
}

_FONT_TAGS = {"I": "em", "B": "strong"}


def escape_xml(text: str) -> str:
    """Replace the characters that are special in XML by entities."""
    return "".join(_XML_ESCAPES.get(char, char) for char in text)


def to_html(text: str) -> str:
    """Turn console formatting escapes into HTML.

    Understood sequences are ``\\-`` (a dash), ``\\fI`` (start emphasis),
    ``\\fB`` (start bold) and ``\\fP`` (end the last started font).  Any
    other backslash sequence is kept as it is.
    """
    result: list[str] = []
    open_tags: list[str] = []
    chars = iter(text)

    for char in chars:
        if char != "\\":
            result.append(char)
            continue

        escaped = next(chars, None)
        if escaped is None:
            raise ValueError("Incomplete escape sequence at end of text")
        if escaped == "-":
            result.append("-")
        elif escaped == "f":
            font = next(chars, None)
            if font is None:
                raise ValueError("Incomplete font escape at end of text")
            if font in _FONT_TAGS:
                tag = _FONT_TAGS[font]
                open_tags.append(tag)
                result.append(f"<{tag}>")
            elif font == "P":
                if not open_tags:
                    raise ValueError("Font reset without a font being set")
                result.append(f"</{open_tags.pop()}>")
            else:
                result.append("\\f" + font)
        else:
            result.append("\\" + escaped)

    return "".join(result)


class HtmlFormat:
    """Writes help page elements as HTML to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._in_list = False
        self._in_paragraph = False

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _close_list(self) -> None:
        if self._in_list:
            self._write("</dl>\n")
            self._in_list = False

    def _close_paragraph(self) -> None:
        if self._in_paragraph:
            self._write("</p>\n")
            self._in_paragraph = False

    def print_header(self, app_name: str, short_description: str) -> None:
        """Write the document head, the title and the short description."""
        self._write(
            '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN">\n'
            '<html lang="en">\n'
            "<head>\n"
            '<meta http-equiv="content-type" content="text/html; charset=utf-8">\n'
            f"<title>{escape_xml(app_name)} &mdash; {escape_xml(short_description)}</title>\n"
            "</head>\n"
            "<body>\n"
        )
        self._write(f"<h1>{to_html(app_name)}</h1>\n<div>{to_html(short_description)}</div>\n")

    def print_section(self, title: str) -> None:
        """Write a section title."""
        self._close_list()
        self._close_paragraph()
        self._write(f"<h2>{to_html(title)}</h2>\n")

    def print_subsection(self, title: str) -> None:
        """Write a subsection title."""
        self._close_list()
        self._close_paragraph()
        self._write(f"<h3>{to_html(title)}</h3>\n")

    def print_line(self, text: str, line_is_paragraph: bool) -> None:
        """Write a line of text, ending the paragraph or just the line."""
        self._close_list()
        if not self._in_paragraph:
            self._write("<p>\n")
            self._in_paragraph = True
        self._write(to_html(text) + "\n")
        if line_is_paragraph:
            self._close_paragraph()
        else:
            self._write("<br>\n")

    def print_list_item(self, term: str, desc: str) -> None:
        """Write a term and its description as a definition list entry."""
        self._close_paragraph()
        if not self._in_list:
            self._write("<dl>\n")
            self._in_list = True
        self._write(f"<dt>{to_html(term)}</dt>\n<dd>{to_html(desc)}</dd>\n")

    def print_footer(self) -> None:
        """Close an open paragraph and the document."""
        self._close_paragraph()
        self._write("</body></html>")

    def in_bold(self, text: str) -> str:
        """Return ``text`` wrapped in bold markup."""
        return f"<strong>{text}</strong>"