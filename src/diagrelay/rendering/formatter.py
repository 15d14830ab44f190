# topmark:header:start
#
#   project      : DiagRelay
#   file         : formatter.py
#   file_relpath : src/diagrelay/rendering/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Documentation-style text formatter for diagnostic bodies.

Rules applied by `DocumentationFormatter.format_indented`:

* A line starting with a space is *preformatted* and copied verbatim after the indent.
* Every other non-blank line is its own paragraph, word-wrapped to ``text_width``
  columns (indent included), so explicit line breaks are kept.
* Runs of blank lines collapse to a single blank line between blocks; leading and
  trailing blank lines are dropped.
* Non-empty output ends with exactly one newline. Empty text renders as ``""``.
"""

from __future__ import annotations

import textwrap

from diagrelay.constants import DEFAULT_TEXT_WIDTH


class DocumentationFormatter:
    """Word-wrapping formatter implementing the `TextFormatter` protocol.

    Args:
        text_width (int): Target line width, indent included.
    """

    def __init__(self, text_width: int = DEFAULT_TEXT_WIDTH) -> None:
        if text_width < 1:
            raise ValueError(f"text_width must be positive, got {text_width}")
        self.text_width: int = text_width

    def _wrapper(self, indent: str) -> textwrap.TextWrapper:
        return textwrap.TextWrapper(
            width=self.text_width,
            initial_indent=indent,
            subsequent_indent=indent,
            break_long_words=False,
            break_on_hyphens=False,
        )

    def format_indented(self, text: str, indent: str) -> str:
        """Format ``text`` as indented, word-wrapped paragraphs.

        Args:
            text (str): Free-form diagnostic text.
            indent (str): Prefix for every output line.

        Returns:
            str: The formatted text, newline-terminated, or ``""`` for empty input.
        """
        wrapper: textwrap.TextWrapper = self._wrapper(indent)
        out: list[str] = []
        blank_pending = False

        for line in text.splitlines():
            if not line.strip():
                blank_pending = bool(out)
                continue
            if blank_pending:
                out.append("")
                blank_pending = False
            if line.startswith(" "):
                out.append(indent + line.rstrip())
            else:
                out.extend(wrapper.wrap(line.strip()))

        return "\n".join(out) + "\n" if out else ""
