"""Strip MDX structure from a page body, leaving plain prose.

Tags are matched lexically: a tag runs from ``<`` to the next ``>``.  A
quoted attribute value that contains ``>`` therefore ends the tag early and
leaves the rest of the attribute in the text.  Page bodies are hand-written
docs, so this is accepted.
"""

from __future__ import annotations

import re

_IMPORT_LINE_RE = re.compile(r"^import\s.+$", re.MULTILINE)
_SELF_CLOSING_TAG_RE = re.compile(r"<\w[\w.-]*\b[^>]*/>")
_OPENING_TAG_RE = re.compile(r"<\w[\w.-]*\b[^>]*>")
_CLOSING_TAG_RE = re.compile(r"</\w[\w.-]*>")
_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")


def normalize(raw: str) -> str:
    """Return *raw* with import lines and JSX/HTML tags removed.

    Steps run in order, each over the output of the previous one:
    - drop ``import ...`` lines
    - drop self-closing tags (``<Card ... />``)
    - drop opening tags, keeping the text they wrap
    - drop closing tags
    - collapse 3+ consecutive newlines to 2
    - trim surrounding whitespace
    """
    text = _IMPORT_LINE_RE.sub("", raw)
    text = _SELF_CLOSING_TAG_RE.sub("", text)
    text = _OPENING_TAG_RE.sub("", text)
    text = _CLOSING_TAG_RE.sub("", text)
    text = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
