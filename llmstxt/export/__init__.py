"""Export pipeline -- page ordering, markup normalization, and text rendering.

Usage::

    from llmstxt.export.ordering import resolve_order
    from llmstxt.export.normalize import normalize
    from llmstxt.export.render import render_index, render_full
    from llmstxt.export.pipeline import export_index, export_full
"""

from __future__ import annotations
