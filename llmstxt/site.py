"""Site configuration for the tollbooth documentation exports.

Defaults describe the published tollbooth docs site.  The site origin can be
overridden with the ``LLMSTXT_SITE`` environment variable so that preview
deployments link to themselves instead of production.
"""

from __future__ import annotations

import os

from llmstxt.models import ExportSettings

DEFAULT_SITE_ORIGIN = "https://docs.tollbooth.loa212.com"

DEFAULT_TITLE = "tollbooth docs"

DEFAULT_SUMMARY = (
    "Documentation for tollbooth — an x402 payment gateway that turns any API "
    "into a paid API with one line of config."
)

# Mirrors the sidebar.  FULL_ORDER omits the streaming guide, so in the full
# dump that page lands among the trailing extras.
INDEX_ORDER: tuple[str, ...] = (
    "welcome",
    "getting-started",
    "guides/dynamic-pricing",
    "guides/streaming-sse",
    "guides/local-testing",
    "guides/how-x402-works",
    "guides/refund-protection",
    "deploy",
    "deploy/fly-io",
    "deploy/railway",
    "deploy/production",
    "deploy/cloudflare-workers",
    "reference/configuration",
    "reference/cli",
    "examples/ai-api-reseller",
    "examples/video-streaming-paywall",
    "examples/multi-upstream-gateway",
)

FULL_ORDER: tuple[str, ...] = tuple(i for i in INDEX_ORDER if i != "guides/streaming-sse")


def load_export_settings(site_origin: str | None = None) -> ExportSettings:
    """Build the ExportSettings for this deployment.

    An explicit *site_origin* wins over ``LLMSTXT_SITE``, which wins over
    the built-in default.
    """
    origin = site_origin or os.environ.get("LLMSTXT_SITE", "").strip() or DEFAULT_SITE_ORIGIN
    return ExportSettings(
        title=DEFAULT_TITLE,
        summary=DEFAULT_SUMMARY,
        site_origin=origin,
        index_order=INDEX_ORDER,
        full_order=FULL_ORDER,
    )
