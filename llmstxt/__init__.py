"""llmstxt - plain-text exports of the tollbooth docs for crawlers and LLMs.

Serve them::

    uvicorn llmstxt.main:app

or write them as static files::

    llmstxt-build --content-dir src/content/docs --out-dir dist
"""

__version__ = "0.1.0"
