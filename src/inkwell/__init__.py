"""inkwell — serve a directory of markdown pages as HTML.

Pages live in ``<docs>/<title>.md`` and are rendered into a single page
template on every request.  Static assets are served from ``/static/``.

Basic usage::

    from inkwell import App, ServerConfig

    app = App(ServerConfig(docs_dir="docs", static_dir="static"))
    app.run()

Or from the command line::

    inkwell --port 8000 --docs docs --template templates/default.mustache
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "BadRequest",
    "ConfigurationError",
    "InkwellError",
    "NotFound",
    "Page",
    "PageStore",
    "Request",
    "Response",
    "ServerConfig",
    "Template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import inkwell`` fast while providing a clean top-level API.
    """
    if name == "App":
        from inkwell.app import App

        return App

    if name == "ServerConfig":
        from inkwell.config import ServerConfig

        return ServerConfig

    if name == "Request":
        from inkwell.http.request import Request

        return Request

    if name == "Response":
        from inkwell.http.response import Response

        return Response

    if name == "Template":
        from inkwell.templating.template import Template

        return Template

    if name in ("Page", "PageStore"):
        from inkwell.pages import store as _store

        return getattr(_store, name)

    if name in ("BadRequest", "ConfigurationError", "InkwellError", "NotFound"):
        from inkwell import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
