"""inkwell application class.

Holds configuration during setup.  Frozen at runtime when ``app.run()``
or ``__call__()`` is first invoked: the page template is compiled and the
response composer is built exactly once, then shared read-only by every
worker thread.
"""

import threading
from collections.abc import Callable
from pathlib import Path

from inkwell._internal.asgi import Receive, Scope, Send
from inkwell.config import ServerConfig
from inkwell.pages.store import PageStore
from inkwell.routing.router import Router
from inkwell.server.composer import ResponseComposer
from inkwell.server.handler import handle_request
from inkwell.templating.template import Template


class App:
    """The inkwell application.

    Usage::

        app = App(ServerConfig(docs_dir="wiki", port=3000))
        app.run()

    Thread safety:
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the template, even under free-threading where
        multiple ASGI workers could call ``__call__()`` concurrently on
        first request.  After that nothing is mutated.
    """

    __slots__ = (
        "_composer",
        "_freeze_lock",
        "_frozen",
        "_renderer",
        "_router",
        "_template",
        "config",
    )

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        template: Template | None = None,
        renderer: Callable[[str], str] | None = None,
        router: Router | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._template: Template | None = template
        self._renderer = renderer
        self._router = router
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state — set during _freeze()
        self._composer: ResponseComposer | None = None

    @property
    def template(self) -> Template:
        """The compiled page template (freezes the app on first access)."""
        self._ensure_frozen()
        assert self._template is not None
        return self._template

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Compile the template and serve requests on the worker pool.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        from inkwell.server.run import run_server

        run_server(
            self,
            host or self.config.host,
            port or self.config.port,
            self.config.workers,
            log_level=self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        assert self._composer is not None

        await handle_request(scope, receive, send, composer=self._composer)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so configuration errors (missing
        template, bad route table) surface before the first request.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        cfg = self.config
        if self._template is None:
            self._template = Template.from_path(Path(cfg.template_path))

        store = PageStore(cfg.docs_dir, renderer=self._renderer)
        self._composer = ResponseComposer(
            self._template,
            store,
            cfg.static_dir,
            router=self._router,
            bad_title_status=cfg.bad_title_status,
        )
        self._frozen = True
