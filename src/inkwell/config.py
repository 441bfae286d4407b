"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, shared by
every worker thread, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from inkwell.errors import ConfigurationError

BAD_TITLE_STATUSES = frozenset({400, 404})


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Server configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(port=3000, docs_dir="wiki", workers=4)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    workers: int = 10  # Size of the pounce worker-thread pool
    log_level: str = "info"

    # Content
    docs_dir: str | Path = "docs"
    static_dir: str | Path = "static"
    template_path: str | Path = "templates/default.mustache"

    # Status used when a page title fails validation (400 or 404)
    bad_title_status: int = 400

    def __post_init__(self) -> None:
        if self.workers < 1:
            msg = f"workers must be at least 1, got {self.workers}"
            raise ConfigurationError(msg)
        if self.bad_title_status not in BAD_TITLE_STATUSES:
            msg = (
                f"bad_title_status must be 400 or 404, got {self.bad_title_status}"
            )
            raise ConfigurationError(msg)
