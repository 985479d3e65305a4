"""Access to host internals that have no public accessor.

The server model behind a startup descriptor is only reachable through the
descriptor's owning strategy. Everything that walks those private links lives
here, so a host change surfaces as one ``ReflectiveAccessFailure``.
"""

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from mirrord_tomcat.errors import ReflectiveAccessFailure
from mirrord_tomcat.host import ServerModel

log = logging.getLogger(__name__)

SERVER_MODEL_PATH = ("parent", "server_model")


class ServerModelLocator(Protocol):
    def locate(self, startup_info: Any) -> ServerModel: ...


class AttributeServerModelLocator:
    """Follow a chain of attribute names from the startup descriptor."""

    def __init__(self, path: Sequence[str] = SERVER_MODEL_PATH) -> None:
        self._path = tuple(path)

    def locate(self, startup_info: Any) -> ServerModel:
        current = startup_info
        for name in self._path:
            try:
                current = getattr(current, name)
            except AttributeError as e:
                raise ReflectiveAccessFailure(
                    f"{type(current).__name__} has no attribute {name!r}"
                ) from e
            if current is None:
                raise ReflectiveAccessFailure(f"attribute {name!r} is not set")
        log.debug("located server model %s", type(current).__name__)
        return current
