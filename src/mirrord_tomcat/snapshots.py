"""Per-launch store of the configuration state taken before patching."""

import logging

from mirrord_tomcat.models import SavedConfig

log = logging.getLogger(__name__)


class SnapshotStore:
    """Map launch ids to the saved configuration of their launch attempt.

    Single-key ``dict`` assignment and ``dict.pop`` are atomic, so launches
    with different ids never block each other and a take never observes a
    half-written entry.
    """

    def __init__(self) -> None:
        self._saved: dict[str, SavedConfig] = {}

    def put(self, launch_id: str, saved: SavedConfig) -> None:
        if launch_id in self._saved:
            log.debug("replacing snapshot for %s", launch_id)
        self._saved[launch_id] = saved

    def take(self, launch_id: str) -> SavedConfig | None:
        """Remove and return the snapshot for ``launch_id``, if any."""
        return self._saved.pop(launch_id, None)

    def get(self, launch_id: str) -> SavedConfig | None:
        return self._saved.get(launch_id)

    def __contains__(self, launch_id: object) -> bool:
        return launch_id in self._saved

    def __len__(self) -> int:
        return len(self._saved)
