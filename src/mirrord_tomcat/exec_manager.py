"""Ask the mirrord CLI how a launch has to be patched."""

import json
import logging
import os
import subprocess

from pydantic import BaseModel, ValidationError

from mirrord_tomcat.errors import PatchUnavailable
from mirrord_tomcat.models import Patch

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120


class MirrordExecution(BaseModel):
    """Result line printed by ``mirrord ext``."""

    environment: dict[str, str]
    patched_path: str | None = None


class ProgressMessage(BaseModel):
    type: str
    name: str | None = None
    message: str | None = None
    success: bool | None = None


def parse_ext_output(stdout: str) -> Patch | None:
    """Return the patch carried by ``mirrord ext`` output, if any.

    Every line is a JSON object. Progress lines are logged and skipped unless
    they report a failed task, which raises ``PatchUnavailable``.
    """
    for line in stdout.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise PatchUnavailable(f"unexpected mirrord output {line!r}") from e
        if not isinstance(data, dict):
            raise PatchUnavailable(f"unexpected mirrord output {line!r}")
        try:
            if "environment" in data:
                execution = MirrordExecution(**data)
                return Patch(dict(execution.environment), execution.patched_path)
            progress = ProgressMessage(**data)
        except ValidationError as e:
            raise PatchUnavailable(f"invalid mirrord output: {e}") from e
        log.debug("progress %s: %s %s", progress.type, progress.name, progress.message or "")
        if progress.success is False:
            raise PatchUnavailable(progress.message or f"mirrord task {progress.name} failed")
    return None


class CliExecManager:
    """Run ``mirrord ext`` for the script that is about to be launched."""

    def __init__(self, binary: str = "mirrord", timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self.binary = binary
        self.timeout = timeout

    def build_command(
        self, command: str, remote_target: str | None, config_reference: str | None
    ) -> list[str]:
        argv = [self.binary, "ext", "--executable", command]
        if config_reference:
            argv += ["-f", config_reference]
        if remote_target:
            argv = ["wsl", "-d", remote_target, "--", *argv]
        return argv

    def compute_patch(
        self, command: str, remote_target: str | None, config_reference: str | None
    ) -> Patch | None:
        argv = self.build_command(command, remote_target, config_reference)
        log.debug("running %s", argv)
        env = {**os.environ, "MIRRORD_PROGRESS_MODE": "json"}
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                env=env,
            )
        except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError) as e:
            raise PatchUnavailable(f"failed to run {self.binary}: {e}") from e
        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise PatchUnavailable(
                f"{self.binary} ext exited with code {result.returncode}: {detail}"
            )
        patch = parse_ext_output(result.stdout)
        if patch is None:
            log.debug("%s ext returned no patch", self.binary)
        return patch
