"""Host platform detection."""

import enum
import platform as _platform


class Platform(str, enum.Enum):
    WINDOWS = "windows"
    MAC = "mac"
    LINUX = "linux"

    @classmethod
    def current(cls) -> "Platform":
        """Return the platform this interpreter runs on."""
        system = _platform.system()
        if system == "Windows":
            return cls.WINDOWS
        if system == "Darwin":
            return cls.MAC
        return cls.LINUX

    @property
    def rewrites_script(self) -> bool:
        """Whether SIP forces launching a patched copy of the startup script."""
        return self is Platform.MAC
