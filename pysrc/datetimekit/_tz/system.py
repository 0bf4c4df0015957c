import os
import os.path
import platform
from typing import Literal, NamedTuple, Optional

SYSTEM = platform.system()
LOCALTIME = "/etc/localtime"


class SystemZone(NamedTuple):
    """Where the system zone comes from.

    ``source`` is one of:
        - ``"key"``: an IANA zone key
        - ``"file"``: path to a TZif file (key unknown)
        - ``"key_or_posix"``: an IANA key or a POSIX TZ string (unknown which)
    """

    source: Literal["key", "file", "key_or_posix"]
    value: str


# On unix-like systems the zone follows from the /etc/localtime symlink.
# Elsewhere, we use the tzlocal package.
if SYSTEM in ("Linux", "Darwin"):  # pragma: no cover

    def _from_platform() -> SystemZone:
        tzif_path = os.path.realpath(LOCALTIME)
        if tzif_path == LOCALTIME:
            # Not a symlink: we can't determine the key
            return SystemZone("file", LOCALTIME)

        if (key := key_from_path(tzif_path)) is None:
            return SystemZone("file", tzif_path)
        return SystemZone("key", key)

else:  # pragma: no cover
    import tzlocal

    def _from_platform() -> SystemZone:
        return SystemZone("key", tzlocal.get_localzone_name())


def key_from_path(path: str) -> Optional[str]:
    """Find the IANA zone key from a path to a zoneinfo file.
    Returns None if the path is not in a zoneinfo directory.
    """
    # e.g. `zoneinfo/` or `zoneinfo.default/`
    if (index := path.find("/", path.rfind("zoneinfo"))) == -1:
        return None
    return path[index + 1 :]


def read() -> SystemZone:
    """Determine the system zone, giving the ``TZ`` variable precedence"""
    try:
        tz_env = os.environ["TZ"]
    except KeyError:  # pragma: no cover
        return _from_platform()

    tz_env = tz_env.removeprefix(":")
    if not tz_env:
        # An empty TZ means UTC to the C library too
        return SystemZone("key", "UTC")
    elif os.path.isabs(tz_env):
        return SystemZone("file", tz_env)
    # A digit suggests a POSIX TZ string, although keys like
    # "Etc/GMT+5" contain digits too.
    elif any(c.isdigit() for c in tz_env):
        return SystemZone("key_or_posix", tz_env)
    else:
        return SystemZone("key", tz_env)
