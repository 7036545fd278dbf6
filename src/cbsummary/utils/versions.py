import re
from typing import Tuple

_NUMERIC_PREFIX = re.compile(r"^\s*(\d+(?:\.\d+)*)")

# Servers older than this do not report cpu_cores_available.
CORES_AVAILABLE_SINCE = "6.5"


def version_key(version: str) -> Tuple[int, ...]:
    """
    Numeric key for a server version such as "6.6.0-7909-enterprise".

    Only the leading dotted numbers count; a version without any yields ().
    """
    match = _NUMERIC_PREFIX.match(version or "")
    if not match:
        return ()
    return tuple(int(part) for part in match.group(1).split("."))


def version_at_least(version: str, minimum: str) -> bool:
    """Compares numerically, so "6.10" is newer than "6.5". Unparsable versions count as older."""
    key = version_key(version)
    if not key:
        return False
    return key >= version_key(minimum)


def reports_cpu_cores(version: str) -> bool:
    return version_at_least(version, CORES_AVAILABLE_SINCE)
