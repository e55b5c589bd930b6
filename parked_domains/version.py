"""Build metadata printed by ``parkeddomains -version``.

``BUILD_DATE`` and ``GIT_COMMIT`` are stamped by the release job; source
checkouts report ``unknown``.
"""
import platform

from parked_domains import __version__

BUILD_DATE = "unknown"
GIT_COMMIT = "unknown"


def build_info() -> dict[str, str]:
    return {
        "Build Date": BUILD_DATE,
        "Git Commit": GIT_COMMIT,
        "Version": __version__,
        "Python Version": platform.python_version(),
        "OS / Arch": f"{platform.system().lower()}/{platform.machine().lower()}",
    }
