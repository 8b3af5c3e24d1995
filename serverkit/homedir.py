"""Home directory lookup for the current user."""

from __future__ import annotations

import os
import stat
import sys


def _windows_home_dir() -> str:
    home = os.environ.get("HOME", "")
    home_drive = os.environ.get("HOMEDRIVE", "")
    home_path = os.environ.get("HOMEPATH", "")
    drive_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = os.environ.get("USERPROFILE", "")

    for candidate in (home, drive_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".apimachinery", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, drive_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        try:
            info = os.stat(candidate)
        except OSError:
            continue
        first_existing = first_existing or candidate
        if stat.S_ISDIR(info.st_mode) and info.st_mode & stat.S_IWUSR:
            return candidate

    return first_existing or first_set


def home_dir() -> str:
    """Return the home directory of the current user, or an empty string.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH and USERPROFILE holding
    ``.apimachinery/config`` wins; otherwise the first writable, then the
    first existing, then the first set of HOME, USERPROFILE, HOMEDRIVE+HOMEPATH.
    """
    if sys.platform != "win32":
        return os.environ.get("HOME", "")
    return _windows_home_dir()