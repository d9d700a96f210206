"""Redaction helpers for values that reach the report."""

from __future__ import annotations

import re

MASK = "***"

# scheme://<userinfo>@rest ; greedy up to the last "@" before the first "/".
_USERINFO_RE = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*://)[^/]*@")


def sanitize_url(url: str) -> str:
    """Replace credentials embedded before "@" with the fixed mask."""
    return _USERINFO_RE.sub(lambda m: f"{m.group('scheme')}{MASK}@", url.strip(), count=1)


def presence(value: str | None, present: str = "Set", absent: str = "Not set") -> str:
    """Render only whether a sensitive value exists, never the value itself."""
    return present if value else absent
