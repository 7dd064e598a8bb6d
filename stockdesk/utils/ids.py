"""ID and timestamp helpers for collection records.

Provides:
- ``new_record_id(taken)``: millisecond timestamp id, bumped past any id in ``taken``.
- ``parse_record_id(raw)``: parse a URL segment into an id, ``None`` if malformed.
- ``utc_now_iso()``: current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.
"""

from __future__ import annotations

import re
import time
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

# Plain ASCII decimal, optionally negative
_ID_RE = re.compile(r"-?[0-9]+")


def new_record_id(taken: Iterable[Any] = ()) -> int:
    """Generate a record id from the current time in milliseconds.

    Two creates within the same millisecond would otherwise share an id,
    so the value is incremented until it is not in ``taken``.
    """
    used = {t for t in taken if isinstance(t, int)}
    rid = int(time.time() * 1000)
    while rid in used:
        rid += 1
    return rid


def parse_record_id(raw: Any) -> Optional[int]:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    text = str(raw).strip() if raw is not None else ""
    if not _ID_RE.fullmatch(text):
        return None
    return int(text)


def utc_now_iso() -> str:
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
