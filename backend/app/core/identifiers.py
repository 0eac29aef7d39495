"""Record Identifiers — 24-hex object ids generated at insert time.

Invariants:
    - new_object_id() returns exactly 24 lowercase hex characters
    - Layout: 4-byte unix seconds, 5-byte per-process random, 3-byte counter
    - Ids generated later in the same process sort after earlier ones
      (while the counter does not wrap within one second)

Design Decisions:
    - Same shape as a document-store ObjectId so existing clients keep working
      with 24-character ids (ADR: wire compatibility)
"""

import itertools
import os
import random
import re
import time

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count(random.randint(0, 0xFFFFFF))


def new_object_id() -> str:
    """Generate a new 24-hex record id."""
    seconds = int(time.time()) & 0xFFFFFFFF
    count = next(_counter) & 0xFFFFFF
    raw = (
        seconds.to_bytes(4, "big")
        + _PROCESS_UNIQUE
        + count.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_id(value: object) -> bool:
    """True only for a 24-character hexadecimal string."""
    return isinstance(value, str) and bool(_OBJECT_ID_PATTERN.fullmatch(value))
