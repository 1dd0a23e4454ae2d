"""tsinit localization.

Static message tables for every supported language plus the ``Messages``
session object that remembers which language the user picked.

Key names:
    Language   - Supported language codes (``en``, ``pt``)
    MessageId  - Closed set of message identifiers
    MESSAGES   - The table itself
    Messages   - Per-run lookup bound to the active language
"""

from .messages import (
    LANGUAGE_LABELS,
    MESSAGES,
    Language,
    MessageId,
    Messages,
    missing_messages,
)

__all__ = [
    "LANGUAGE_LABELS",
    "MESSAGES",
    "Language",
    "MessageId",
    "Messages",
    "missing_messages",
]
