import hashlib
import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("pagewindow")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_key(key: Any) -> str:
    """
    Redacts entry keys for logging.
    Keys are usually user or group identities, so the values are hashed
    to allow correlation without revealing them.
    """
    if key is None:
        return "<none>"
    try:
        if isinstance(key, tuple):
            # Composite keys such as (name, domain): hash every part separately
            return str(
                tuple(hashlib.sha256(str(part).encode("utf-8")).hexdigest()[:8] for part in key)
            )
        return hashlib.sha256(str(key).encode("utf-8")).hexdigest()[:8]
    except Exception:
        return "<redaction_failed>"
