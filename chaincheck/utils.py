import string
import time
from typing import Optional

HASH_HEX_LEN = 64


def now_ts() -> int:
    return int(time.time())


def canonical_hash(value: str) -> str:
    text = value.strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    return text


def hash_key(value) -> Optional[str]:
    """Comparable hex form of a hash given as text or raw digest bytes."""
    if isinstance(value, str):
        return canonical_hash(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    return None


def normalize_hash(value: str) -> str:
    if not isinstance(value, str):
        raise ValueError("hash must be a hex string")
    text = canonical_hash(value)
    if len(text) != HASH_HEX_LEN:
        raise ValueError(f"hash must be {HASH_HEX_LEN} hex digits: {value!r}")
    if any(c not in string.hexdigits for c in text):
        raise ValueError(f"invalid hex hash: {value!r}")
    return text
