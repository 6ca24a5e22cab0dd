"""
Turns operator-supplied topic keys into names the middleware accepts.

A key is reduced to the ``[A-Za-z0-9_]`` alphabet byte by byte, prefixed
with ``ros2_`` and suffixed with a checksum of the original bytes. The
checksum keeps keys that only differ in replaced or truncated bytes apart.

TOPIC_PREFIX : str
    Fixed prefix of every generated name.
MAX_TOPIC_NAME_LENGTH : int
    Upper bound on the length of a generated name.
"""

from typing import Union


TOPIC_PREFIX = "ros2_"
MAX_TOPIC_NAME_LENGTH = 256

CHECKSUM_BASE = 31
CHECKSUM_MODULUS = 1_000_000_007

_ALLOWED_BYTES = frozenset(
    b"abcdefghijklmnopqrstuvwxyz"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"0123456789_"
)


def _as_bytes(raw: Union[str, bytes]) -> bytes:
    if isinstance(raw, bytes):
        return raw
    return raw.encode("utf-8", errors="surrogatepass")


def sanitize(raw: Union[str, bytes]) -> str:
    """
    Replace every byte outside ``[A-Za-z0-9_]`` with a single underscore.

    Works on the UTF-8 encoding, so a multi-byte character becomes one
    underscore per byte. The output is as long as the encoded input.
    """
    return "".join(
        chr(b) if b in _ALLOWED_BYTES else "_"
        for b in _as_bytes(raw)
    )


def checksum(raw: Union[str, bytes]) -> str:
    """
    Rolling base-31 hash of the original bytes, modulo 1,000,000,007.

    Returns
    -------
    str
        Decimal digits without leading zeros; ``"0"`` for empty input.
    """
    total = 0
    for b in _as_bytes(raw):
        total = (total * CHECKSUM_BASE + b) % CHECKSUM_MODULUS
    return str(total)


def normalize_topic_key(raw: Union[str, bytes]) -> str:
    """
    Build the final topic name for a raw topic key.

    The sanitized segment is cut from the tail so that prefix, segment
    and checksum together never exceed ``MAX_TOPIC_NAME_LENGTH``.

    Parameters
    ----------
    raw : str or bytes
        Operator-supplied topic key. Any content is accepted.

    Returns
    -------
    str
        ``"ros2_" + sanitized[:budget] + checksum``.

    Examples
    --------
    >>> normalize_topic_key("ab")
    'ros2_ab3105'
    >>> normalize_topic_key("")
    'ros2_0'
    """
    sanitized = sanitize(raw)
    digest = checksum(raw)

    budget = max(MAX_TOPIC_NAME_LENGTH - len(TOPIC_PREFIX) - len(digest), 0)
    return TOPIC_PREFIX + sanitized[:budget] + digest
