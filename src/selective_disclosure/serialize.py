"""
selective_disclosure/serialize.py
Deterministic encoding helpers for stores and results.
"""
import hashlib
import hmac
import json
from typing import Any

HASH_ALGORITHM = 'sha256'


def canonical_json(data: Any) -> bytes:
    """Produce deterministic JSON for hashing and storage.

    Identical input always produces identical output regardless of
    dict ordering or whitespace.

    Args:
        data: Any JSON-serializable Python object

    Returns:
        UTF-8 encoded canonical JSON bytes
    """
    return json.dumps(
        data,
        sort_keys=True,
        separators=(',', ':'),
        ensure_ascii=False
    ).encode('utf-8')


def fingerprint(data: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of ``data``.

    This is a content fingerprint an attestation layer can bind to,
    not a commitment scheme.
    """
    return hashlib.new(HASH_ALGORITHM, canonical_json(data)).hexdigest()


def fingerprints_match(a: str, b: str) -> bool:
    """Compare two hex fingerprints in constant time."""
    return hmac.compare_digest(a.encode('ascii'), b.encode('ascii'))


def encode_payload(value: Any) -> dict:
    """Encode an opaque payload for JSON: str as-is, bytes as hex."""
    if isinstance(value, bytes):
        return {'value_hex': value.hex()}
    return {'value': value}


def decode_payload(entry: dict) -> Any:
    """Inverse of ``encode_payload``."""
    if 'value_hex' in entry:
        return bytes.fromhex(entry['value_hex'])
    return entry['value']
