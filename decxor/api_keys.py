"""Key and in-memory convenience wrappers."""

from .main import decxor


def derive_key(decimal: str):
    return decxor.derive_key(decimal)


def key_fingerprint(key: bytes):
    return decxor.key_fingerprint(key)


def transform_bytes(data: bytes, key: str | bytes, direction: str):
    return decxor.transform_bytes(data, key, direction)


def obfuscate_bytes(data: bytes, key: str | bytes):
    return decxor.transform_bytes(data, key, "enc")


def reveal_bytes(data: bytes, key: str | bytes):
    return decxor.transform_bytes(data, key, "dec")


def output_name(name: str, direction: str, suffix: str = decxor.ENC_SUFFIX):
    return decxor.output_name(name, direction, suffix)


__all__ = [
    "derive_key",
    "key_fingerprint",
    "obfuscate_bytes",
    "output_name",
    "reveal_bytes",
    "transform_bytes",
]
