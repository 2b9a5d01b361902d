"""Seed helpers: derive a stable per-repository seed.

Python's built-in hash() is salted per process and not stable across runs.
Use a stable hash so the same repository always yields the same city.
"""

from hashlib import blake2s


def derive_seed(name: str, master: int = 0) -> int:
    """Create a stable 32-bit integer seed from a name such as ``owner/repo``."""
    data = f'{int(master)}|{name}'.encode('utf-8')
    digest = blake2s(data, digest_size=4).digest()
    return int.from_bytes(digest, 'big', signed=False)
