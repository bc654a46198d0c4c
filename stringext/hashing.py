"""MD5 digests of strings.

MD5 is kept for compatibility with digests that are already stored
elsewhere. It is not collision resistant and must not be used where
security matters.
"""
import hashlib


def to_md5_hash(input: str) -> str:
    """Return the MD5 digest of the UTF-8 encoded string as 32 lowercase hex digits.

    Lone surrogates are hashed as U+FFFD, so every str has a digest.
    """
    data = input.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return hashlib.md5(data.encode("utf-8")).hexdigest()
