import codecs
from typing import List, Optional

import chardet

from .utils.config import canonical_encoding
from .utils.logger import get_logger

logger = get_logger("encoding")

# Used when no supported encodings are given
DEFAULT_SUPPORTED_ENCODINGS = ("utf-8", "cp1251", "cp866")


def to_byte_array(input: str) -> bytes:
    """
    Return the UTF-16LE code units of the string, two bytes each

    Characters outside the BMP become surrogate pairs and lone surrogates
    are written as-is, matching the in-memory layout of a UTF-16 string.
    """
    return input.encode("utf-16-le", errors="surrogatepass")


class CharsetManager:
    """Decode raw text bytes whose encoding is not known up front."""

    def __init__(self, supported_encodings: Optional[List[str]] = None,
                 default_encoding: str = "utf-8"):
        self.supported_encodings = [
            canonical_encoding(enc) for enc in supported_encodings or DEFAULT_SUPPORTED_ENCODINGS
        ]
        self.default_encoding = canonical_encoding(default_encoding)

    @classmethod
    def from_config(cls, config) -> "CharsetManager":
        return cls(config.charset.supported_encodings, config.charset.default_encoding)

    def detect_encoding(self, data: bytes) -> str:
        if not data:
            return self.default_encoding

        # Legacy Cyrillic code pages almost never form valid UTF-8
        if "utf-8" in self.supported_encodings:
            try:
                data.decode("utf-8")
                return "utf-8"
            except UnicodeDecodeError:
                pass

        result = chardet.detect(data)
        if result and result["encoding"]:
            try:
                encoding = codecs.lookup(result["encoding"]).name
            except LookupError:
                encoding = None
            if encoding in self.supported_encodings:
                logger.debug(
                    f"Detected {encoding} (confidence {result['confidence']:.2f})"
                )
                return encoding

        # Probe in configured order, never outside the supported list
        for encoding in self.supported_encodings:
            try:
                data.decode(encoding)
                return encoding
            except UnicodeDecodeError:
                continue

        return self.default_encoding

    def decode(self, data: bytes) -> str:
        return data.decode(self.detect_encoding(data), errors="replace")
