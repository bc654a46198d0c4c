"""File extension to MIME type lookup."""
from types import MappingProxyType

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Keys are matched exactly: "PDF" is not "pdf"
CONTENT_TYPES = MappingProxyType({
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/x-png",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "doc": "application/msword",
    "pdf": "application/pdf",
    "txt": "text/plain",
    "rtf": "application/rtf",
})


def to_content_type(file_extension: str) -> str:
    """Return the MIME type for an extension without the leading dot."""
    return CONTENT_TYPES.get(file_extension.strip(), DEFAULT_CONTENT_TYPE)
