DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".log": "text/plain",
    ".json": "application/json",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".pdf": "application/pdf",
}


def content_type_for(name: str) -> str:
    # Suffix only; file contents are never sniffed
    lower = name.lower()
    for suffix, mime in CONTENT_TYPES.items():
        if lower.endswith(suffix):
            return mime
    return DEFAULT_CONTENT_TYPE
