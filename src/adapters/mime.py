import mimetypes


class MimetypesLookup:
    """MIME lookup backed by the system mimetypes table plus rule overrides."""

    def __init__(self, overrides: dict[str, str] | None = None):
        self._overrides = {k.lower().lstrip("."): v for k, v in (overrides or {}).items()}
        self._db = mimetypes.MimeTypes()

    def guess_type(self, file_name: str) -> str | None:
        if not file_name:
            return None

        if "." in file_name:
            ext = file_name.rsplit(".", 1)[1].lower()
            if ext in self._overrides:
                return self._overrides[ext]

        mime_type, _ = self._db.guess_type(file_name, strict=False)
        return mime_type
