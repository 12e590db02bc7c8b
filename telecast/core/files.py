"""InputFile — a local file (path, bytes or open stream) to upload with a request."""

from __future__ import annotations

import io
import mimetypes
import os
from typing import BinaryIO, Union

Source = Union[str, "os.PathLike[str]", bytes, BinaryIO]


class InputFile:
    """Wrap an upload so the request layer can send it as multipart form data.

    Strings are treated as filesystem paths here; to reference a file that
    already lives on Telegram's servers (``file_id``) or a URL, pass the plain
    string as the argument instead of an ``InputFile``.
    """

    def __init__(self, source: Source, filename: str | None = None, mime_type: str | None = None) -> None:
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            if not os.path.isfile(path):
                raise FileNotFoundError(f"Upload source not found: {path}")
            self._path: str | None = path
            self._data: bytes | None = None
            self._stream: BinaryIO | None = None
            default_name = os.path.basename(path)
        elif isinstance(source, bytes):
            self._path, self._data, self._stream = None, source, None
            default_name = "file"
        elif hasattr(source, "read"):
            self._path, self._data, self._stream = None, None, source
            default_name = os.path.basename(getattr(source, "name", "") or "file")
        else:
            raise TypeError(f"Unsupported upload source: {type(source).__name__}")

        self.filename = filename or default_name
        self.mime_type = (
            mime_type
            or mimetypes.guess_type(self.filename)[0]
            or "application/octet-stream"
        )

    def read(self) -> bytes:
        """Return the full upload payload."""
        if self._path is not None:
            with open(self._path, "rb") as f:
                return f.read()
        if self._stream is not None:
            return self._stream.read()
        return self._data or b""

    def as_multipart(self) -> tuple[str, BinaryIO, str]:
        """Return the ``(filename, stream, content_type)`` tuple ``requests`` expects."""
        return self.filename, io.BytesIO(self.read()), self.mime_type

    def __repr__(self) -> str:
        return f"InputFile({self.filename!r}, {self.mime_type!r})"
