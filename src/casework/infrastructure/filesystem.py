"""Filesystem access for the case study content directory.

INVARIANT: Files are truth. Nothing here caches or writes; every call
looks at the directory as it is right now.
"""

from __future__ import annotations

from pathlib import Path

from casework.domain.errors import DocumentNotFoundError, DocumentReadError

# utf-8-sig drops a leading byte-order mark, which editors on Windows add.
DOCUMENT_ENCODING = "utf-8-sig"


def list_document_files(directory: Path, extension: str) -> list[str]:
    """Return filenames in *directory* ending with *extension*.

    A missing directory yields an empty list. Order follows the filesystem
    and carries no meaning.
    """
    if not directory.is_dir():
        return []
    return [
        entry.name
        for entry in directory.iterdir()
        if entry.name.endswith(extension) and entry.is_file()
    ]


def read_document_file(directory: Path, filename: str) -> str:
    """Read one document as UTF-8 text.

    Raises:
        DocumentNotFoundError: The file vanished after discovery.
        DocumentReadError: The file is not valid UTF-8, or the OS refused the read.
    """
    path = directory / filename
    try:
        return path.read_text(encoding=DOCUMENT_ENCODING)
    except FileNotFoundError as exc:
        raise DocumentNotFoundError(filename) from exc
    except UnicodeDecodeError as exc:
        reason = f"not valid UTF-8 (byte {exc.start})"
        raise DocumentReadError(filename, reason) from exc
    except OSError as exc:
        raise DocumentReadError(filename, exc.strerror or str(exc)) from exc
