# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Safe filesystem operations for aocrun.

The input cache treats "a file exists at the cache path" as "the input is
valid", so a half-written download must never appear under that name.
Writes therefore go to a temporary file in the same directory and are renamed
into place. Rename on the same filesystem is atomic on POSIX: a reader sees
either no file or the complete one.
"""

import tempfile
from pathlib import Path

_TEMP_PREFIX = ".aocrun_tmp_"


def atomic_write_bytes(target_path: Path, data: bytes) -> None:
    """
    Write binary data to a file atomically, creating parent directories.

    Bytes are written untouched (no newline translation), so the file holds
    exactly what the caller passed in.

    Args:
        target_path: Where the final file should end up.
        data: The raw bytes to write.

    Raises:
        OSError: If the write or rename fails. The temp file is removed and
                 the target path is left untouched.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # delete=False because the file has to survive closing so we can rename it.
    temp_fd = tempfile.NamedTemporaryFile(
        mode="wb",
        dir=str(target_path.parent),
        prefix=_TEMP_PREFIX,
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_fd.name)

    try:
        temp_fd.write(data)
        temp_fd.flush()
        temp_fd.close()
        temp_path.replace(target_path)
    except BaseException:
        temp_fd.close()
        if temp_path.exists():
            temp_path.unlink()
        raise


def safe_read(file_path: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file with proper error context.

    Newlines are returned exactly as stored; puzzle inputs are handed to
    solutions byte-for-byte.

    Raises:
        FileNotFoundError: If the path doesn't exist.
        IsADirectoryError: If the path is a directory.
        OSError: For other I/O errors.
        UnicodeDecodeError: If the content isn't valid text in `encoding`.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise IsADirectoryError(f"Expected a file, got a directory: {file_path}")
    with file_path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()
