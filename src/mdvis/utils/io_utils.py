#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdvis/utils/io_utils.py
"""Output helpers shared by renderers."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Union


def _is_binary(stream: object) -> bool:
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write ``content`` to a path or an open stream.

    Paths are written as UTF-8 and binary streams receive UTF-8 bytes.

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor something with ``write``

    Examples
    --------
        >>> buffer = io.BytesIO()
        >>> write_content("<p>hi</p>", buffer)
        >>> buffer.getvalue()
        b'<p>hi</p>'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
    elif not hasattr(output, "write"):
        raise TypeError(f"Output must be a path or file-like object, got {type(output).__name__}")
    elif _is_binary(output):
        output.write(content.encode("utf-8"))  # type: ignore[arg-type]
    else:
        output.write(content)  # type: ignore[arg-type]


__all__ = ["write_content"]
