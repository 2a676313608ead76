"""
Source file loading.

Reads a C source file and hands decoded text to the scanner. Open/read
failures and decode failures are reported separately so the CLI can
say which one happened; both share the SourceUnavailableError base.
"""

import logging
from pathlib import Path
from typing import Union

from minicc.errors import SourceDecodeError, SourceOpenError

logger = logging.getLogger(__name__)


def load_source(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Load and decode a source file.

    Line endings are normalized to '\\n' so the scanner only ever sees
    newline as a line separator.

    Args:
        path: Path to the source file
        encoding: Text encoding of the file

    Returns:
        The decoded source text

    Raises:
        SourceOpenError: If the file cannot be opened or read
        SourceDecodeError: If the contents are not valid in `encoding`
    """
    path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceOpenError(str(path), e.strerror) from e

    try:
        text = data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceDecodeError(str(path), encoding) from e

    logger.debug(f"Loaded {len(data)} bytes from {path}")
    return text.replace("\r\n", "\n").replace("\r", "\n")
