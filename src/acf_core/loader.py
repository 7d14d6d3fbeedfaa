"""Entry points: parse ACF text, streams and files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO

from .document import Document
from .errors import GrammarError, ParseError, ReadError
from .options import ParseOptions
from .parser import parse_document

logger = logging.getLogger(__name__)


def loads(text: str, options: ParseOptions | None = None) -> Document:
    """Parse ACF *text* into a :class:`Document`.

    Raises :class:`ParseError` on malformed input; a partial document is
    never returned.
    """
    if not isinstance(text, str):
        raise TypeError(f"can only parse a str as ACF but got {type(text).__name__}")
    options = options or ParseOptions()

    logger.debug(f"Parsing {len(text)} characters of ACF text")
    try:
        document = parse_document(text, options)
    except GrammarError as exc:
        line, column = exc.span.location(text)
        logger.warning(f"ACF parse error at {line}:{column} ({exc.kind.name}): {exc}")
        raise ParseError(exc) from exc
    logger.debug(f"Parsed {len(document)} top-level block(s)")
    return document


def load(fp: IO[str], options: ParseOptions | None = None) -> Document:
    """Parse the contents of an open text stream.

    A stream that fails to read raises :class:`ReadError` named after
    the stream.
    """
    try:
        text = fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        name = getattr(fp, "name", repr(fp))
        logger.warning(f"Failed to read ACF stream {name}: {exc}")
        raise ReadError(str(name)) from None
    return loads(text, options)


def parse_acf(path: str | os.PathLike[str], options: ParseOptions | None = None) -> Document:
    """Read the file at *path* and parse it.

    Line endings are kept as stored. Any failure to obtain the text
    (missing file, permissions, bad encoding) raises :class:`ReadError`
    naming *path*.
    """
    options = options or ParseOptions()
    try:
        text = Path(path).read_bytes().decode(options.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Failed to read ACF file {path}: {exc}")
        raise ReadError(os.fspath(path)) from None
    return loads(text, options)
