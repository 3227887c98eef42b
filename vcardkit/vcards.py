from __future__ import annotations

import logging
from pathlib import Path

from .decoder import Decoder
from .encoder import Encoder
from .models import ContactRecord
from .utils import CRLF

logger = logging.getLogger("vcardkit")


def parse_vcard(text: str) -> ContactRecord:
    """Decode one vCard from already-decoded text.

    The BEGIN/END envelope is optional; only the first card is read.
    """
    return Decoder().decode(text)


def contact_to_vcard(c: ContactRecord) -> str:
    """Serialize ``c`` as a complete single-card vCard, envelope included."""
    body = Encoder().encode(c)
    return "BEGIN:VCARD" + CRLF + body + "END:VCARD" + CRLF


def load_file(
    path: str | Path,
    encoding: str | None = None,
    c: ContactRecord | None = None,
) -> ContactRecord:
    """Read one vCard from ``path`` into ``c`` (a new record by default).

    The file is decoded with ``encoding`` when given, otherwise with
    ``c.encoding_in``. The encoding settings of ``c`` survive the load.
    """
    if c is None:
        c = ContactRecord()
    if encoding:
        c.encoding_in = encoding
    path = Path(path)
    text = path.read_text(encoding=c.encoding_in)
    c.load_data(parse_vcard(text).data)
    logger.info(f"Loaded vCard from {path}")
    return c


def write_file(c: ContactRecord, path: str | Path) -> Path:
    """Write ``c`` to ``path`` using ``c.encoding_out``.

    ``encoding_out="none"`` skips explicit transcoding and uses the
    platform default. Returns the path written.
    """
    path = Path(path)
    text = contact_to_vcard(c)
    # newline="" keeps the CRLF line endings intact
    if c.encoding_out.lower() == "none":
        with open(path, "w", newline="") as f:
            f.write(text)
    else:
        with open(path, "w", encoding=c.encoding_out, newline="") as f:
            f.write(text)
    logger.info(f"Wrote vCard to {path}")
    return path


__all__ = ["parse_vcard", "contact_to_vcard", "load_file", "write_file"]
