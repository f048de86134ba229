"""Filesystem checks and I/O for template and output env files."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from prodenv.config import get_settings
from prodenv.errors import MissingFileError, OverwriteError, TemplateDecodeError
from prodenv.services.template import TemplateDocument


logger = logging.getLogger(__name__)


def validate_preconditions(template_path: Path, out_path: Path, force: bool) -> None:
    """Raise if the template is missing or the output would be clobbered."""
    if not template_path.is_file():
        raise MissingFileError(template_path)
    if out_path.is_file() and not force:
        raise OverwriteError(out_path)


def read_template(path: Path) -> TemplateDocument:
    # newline="" keeps CRLF terminators intact for passthrough lines
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return TemplateDocument.from_text(handle.read())
    except UnicodeDecodeError as exc:
        raise TemplateDecodeError(path, str(exc)) from exc


def write_output(path: Path, text: str) -> None:
    """Create or truncate ``path`` with ``text`` and restrict it to the owner."""
    mode = get_settings().OUTPUT_FILE_MODE
    # New files get the restricted mode at creation; existing ones keep theirs until chmod.
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
    logger.info("Wrote %d bytes to %s", len(text.encode("utf-8")), path)

    try:
        os.chmod(path, mode)
    except OSError as exc:
        # Some filesystems (mounted shares, Windows) reject permission changes.
        logger.warning("Could not set permissions %o on %s: %s", mode, path, exc)
