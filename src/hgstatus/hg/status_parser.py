"""Parser for ``hg status -C`` and ``hg resolve --list`` output.

Each entry is ``<code> <path>``. With ``-C`` a copied or renamed file is
followed by an indented line naming its source::

    A new_name.py
      old_name.py
    R old_name.py
"""

from __future__ import annotations

import re
from dataclasses import replace

from hgstatus.hg.models import FileStatus

_ENTRY_RE = re.compile(r"^(\S) (.+)$")
_SOURCE_RE = re.compile(r"^  (.+)$")


def parse_status_lines(text: str) -> list[FileStatus]:
    """Return the FileStatus entries described by *text*."""
    entries: list[FileStatus] = []
    for raw_line in text.splitlines():
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue

        sm = _SOURCE_RE.match(line)
        if sm:
            # Source line with nothing to attach to is noise
            if entries:
                entries[-1] = replace(entries[-1], rename=sm.group(1))
            continue

        m = _ENTRY_RE.match(line)
        if m:
            entries.append(FileStatus(path=m.group(2), status=m.group(1)))
    return entries
