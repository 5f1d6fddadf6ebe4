"""Mercurial subprocess wrapper — status, parent status, resolve list, merge state."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Optional

from hgstatus.hg.models import FileStatus
from hgstatus.hg.status_parser import parse_status_lines

logger = logging.getLogger(__name__)

DEFAULT_HG = "hg"
DEFAULT_TIMEOUT = 30


class HgError(Exception):
    """Raised when hg is unavailable or returns an unexpected error."""


def _run_hg(
    args: list[str],
    cwd: Path,
    *,
    hg: str = DEFAULT_HG,
    timeout: int = DEFAULT_TIMEOUT,
) -> str:
    """Run an hg command and return stdout. Raises HgError on failure."""
    logger.debug("running %s %s in %s", hg, " ".join(args), cwd)
    env = dict(os.environ, HGPLAIN="1")
    try:
        result = subprocess.run(
            [hg, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except FileNotFoundError:
        raise HgError(f"{hg} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise HgError(f"hg command timed out after {timeout}s: hg {' '.join(args)}")

    if result.returncode != 0:
        stderr = result.stderr.strip()
        # hg exits 1 for "nothing matched", which is not an error
        if not stderr or "abort" not in stderr.lower():
            return result.stdout
        raise HgError(f"hg error: {stderr}")
    return result.stdout


def get_repo_root(
    cwd: Optional[Path] = None, *, hg: str = DEFAULT_HG, timeout: int = DEFAULT_TIMEOUT
) -> Path:
    """Return the root of the enclosing hg repository."""
    cwd = cwd or Path.cwd()
    out = _run_hg(["root"], cwd=cwd, hg=hg, timeout=timeout)
    root = out.strip()
    if not root:
        raise HgError(f"not inside an hg repository: {cwd}")
    return Path(root)


def get_status(
    repo_root: Path,
    *,
    include_ignored: bool = False,
    hg: str = DEFAULT_HG,
    timeout: int = DEFAULT_TIMEOUT,
) -> list[FileStatus]:
    """Return working-copy statuses, with copy sources (``hg status -C``)."""
    args = ["status", "-C"]
    if include_ignored:
        # -i alone narrows the listing to ignored files
        args.append("-mardui")
    return parse_status_lines(_run_hg(args, cwd=repo_root, hg=hg, timeout=timeout))


def get_parent_status(
    repo_root: Path, *, hg: str = DEFAULT_HG, timeout: int = DEFAULT_TIMEOUT
) -> list[FileStatus]:
    """Return the changes the working parent made relative to its own parent."""
    rev = _run_hg(
        ["log", "--rev", ".", "--template", "{rev}"], cwd=repo_root, hg=hg, timeout=timeout
    )
    # Empty repository: the working parent is the null revision
    if rev.strip() in ("", "-1"):
        return []
    output = _run_hg(
        ["status", "-C", "--change", "."], cwd=repo_root, hg=hg, timeout=timeout
    )
    return parse_status_lines(output)


def is_merge_in_progress(
    repo_root: Path, *, hg: str = DEFAULT_HG, timeout: int = DEFAULT_TIMEOUT
) -> bool:
    """Return True when the working copy has a second parent."""
    output = _run_hg(
        ["log", "--rev", "p2()", "--template", "{node}"],
        cwd=repo_root, hg=hg, timeout=timeout,
    )
    return bool(output.strip())


def get_resolve_list(
    repo_root: Path, *, hg: str = DEFAULT_HG, timeout: int = DEFAULT_TIMEOUT
) -> list[FileStatus]:
    """Return the merge-resolution list (``U`` unresolved, ``R`` resolved)."""
    output = _run_hg(["resolve", "--list"], cwd=repo_root, hg=hg, timeout=timeout)
    return parse_status_lines(output)
