"""
Staged content scanner used by the pre-commit hook.

Per file:
- size above MAX_FILE_SIZE blocks the commit
- a line that looks like a hardcoded credential blocks the commit
- a leftover debug statement is reported as a warning

Every file is scanned even after an earlier failure so the operator sees
all problems at once.
"""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from gitguard.shared.constants import MAX_FILE_SIZE
from gitguard.shared.utils.format import human_readable_size
from gitguard.validation.domain.result import ValidationResult

logger = structlog.get_logger(__name__)

SIZE_CHECK_ID = "large-file"
SECRET_CHECK_ID = "hardcoded-secret"
DEBUG_CHECK_ID = "debug-statement"

SECRET_PATTERNS = [
    (re.compile(r"password\s*=\s*['\"][^'\"]+['\"]", re.IGNORECASE), "Hardcoded password"),
    (re.compile(r"api[_-]?key\s*=\s*['\"][^'\"]+['\"]", re.IGNORECASE), "Hardcoded API key"),
    (re.compile(r"secret\s*=\s*['\"][^'\"]+['\"]", re.IGNORECASE), "Hardcoded secret"),
    (re.compile(r"token\s*=\s*['\"][^'\"]+['\"]", re.IGNORECASE), "Hardcoded token"),
    (re.compile(r"AKIA[0-9A-Z]{16}", re.IGNORECASE), "AWS access key"),
    (re.compile(r"sk_live_[0-9a-zA-Z]{24}", re.IGNORECASE), "Stripe live secret key"),
]

DEBUG_PATTERNS = [
    (re.compile(r"console\.log"), "console.log"),
    (re.compile(r"print\("), "print()"),
    (re.compile(r"debugger"), "debugger"),
    (re.compile(r"binding\.pry"), "binding.pry"),
    (re.compile(r"import pdb"), "import pdb"),
]

# Longest chunk handed to the patterns at once
_MAX_LINE_BYTES = 64 * 1024


def check_file_size(path: str, size: int) -> ValidationResult:
    """FAIL when size is strictly above MAX_FILE_SIZE."""
    result = ValidationResult()
    if size > MAX_FILE_SIZE:
        result.fail(
            SIZE_CHECK_ID,
            f"File too large ({human_readable_size(size)} > {human_readable_size(MAX_FILE_SIZE)})",
            path=path,
        )
    return result


def _first_match(line: str, patterns: list[tuple[re.Pattern, str]]) -> str | None:
    for compiled, description in patterns:
        if compiled.search(line):
            return description
    return None


def _match_lines(
    lines: Iterable[str], patterns: list[tuple[re.Pattern, str]]
) -> Iterator[tuple[int, str]]:
    """Yield (line number, description) for every line matching a pattern."""
    for line_num, line in enumerate(lines, start=1):
        description = _first_match(line, patterns)
        if description is not None:
            yield line_num, description


def find_secrets(lines: Iterable[str]) -> list[tuple[int, str]]:
    return list(_match_lines(lines, SECRET_PATTERNS))


def find_debug_statements(lines: Iterable[str]) -> list[tuple[int, str]]:
    return list(_match_lines(lines, DEBUG_PATTERNS))


def _read_lines(path: Path) -> Iterator[tuple[int, str]]:
    """
    Yield (line number, text) pairs from a file opened in binary mode.

    A line longer than _MAX_LINE_BYTES comes out as several chunks that
    share its line number, so memory stays bounded on minified or
    newline-free blobs. Binary content is decoded with replacement
    rather than skipped.
    """
    line_num = 1
    with path.open("rb") as f:
        for raw in iter(lambda: f.readline(_MAX_LINE_BYTES), b""):
            yield line_num, raw.decode("utf-8", errors="replace")
            if raw.endswith(b"\n"):
                line_num += 1


def contains_secrets(path: str | Path) -> bool:
    return any(_first_match(chunk, SECRET_PATTERNS) for _, chunk in _read_lines(Path(path)))


def contains_debug(path: str | Path) -> bool:
    return any(_first_match(chunk, DEBUG_PATTERNS) for _, chunk in _read_lines(Path(path)))


def scan_file(path: str | Path, display_path: str | None = None) -> ValidationResult:
    """
    Run the size, secret and debug checks on one file.

    Paths that are not regular files (deleted since staging, directories,
    dangling symlinks) are skipped.

    Args:
        path: File to read.
        display_path: Name used in findings (default: str(path)).

    Returns:
        ValidationResult with every finding for this file.
    """
    file_path = Path(path)
    name = display_path or str(path)
    result = ValidationResult()

    if not file_path.is_file():
        logger.debug("scan_skipped_not_a_file", path=name)
        return result

    result.merge(check_file_size(name, file_path.stat().st_size))

    secrets = []
    debug = []
    for line_num, chunk in _read_lines(file_path):
        secret = _first_match(chunk, SECRET_PATTERNS)
        # A long line read in chunks still yields one finding per line
        if secret is not None and (not secrets or secrets[-1][0] != line_num):
            secrets.append((line_num, secret))
        statement = _first_match(chunk, DEBUG_PATTERNS)
        if statement is not None and (not debug or debug[-1][0] != line_num):
            debug.append((line_num, statement))

    for line_num, description in secrets:
        result.fail(SECRET_CHECK_ID, f"{description} detected", path=name, line=line_num)
    for line_num, description in debug:
        result.warn(DEBUG_CHECK_ID, f"Debug statement found: {description}", path=name, line=line_num)

    logger.debug(
        "file_scanned",
        path=name,
        secrets=len(secrets),
        debug_statements=len(debug),
    )
    return result


def scan_files(paths: Iterable[str], root: str | Path | None = None) -> ValidationResult:
    """
    Scan every staged path, relative to root when given.

    Never stops early: findings from all files are collected.
    """
    base = Path(root) if root is not None else None
    result = ValidationResult()
    for rel_path in paths:
        file_path = base / rel_path if base is not None else Path(rel_path)
        result.merge(scan_file(file_path, display_path=rel_path))
    return result
