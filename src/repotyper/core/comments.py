"""Comment stripping - best-effort removal of comments from source text"""

import re
from typing import List, Optional, Pattern, Tuple

from repotyper.core.languages import get_profile
from repotyper.models.language import LanguageProfile


_BLANK_RUN = re.compile(r"\n{3,}")
_QUOTE = re.compile(r"['\"]")


def strip_comments(text: str, profile: Optional[LanguageProfile]) -> str:
    """Remove single-line and block comments from text.

    The scan is line based with a single "inside block comment" flag, so
    nested block comments are not supported and an unterminated block
    comment consumes the rest of the text.

    Args:
        text: Source text with '\\n' line endings
        profile: Comment rules to apply; None returns the text unchanged

    Returns:
        Text without comments, with runs of blank lines collapsed to one
        and surrounding whitespace trimmed
    """
    if profile is None:
        return text

    single_line = [re.compile(p) for p in profile.single_line]
    block_start = re.compile(profile.block_start) if profile.block_start else None
    block_end = re.compile(profile.block_end) if profile.block_end else None

    result: List[str] = []
    # End pattern of the block comment still open, if any
    closer: Optional[Pattern[str]] = None

    for line in text.split("\n"):
        if closer is not None:
            end_match = closer.search(line)
            if end_match is None:
                continue
            line = line[end_match.end():]
            closer = None

        if block_start is not None and block_end is not None:
            line, closer = _strip_block_comments(line, block_start, block_end)

        if any(p.match(line) for p in single_line):
            continue

        if single_line:
            line = _strip_inline_comment(line, profile.inline_markers)

        if line.strip():
            result.append(line)
        elif result and result[-1].strip():
            result.append(line)

    joined = _BLANK_RUN.sub("\n\n", "\n".join(result))
    return joined.strip()


def remove_comments(text: str, language: str) -> str:
    """Strip comments using the registered profile for a language"""
    return strip_comments(text, get_profile(language))


def _strip_block_comments(
    line: str, start: Pattern[str], end: Pattern[str]
) -> Tuple[str, Optional[Pattern[str]]]:
    """Remove block comments opened on this line.

    When start and end share one pattern (Python's triple quotes) the
    block only closes on the same delimiter that opened it.

    Returns:
        (remaining line, end pattern of a block comment still open or None)
    """
    while True:
        start_match = start.search(line)
        if start_match is None:
            return line, None
        closer = end
        if start.pattern == end.pattern:
            closer = re.compile(re.escape(start_match.group(0)))
        end_match = closer.search(line, start_match.end())
        if end_match is None:
            return line[:start_match.start()], closer
        line = line[:start_match.start()] + line[end_match.end():]


def _strip_inline_comment(line: str, markers: Tuple[str, ...]) -> str:
    """Truncate a trailing comment that follows code on the same line.

    A marker right after ':' is part of a URL, and a marker with an odd
    number of quotes before it is taken to sit inside a string literal.
    """
    if line.startswith("#!"):
        return line

    cut = None
    for marker in markers:
        pos = line.find(marker)
        while pos != -1:
            if (pos == 0 or line[pos - 1] != ":") and _even_quotes(line[:pos]):
                if cut is None or pos < cut:
                    cut = pos
                break
            pos = line.find(marker, pos + 1)

    if cut is None:
        return line
    return line[:cut]


def _even_quotes(text: str) -> bool:
    return len(_QUOTE.findall(text)) % 2 == 0
