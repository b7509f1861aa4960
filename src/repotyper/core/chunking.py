"""Chunk segmentation - split normalized source into typing-sized sections"""

import re
from typing import List, Optional, Pattern

from repotyper.models.chunk import Chunk


CHUNK_SIZE = 40
MIN_BREAK_GAP = CHUNK_SIZE / 3
MIN_CHUNK_SPAN = CHUNK_SIZE / 2
TITLE_SCAN_LINES = 10

# Declarations that make a good place to start a new chunk
BOUNDARY_PATTERNS = [
    # JS / TS
    re.compile(r"^(export\s+)?(async\s+)?function\s+\w+"),
    re.compile(r"^(export\s+)?(const|let|var)\s+\w+\s*=\s*(async\s+)?\("),
    re.compile(r"^(export\s+)?(const|let|var)\s+\w+\s*=\s*(async\s+)?function"),
    re.compile(r"^(export\s+)?class\s+\w+"),
    re.compile(r"^(export\s+)?interface\s+\w+"),
    re.compile(r"^(export\s+)?type\s+\w+"),
    # Python
    re.compile(r"^(async\s+)?def\s+\w+"),
    re.compile(r"^class\s+\w+"),
    # Rust
    re.compile(r"^(pub\s+)?(async\s+)?fn\s+\w+"),
    re.compile(r"^impl\s+"),
    re.compile(r"^(pub\s+)?struct\s+\w+"),
    # Go
    re.compile(r"^func\s+"),
    re.compile(r"^type\s+\w+"),
]

# (kind, pattern) in priority order; group "name" is the title subject
TITLE_PATTERNS = [
    ("Function", re.compile(r"function\s+(?P<name>\w+)")),
    ("Function", re.compile(r"(const|let|var)\s+(?P<name>\w+)\s*=\s*(async\s+)?\(")),
    ("Class", re.compile(r"class\s+(?P<name>\w+)")),
    ("Interface", re.compile(r"interface\s+(?P<name>\w+)")),
    ("Type", re.compile(r"type\s+(?P<name>\w+)")),
    ("Function", re.compile(r"def\s+(?P<name>\w+)")),
    ("Function", re.compile(r"fn\s+(?P<name>\w+)")),
    ("Implementation", re.compile(r"impl\s+(?P<name>\w+)")),
    ("Struct", re.compile(r"struct\s+(?P<name>\w+)")),
    ("Function", re.compile(r"func\s+(?P<name>\w+)")),
]

_IMPORT = re.compile(r"^import\s|^from\s.*import|^require\(")
_EXPORT = re.compile(r"^export\s")
_FUNCTION = re.compile(r"function\s+\w+|=>\s*\{|def\s+\w+|fn\s+\w+|func\s+\w+")
_CLASS = re.compile(r"^(export\s+)?class\s+\w+")
_INTERFACE = re.compile(r"^(export\s+)?interface\s+\w+")
_HOOK = re.compile(r"use[A-Z]\w+")
_ASYNC = re.compile(r"async\s+")

DESCRIPTION_SEPARATOR = " • "
MAX_HOOKS_SHOWN = 3


def make_chunk_id(index: int) -> str:
    """Generate the id of the chunk at a 0-based position"""
    return f"chunk_{index + 1:03d}"


def split_into_chunks(text: str, language: str) -> List[Chunk]:
    """Split normalized text into ordered chunks.

    Files of at most CHUNK_SIZE lines become a single "Complete File"
    chunk. Longer files are cut at declaration boundaries or, failing
    that, every CHUNK_SIZE lines at brace depth zero. Every chunk except
    the last keeps its trailing newline, so joining the contents gives
    back the input text.
    """
    lines = text.split("\n")

    if len(lines) <= CHUNK_SIZE:
        return [
            Chunk(
                id=make_chunk_id(0),
                content=text,
                start_line=1,
                end_line=len(lines),
                title="Complete File",
                description=describe_code(text, language),
            )
        ]

    chunks: List[Chunk] = []
    start = 0
    breakpoints = find_breakpoints(lines)

    for i, breakpoint in enumerate(breakpoints):
        is_last = i == len(breakpoints) - 1
        if breakpoint - start >= MIN_CHUNK_SPAN or is_last:
            chunks.append(_build_chunk(lines, start, breakpoint, len(chunks), language))
            start = breakpoint + 1

    if start < len(lines):
        chunks.append(_build_chunk(lines, start, len(lines) - 1, len(chunks), language))

    return chunks


def find_breakpoints(lines: List[str]) -> List[int]:
    """Find 0-based line indices that end a logical section.

    The last line of the file is always included.
    """
    breakpoints: List[int] = []
    brace_depth = 0
    last_break = 0

    for i, line in enumerate(lines):
        brace_depth += line.count("{") - line.count("}")

        if (
            is_boundary_line(line)
            and brace_depth <= 1
            and i - last_break >= MIN_BREAK_GAP
            and i > 0
        ):
            # Break before the declaration so it opens the next chunk
            breakpoints.append(i - 1)
            last_break = i

        if i - last_break >= CHUNK_SIZE and brace_depth == 0:
            breakpoints.append(i)
            last_break = i

    if not breakpoints or breakpoints[-1] != len(lines) - 1:
        breakpoints.append(len(lines) - 1)

    return breakpoints


def is_boundary_line(line: str) -> bool:
    """Whether a line opens a top-level declaration"""
    trimmed = line.strip()
    return any(p.match(trimmed) for p in BOUNDARY_PATTERNS)


def generate_title(lines: List[str], chunk_number: int) -> str:
    """Title a chunk after the first declaration in its opening lines.

    Args:
        lines: The chunk's lines
        chunk_number: 1-based position of the chunk, used for the fallback
    """
    for line in lines[:TITLE_SCAN_LINES]:
        trimmed = line.strip()
        for kind, pattern in TITLE_PATTERNS:
            match = pattern.search(trimmed)
            if match:
                return f"{kind}: {match.group('name')}"
    return f"Section {chunk_number}"


def describe_code(code: str, language: str) -> str:
    """Summarize what a block of code contains in one line"""
    lines = code.split("\n")
    insights: List[str] = []

    imports = _count_trimmed(lines, _IMPORT)
    if imports:
        insights.append(_plural(imports, "import"))

    exports = _count_trimmed(lines, _EXPORT)
    if exports:
        insights.append(_plural(exports, "export"))

    functions = sum(1 for line in lines if _FUNCTION.search(line))
    if functions:
        insights.append(_plural(functions, "function"))

    classes = _count_trimmed(lines, _CLASS)
    if classes:
        insights.append(_plural(classes, "class", "classes"))

    interfaces = _count_trimmed(lines, _INTERFACE)
    if interfaces:
        insights.append(_plural(interfaces, "interface"))

    hooks = _hook_names(lines)
    if hooks:
        insights.append(f"React hooks: {', '.join(hooks[:MAX_HOOKS_SHOWN])}")

    async_count = len(_ASYNC.findall(code))
    if async_count:
        insights.append(_plural(async_count, "async operation"))

    if not insights:
        insights.append(f"{len(lines)} lines of {language} code")

    return DESCRIPTION_SEPARATOR.join(insights)


def _build_chunk(
    lines: List[str], start: int, end: int, index: int, language: str
) -> Chunk:
    chunk_lines = lines[start:end + 1]
    content = "\n".join(chunk_lines)
    if end < len(lines) - 1:
        content += "\n"
    return Chunk(
        id=make_chunk_id(index),
        content=content,
        start_line=start + 1,
        end_line=end + 1,
        title=generate_title(chunk_lines, index + 1),
        description=describe_code("\n".join(chunk_lines), language),
    )


def _count_trimmed(lines: List[str], pattern: Pattern[str]) -> int:
    return sum(1 for line in lines if pattern.search(line.strip()))


def _hook_names(lines: List[str]) -> List[str]:
    """Distinct hook-like identifiers in order of first appearance"""
    names: List[str] = []
    for line in lines:
        for name in _HOOK.findall(line):
            if name not in names:
                names.append(name)
    return names


def _plural(count: int, word: str, plural: Optional[str] = None) -> str:
    if count == 1:
        return f"{count} {word}"
    return f"{count} {plural or word + 's'}"
