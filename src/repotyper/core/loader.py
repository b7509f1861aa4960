"""Project loading - read a folder of source files into practice chunks"""

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from repotyper.core.chunking import split_into_chunks
from repotyper.core.comments import remove_comments
from repotyper.core.languages import detect_language, is_code_file, should_ignore_dir
from repotyper.models.project import Project, SourceFile


logger = logging.getLogger(__name__)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF"""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def process_text(path: str, text: str, language: Optional[str] = None) -> SourceFile:
    """Run the strip-and-chunk pipeline over already-read text.

    Args:
        path: Relative path used to identify the file
        text: Raw file text
        language: Language id; detected from the path when omitted
    """
    language = language or detect_language(path)
    original = normalize_line_endings(text)
    content = remove_comments(original, language)
    chunks = split_into_chunks(content, language)

    logger.debug("%s: %s, %d chunk(s)", path, language, len(chunks))

    return SourceFile(
        path=path,
        name=Path(path).name,
        language=language,
        original_content=original,
        content=content,
        chunks=chunks,
    )


def load_file(file_path: Path, root: Optional[Path] = None, language: Optional[str] = None) -> SourceFile:
    """Read one file and split it into chunks.

    Raises:
        OSError: If the file cannot be read
    """
    relative = file_path.relative_to(root) if root is not None else Path(file_path.name)
    text = file_path.read_bytes().decode("utf-8", errors="replace")
    return process_text(relative.as_posix(), text, language)


def discover_files(folder: Path) -> List[Path]:
    """List practice files under a folder in a stable order.

    Ignored and hidden directories are pruned; non-code files skipped.
    """
    found: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(folder):
        dirnames[:] = sorted(d for d in dirnames if not should_ignore_dir(d))
        for filename in sorted(filenames):
            if is_code_file(filename):
                found.append(Path(dirpath) / filename)
    return found


def _load_or_skip(file_path: Path, root: Path) -> Optional[SourceFile]:
    try:
        return load_file(file_path, root)
    except OSError as e:
        logger.warning("Skipping unreadable file %s: %s", file_path, e)
        return None


def load_project(folder: Path) -> Project:
    """Load every practice file under a folder"""
    folder = Path(folder)
    files = [_load_or_skip(p, folder) for p in discover_files(folder)]
    return _build_project(folder, files)


async def load_project_async(folder: Path) -> Project:
    """Load a project, processing files concurrently in worker threads"""
    folder = Path(folder)
    files = await asyncio.gather(
        *(asyncio.to_thread(_load_or_skip, p, folder) for p in discover_files(folder))
    )
    return _build_project(folder, list(files))


def _build_project(folder: Path, files: List[Optional[SourceFile]]) -> Project:
    loaded = [f for f in files if f is not None]
    logger.info(
        "Loaded %d file(s), %d chunk(s) from %s",
        len(loaded),
        sum(len(f.chunks) for f in loaded),
        folder,
    )
    return Project(name=folder.name or str(folder), root=str(folder), files=loaded)
