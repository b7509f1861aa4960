"""Language table - comment profiles and file classification"""

from pathlib import PurePosixPath
from typing import Dict, Optional

from repotyper.models.language import LanguageProfile


PLAINTEXT = "plaintext"

_C_STYLE_SINGLE = (r"^\s*//.*",)
_HASH_SINGLE = (r"^\s*#.*",)
_C_BLOCK_START = r"/\*"
_C_BLOCK_END = r"\*/"


def _c_style(name: str) -> LanguageProfile:
    return LanguageProfile(
        name=name,
        single_line=_C_STYLE_SINGLE,
        block_start=_C_BLOCK_START,
        block_end=_C_BLOCK_END,
        inline_markers=("//",),
    )


LANGUAGE_PROFILES: Dict[str, LanguageProfile] = {
    "javascript": _c_style("javascript"),
    "typescript": _c_style("typescript"),
    "jsx": _c_style("jsx"),
    "tsx": _c_style("tsx"),
    "rust": _c_style("rust"),
    "go": _c_style("go"),
    "python": LanguageProfile(
        name="python",
        single_line=_HASH_SINGLE,
        block_start="'''|\"\"\"",
        block_end="'''|\"\"\"",
        inline_markers=("#",),
    ),
    "css": LanguageProfile(
        name="css",
        block_start=_C_BLOCK_START,
        block_end=_C_BLOCK_END,
    ),
    "html": LanguageProfile(
        name="html",
        block_start=r"<!--",
        block_end=r"-->",
    ),
    "yaml": LanguageProfile(name="yaml", single_line=_HASH_SINGLE, inline_markers=("#",)),
    "shell": LanguageProfile(name="shell", single_line=_HASH_SINGLE, inline_markers=("#",)),
}


# File extension -> language id
CODE_EXTENSIONS: Dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "jsx",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".py": "python",
    ".rs": "rust",
    ".go": "go",
    ".css": "css",
    ".scss": "css",
    ".less": "css",
    ".html": "html",
    ".htm": "html",
    ".vue": "html",
    ".svelte": "html",
    ".json": "json",
    ".md": "markdown",
    ".mdx": "markdown",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".sql": "sql",
    ".sh": "shell",
    ".bash": "shell",
    ".zsh": "shell",
    ".txt": PLAINTEXT,
    ".env": PLAINTEXT,
    ".gitignore": PLAINTEXT,
    ".dockerignore": PLAINTEXT,
    ".editorconfig": PLAINTEXT,
    ".php": PLAINTEXT,
    ".rb": PLAINTEXT,
    ".java": PLAINTEXT,
    ".kt": PLAINTEXT,
    ".swift": PLAINTEXT,
    ".c": PLAINTEXT,
    ".cpp": PLAINTEXT,
    ".h": PLAINTEXT,
    ".hpp": PLAINTEXT,
}

BINARY_EXTENSIONS = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".ico", ".svg", ".webp", ".bmp",
    ".mp3", ".mp4", ".wav", ".avi", ".mov", ".webm",
    ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx",
    ".zip", ".tar", ".gz", ".rar", ".7z",
    ".exe", ".dll", ".so", ".dylib",
    ".woff", ".woff2", ".ttf", ".eot", ".otf",
    ".lock",
})

IGNORED_DIRS = frozenset({
    "node_modules",
    ".git",
    ".next",
    "dist",
    "build",
    ".vscode",
    ".idea",
    "__pycache__",
    ".cache",
    "coverage",
    ".turbo",
    "target",
    "vendor",
})


def get_profile(language: str) -> Optional[LanguageProfile]:
    """Get the comment profile for a language, or None if it has none"""
    return LANGUAGE_PROFILES.get(language)


def get_extension(filename: str) -> str:
    """Lowercased text from the last dot onward ('' when there is no dot).

    Dotfiles such as '.gitignore' count as their own extension.
    """
    name = PurePosixPath(filename).name
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot:].lower()


def detect_language(filename: str) -> str:
    """Map a filename to a language id, defaulting to plaintext"""
    return CODE_EXTENSIONS.get(get_extension(filename), PLAINTEXT)


def is_code_file(filename: str) -> bool:
    """Whether a file should be offered for practice"""
    lowered = filename.lower()
    if lowered.endswith(".min.js") or lowered.endswith(".min.css"):
        return False
    ext = get_extension(filename)
    if ext in BINARY_EXTENSIONS:
        return False
    return ext in CODE_EXTENSIONS or ext == ""


def should_ignore_dir(name: str) -> bool:
    """Whether a directory is skipped while walking a project"""
    return name in IGNORED_DIRS or name.startswith(".")
