"""Project model - the loaded folder, its files and their chunks"""

from typing import List, Optional, Set, Tuple
from pydantic import BaseModel, Field

from repotyper.models.chunk import Chunk


class SourceFile(BaseModel):
    """One practice file: its normalized text and the chunks cut from it"""

    path: str = Field(..., description="POSIX path relative to the project root")
    name: str
    language: str
    original_content: str = ""
    content: str = ""
    chunks: List[Chunk] = []
    completed_chunks: Set[str] = Field(default_factory=set)

    @property
    def is_completed(self) -> bool:
        """Whether every chunk of the file has been typed through"""
        if not self.chunks:
            return False
        return all(c.id in self.completed_chunks for c in self.chunks)

    def get_chunk(self, index: int) -> Optional[Chunk]:
        """Get a chunk by position, or None when out of range"""
        if 0 <= index < len(self.chunks):
            return self.chunks[index]
        return None

    def mark_chunk_completed(self, chunk_id: str) -> None:
        """Record a chunk as done"""
        if any(c.id == chunk_id for c in self.chunks):
            self.completed_chunks.add(chunk_id)

    def get_progress(self) -> Tuple[int, int]:
        """Get (completed_count, total_count)"""
        return (len(self.completed_chunks), len(self.chunks))


class Project(BaseModel):
    """A folder of source files loaded for practice"""

    name: str
    root: str
    files: List[SourceFile] = []

    def get_file(self, path: str) -> Optional[SourceFile]:
        """Get a file by its relative path"""
        for source_file in self.files:
            if source_file.path == path:
                return source_file
        return None

    def completed_count(self) -> int:
        """Number of fully typed files"""
        return sum(1 for f in self.files if f.is_completed)
