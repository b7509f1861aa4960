"""Chunk model - a bounded slice of one file's normalized text"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """A section of a source file the user types against"""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier unique within the file (e.g., 'chunk_001')")
    content: str = Field(..., description="Exact characters to type, newlines and tabs included")
    start_line: int = Field(..., ge=1, description="1-based first line in the stripped file")
    end_line: int = Field(..., ge=1, description="1-based last line in the stripped file")
    title: str
    description: str

    @property
    def line_count(self) -> int:
        """Number of lines spanned by this chunk"""
        return self.end_line - self.start_line + 1
