"""Language profile model - lexical comment rules for one language"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict


class LanguageProfile(BaseModel):
    """Comment syntax for a language, stored as regex patterns"""

    model_config = ConfigDict(frozen=True)

    name: str
    # Patterns matched against a whole line; a match drops the line
    single_line: Tuple[str, ...] = ()
    block_start: Optional[str] = None
    block_end: Optional[str] = None
    # Markers that may start a trailing comment after code
    inline_markers: Tuple[str, ...] = ()

    @property
    def has_block_comments(self) -> bool:
        return self.block_start is not None and self.block_end is not None
