"""Config model for RepoTyper"""

from pathlib import Path
from pydantic import BaseModel, Field, field_validator


class TypingSettings(BaseModel):
    """Practice settings, editable while a session runs"""

    stop_on_error: bool = False
    show_line_numbers: bool = True
    tab_size: int = 2
    auto_advance: bool = True

    @field_validator("tab_size")
    @classmethod
    def validate_tab_size(cls, v: int) -> int:
        """Keep tab width within a sane display range"""
        if not 1 <= v <= 8:
            raise ValueError(f"tab_size must be between 1 and 8, got: {v}")
        return v


class RepoTyperConfig(BaseModel):
    """Configuration for RepoTyper - stored in .repotyper/config.yaml"""

    folder: str
    settings: TypingSettings = Field(default_factory=TypingSettings)

    @field_validator("folder")
    @classmethod
    def validate_folder(cls, v: str) -> str:
        """Ensure folder is an absolute path"""
        path = Path(v)
        if not path.is_absolute():
            raise ValueError(f"folder must be an absolute path, got: {v}")
        return v

    @property
    def folder_path(self) -> Path:
        """Get folder as Path object"""
        return Path(self.folder)
