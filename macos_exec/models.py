"""Data models for macOS executable resolution."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict

BUNDLE_ID_KEY = "CFBundleIdentifier"
EXECUTABLE_KEY = "CFBundleExecutable"


class IndexAvailability(str, Enum):
    """Whether the Spotlight index can be used for lookups."""
    
    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    
    @classmethod
    def from_bool(cls, available: bool | None) -> "IndexAvailability":
        """Convert a probe result (None while unprobed) to a state."""
        if available is None:
            return cls.UNKNOWN
        return cls.AVAILABLE if available else cls.UNAVAILABLE


class ResolutionSource(str, Enum):
    """How an executable path was found."""
    
    DIRECTORY = "directory"
    SPOTLIGHT = "spotlight"
    MANUAL = "manual"


class AppRecord(BaseModel):
    """An application bundle discovered by the manual scan, with its Info.plist."""
    
    model_config = ConfigDict(frozen=True)
    
    app_path: str = Field(description="Full path to the .app bundle")
    plist: dict[str, Any] = Field(
        default_factory=dict,
        description="Decoded Info.plist contents"
    )
    
    @property
    def bundle_id(self) -> str | None:
        return self.plist.get(BUNDLE_ID_KEY)
    
    @property
    def executable(self) -> str | None:
        return self.plist.get(EXECUTABLE_KEY)
    
    def is_usable(self) -> bool:
        """True if the plist names both a bundle identifier and an executable, as strings."""
        return all(
            isinstance(value, str) and value
            for value in (self.bundle_id, self.executable)
        )


class Resolution(BaseModel):
    """Result of resolving an application to its main executable."""
    
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "target": "com.apple.Safari",
                "app_path": "/Applications/Safari.app",
                "executable_path": "/Applications/Safari.app/Contents/MacOS/Safari",
                "source": "spotlight"
            }
        }
    )
    
    target: str = Field(description="Bundle directory or bundle identifier that was looked up")
    app_path: str = Field(description="Full path to the .app bundle")
    executable_path: str = Field(description="Full path to the main executable")
    source: ResolutionSource = Field(description="Lookup strategy that produced the result")
