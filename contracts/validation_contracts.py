"""Validation contracts for FAF completeness checks."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class ValidationResult(BaseModel):
    """Outcome of validating a parsed FAF document."""

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(..., description="True when there are no errors")
    errors: List[str] = Field(default_factory=list, description="Critical problems; any error makes the document invalid")
    warnings: List[str] = Field(default_factory=list, description="Missing recommended sections; never affect validity")
    score: int = Field(..., ge=0, le=100, description="Completeness score from 0 to 100")

    def has_warnings(self) -> bool:
        """Check if any recommended sections are missing."""
        return bool(self.warnings)
