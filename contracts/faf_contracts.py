"""FAF document contracts.

Typed representation of a .faf project-context file. Every section except
`faf_version` and `project` is optional; list and mapping fields default to
empty. Models are frozen so parsed documents can be shared between the
validator and compressor without copying.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional


class FafSection(BaseModel):
    """Base for all FAF sections.

    Explicit YAML nulls are treated exactly like missing keys, so `goal: ~`
    and an absent `goal` parse to the same document.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items() if value is not None}

    def to_yaml_dict(self) -> Dict[str, Any]:
        """Plain dict for serialization.

        Absent optional fields and empty lists/mappings are omitted. Sections
        that are present are always emitted, even when empty, so presence
        survives a round trip.
        """
        out: Dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, FafSection):
                out[name] = value.to_yaml_dict()
            elif isinstance(value, (list, dict)):
                if value:
                    out[name] = list(value) if isinstance(value, list) else dict(value)
            else:
                out[name] = value
        return out


class Project(FafSection):
    """Project metadata."""
    name: str = Field(..., description="Project name; required at parse time, may be empty")
    goal: Optional[str] = Field(None, description="What the project is trying to achieve")
    main_language: Optional[str] = None
    approach: Optional[str] = None
    version: Optional[str] = None
    license: Optional[str] = None


class InstantContext(FafSection):
    """AI-facing quick context block."""
    what_building: Optional[str] = Field(None, description="One-line description of what is being built")
    tech_stack: Optional[str] = Field(None, description="Free-form tech stack summary")
    deployment: Optional[str] = None
    key_files: List[str] = Field(default_factory=list, description="Most important files, in priority order")
    commands: Dict[str, str] = Field(default_factory=dict, description="Named shell commands (build, test, ...)")


class Stack(FafSection):
    """Technical stack."""
    frontend: Optional[str] = None
    backend: Optional[str] = None
    database: Optional[str] = None
    infrastructure: Optional[str] = None
    build_tool: Optional[str] = None
    testing: Optional[str] = None
    cicd: Optional[str] = None


class ContextQuality(FafSection):
    """Context quality metrics."""
    slots_filled: Optional[str] = None
    confidence: Optional[str] = None
    handoff_ready: bool = Field(default=False, description="Whether the context is complete enough to hand off")
    missing_context: List[str] = Field(default_factory=list)


class HumanContext(FafSection):
    """Human context - the 6 W's."""
    who: Optional[str] = None
    what: Optional[str] = None
    why: Optional[str] = None
    how: Optional[str] = None
    where: Optional[str] = None
    when: Optional[str] = None


class Preferences(FafSection):
    """Development preferences."""
    quality_bar: Optional[str] = None
    testing: Optional[str] = None
    documentation: Optional[str] = None
    code_style: Optional[str] = None


class State(FafSection):
    """Project state."""
    phase: Optional[str] = None
    version: Optional[str] = None
    focus: Optional[str] = None
    milestones: List[str] = Field(default_factory=list)


class FafData(FafSection):
    """Complete FAF document.

    `ai_score` is kept exactly as written (e.g. "85%"); the integer view is
    derived on demand by `parsing.parse_score`.
    """

    faf_version: str = Field(..., description="FAF format version; required at parse time, may be empty")
    project: Project
    ai_score: Optional[str] = Field(None, description="Raw score string, e.g. '85%'")
    ai_confidence: Optional[str] = None
    ai_tldr: Dict[str, str] = Field(default_factory=dict)
    instant_context: Optional[InstantContext] = None
    context_quality: Optional[ContextQuality] = None
    stack: Optional[Stack] = None
    human_context: Optional[HumanContext] = None
    preferences: Optional[Preferences] = None
    state: Optional[State] = None
    tags: List[str] = Field(default_factory=list)
