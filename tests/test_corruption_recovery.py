"""Corruption detection and recovery scenarios.

Exercises the parse -> validate pipeline against files that get corrupted,
truncated and restored on disk, plus the comparisons an external sync tool
would make between two versions of the same document.
"""

import pytest

from discovery import FafFindParseError, find_and_parse
from parsing import FafSyntaxError, MissingFieldError, parse
from validation import validate


VALID_FAF = """
faf_version: 2.5.0
ai_score: 85%
ai_confidence: HIGH

project:
  name: grok-integration
  goal: Demonstrate corruption recovery

instant_context:
  what_building: Resilient AI context system
  tech_stack: Rust, YAML, FAF
  key_files:
    - src/lib.rs
    - src/parser.rs

stack:
  backend: Rust
  infrastructure: xAI

human_context:
  who: xAI team
  what: Test bi-sync resilience
  why: Production readiness
"""


class TestCorruptionDetection:
    """Corrupted content must be rejected or flagged, never silently accepted."""

    def test_missing_version(self):
        content = VALID_FAF.replace("faf_version: 2.5.0\n", "")
        with pytest.raises(MissingFieldError):
            parse(content)

    def test_invalid_score_is_tolerated(self):
        faf = parse(VALID_FAF.replace("ai_score: 85%", "ai_score: NOT_A_NUMBER"))
        assert faf.score() is None
        assert validate(faf).valid

    def test_malformed_yaml(self):
        content = VALID_FAF.replace("  name: grok-integration", "  name: [grok-integration")
        with pytest.raises(FafSyntaxError):
            parse(content)

    def test_truncated_file(self):
        truncated = "\nfaf_version: 2.5.0\nai_score: 85%\n\nproject:\n  name: trunc"
        faf = parse(truncated)
        assert faf.project_name == "trunc"
        assert validate(faf).warnings

    def test_truncated_before_project(self):
        with pytest.raises(MissingFieldError):
            parse("faf_version: 2.5.0\nai_score: 85%\n")


class TestRecoveryWorkflow:
    """Write, corrupt and heal a file on disk."""

    def test_corruption_recovery_workflow(self, tmp_path):
        faf_path = tmp_path / "project.faf"

        faf_path.write_text(VALID_FAF, encoding="utf-8")
        faf = find_and_parse(tmp_path)
        assert validate(faf).valid
        assert faf.score() > 80

        faf_path.write_text(
            "faf_version: 2.5.0\nai_score: CORRUPTED\n\nproject:\n  name: corrupted\n  goal: Corrupted file\n",
            encoding="utf-8",
        )
        corrupt = find_and_parse(tmp_path)
        corrupt_validation = validate(corrupt)
        assert corrupt.score() is None
        assert corrupt_validation.warnings

        faf_path.write_text(VALID_FAF, encoding="utf-8")
        healed = find_and_parse(tmp_path)
        assert validate(healed).valid
        assert healed.score() == 85

    def test_unparseable_then_healed(self, tmp_path):
        faf_path = tmp_path / "project.faf"
        faf_path.write_text("faf_version: 2.5.0\nproject: [", encoding="utf-8")
        with pytest.raises(FafFindParseError):
            find_and_parse(tmp_path)

        faf_path.write_text(VALID_FAF, encoding="utf-8")
        assert find_and_parse(tmp_path).project_name == "grok-integration"

    def test_rapid_modifications(self, tmp_path):
        faf_path = tmp_path / "project.faf"
        success_count = 0
        for i in range(100):
            faf_path.write_text(
                f"faf_version: 2.5.0\nai_score: {50 + (i % 50)}%\n\nproject:\n  name: rapid-test\n  goal: Iteration {i}\n",
                encoding="utf-8",
            )
            faf = find_and_parse(tmp_path)
            if validate(faf).valid and faf.goal() == f"Iteration {i}":
                success_count += 1
        assert success_count == 100


class TestVersionComparison:
    """Differences between two versions of the same project are visible."""

    VERSION_A = """
faf_version: 2.5.0
ai_score: 80%
project:
  name: shared-project
  goal: Version A - local changes
instant_context:
  what_building: Feature A
  tech_stack: Rust
"""

    VERSION_B = """
faf_version: 2.5.0
ai_score: 85%
project:
  name: shared-project
  goal: Version B - remote changes
instant_context:
  what_building: Feature B
  tech_stack: Rust, Python
"""

    def test_conflict_indicators(self):
        faf_a = parse(self.VERSION_A)
        faf_b = parse(self.VERSION_B)
        assert faf_a.project_name == faf_b.project_name
        assert faf_a.goal() != faf_b.goal()
        assert abs(faf_a.score() - faf_b.score()) == 5
        assert faf_a.data != faf_b.data


class TestResilience:
    """Unicode and large documents."""

    def test_unicode(self):
        content = """
faf_version: 2.5.0
ai_score: 90%
project:
  name: unicode-test-🦀
  goal: Test émojis and spëcial châractérs
instant_context:
  what_building: 日本語テスト
  tech_stack: Rust 🦀, Python 🐍
"""
        faf = parse(content)
        assert faf.project_name == "unicode-test-🦀"
        assert faf.what_building() == "日本語テスト"
        assert faf.tech_stack() == "Rust 🦀, Python 🐍"

    def test_large_file(self):
        lines = [
            "faf_version: 2.5.0",
            "ai_score: 95%",
            "project:",
            "  name: large-project",
            "instant_context:",
            "  what_building: Massive codebase",
            "  tech_stack: Rust",
            "  key_files:",
        ]
        lines.extend(f"    - src/module_{i}.rs" for i in range(1000))
        faf = parse("\n".join(lines))
        assert len(faf.key_files()) == 1000
        assert faf.key_files()[999] == "src/module_999.rs"
        assert validate(faf).valid
