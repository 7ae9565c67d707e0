"""
Schema Validation Utilities

Validates layout and version JSON documents before they are turned into
models.

Two levels of checking:
- Basic checks (always): required fields, index types, and the bijection
  invariant of every stored permutation.
- Strict checks (`strict=True`): full JSON Schema validation against the
  bundled `*.schema.json` documents.
"""

from __future__ import annotations

import json
from collections import defaultdict
from pathlib import Path
from typing import Any

import jsonschema


_SCHEMAS: dict[str, dict] = {}

_QUESTION_TYPES = ("MCQ", "Short", "Speaking", "Writing", "Instruction", "Passage")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _strict_validate(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


# ─────────────────────────────────────────────────────────────────────────────
# Layout
# ─────────────────────────────────────────────────────────────────────────────

def validate_layout(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a stored layout document.

    Args:
        data: Layout dictionary (attempt-record shape)
        strict: If True, also validate against layout.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Layout must be an object")

    seed = data.get("seed")
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise ValidationError(f"Invalid seed: {seed!r} (must be an integer)", path="seed")

    if "shuffledQuestions" in data:
        _validate_placements(data["shuffledQuestions"])

    if "shuffledChoices" in data:
        choices = data["shuffledChoices"]
        if not isinstance(choices, dict):
            raise ValidationError("shuffledChoices must be an object", path="shuffledChoices")
        for question_id, perm in choices.items():
            _validate_permutation(perm, f"shuffledChoices.{question_id}")

    if strict:
        _strict_validate(data, "layout")


def _validate_placements(placements: Any) -> None:
    """Validate question placements and the per-section bijection."""
    path = "shuffledQuestions"
    if not isinstance(placements, list):
        raise ValidationError("shuffledQuestions must be a list", path=path)

    by_section: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for i, entry in enumerate(placements):
        entry_path = f"{path}[{i}]"
        if not isinstance(entry, dict):
            raise ValidationError("Placement must be an object", path=entry_path)
        missing = [f for f in ("sectionId", "originalIndex", "shuffledIndex") if f not in entry]
        if missing:
            raise ValidationError(
                f"Placement missing required fields: {missing}",
                path=entry_path,
                errors=[f"Missing field: {f}" for f in missing],
            )
        original, shuffled = entry["originalIndex"], entry["shuffledIndex"]
        if not _is_index(original) or not _is_index(shuffled):
            raise ValidationError(
                f"Invalid placement indices: {original!r} -> {shuffled!r}",
                path=entry_path,
            )
        by_section[entry["sectionId"]].append((original, shuffled))

    for section_id, pairs in by_section.items():
        expected = set(range(len(pairs)))
        originals = [o for o, _ in pairs]
        shuffled = [s for _, s in pairs]
        if set(originals) != expected or len(set(originals)) != len(originals):
            raise ValidationError(
                f"Section {section_id!r} original indices are not a permutation",
                path=path,
            )
        if set(shuffled) != expected or len(set(shuffled)) != len(shuffled):
            raise ValidationError(
                f"Section {section_id!r} shuffled indices are not a permutation",
                path=path,
            )


def _validate_permutation(perm: Any, path: str) -> None:
    if not isinstance(perm, list) or not all(_is_index(i) for i in perm):
        raise ValidationError("Permutation must be a list of non-negative integers", path=path)
    if sorted(perm) != list(range(len(perm))):
        raise ValidationError(f"Not a permutation: {perm}", path=path)


# ─────────────────────────────────────────────────────────────────────────────
# Version
# ─────────────────────────────────────────────────────────────────────────────

def validate_version(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a test version document.

    Section ids and question ids must be unique across the version.
    Missing `sections` or `questions` lists are allowed (treated as empty),
    since the layout engine skips them.

    Args:
        data: Version dictionary (platform camelCase shape)
        strict: If True, also validate against version.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Version must be an object")
    if "id" not in data:
        raise ValidationError("Missing required fields: ['id']", errors=["Missing field: id"])

    sections = data.get("sections") or []
    if not isinstance(sections, list):
        raise ValidationError("sections must be a list", path="sections")

    # Layouts key placements by section id and choice permutations by question id
    section_ids: set[str] = set()
    question_ids: set[str] = set()
    for i, section in enumerate(sections):
        section_path = f"sections[{i}]"
        if not isinstance(section, dict) or "id" not in section:
            raise ValidationError("Section must have an id", path=section_path)
        if section["id"] in section_ids:
            raise ValidationError(f"Duplicate section id: {section['id']!r}", path=f"{section_path}.id")
        section_ids.add(section["id"])
        questions = section.get("questions") or []
        if not isinstance(questions, list):
            raise ValidationError("questions must be a list", path=f"{section_path}.questions")
        for j, question in enumerate(questions):
            question_path = f"{section_path}.questions[{j}]"
            _validate_question(question, question_path)
            if question["id"] in question_ids:
                raise ValidationError(f"Duplicate question id: {question['id']!r}", path=f"{question_path}.id")
            question_ids.add(question["id"])

    if strict:
        _strict_validate(data, "version")


def _validate_question(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise ValidationError("Question must be an object", path=path)
    missing = [f for f in ("id", "type") if f not in data]
    if missing:
        raise ValidationError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )
    if data["type"] not in _QUESTION_TYPES:
        raise ValidationError(f"Invalid question type: {data['type']!r}", path=f"{path}.type")
    choices = data.get("choices")
    if choices is not None and not isinstance(choices, list):
        raise ValidationError("choices must be a list", path=f"{path}.choices")
    points = data.get("points", 0)
    if not isinstance(points, (int, float)) or points < 0:
        raise ValidationError(
            f"Invalid points: {points!r} (must be non-negative)",
            path=f"{path}.points",
        )
