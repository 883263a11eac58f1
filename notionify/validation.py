"""Validation and sanitisation of prompts, generated templates and published content.

Every check returns a :class:`ValidationResult`: errors block the operation,
warnings are advisory and only passed along for logging or display.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from notionify.config import Settings
from notionify.models import PROPERTY_TYPES

PROMPT_MIN_LENGTH = 3
PROMPT_MAX_LENGTH = 1000
PROMPT_WARN_LENGTH = 500

TITLE_WARN_LENGTH = 200
SECTION_DESCRIPTION_WARN_LENGTH = 500
PROPERTY_DESCRIPTION_WARN_LENGTH = 300
NOTES_WARN_LENGTH = 1000
MAX_SECTIONS = 20
MAX_PROPERTIES = 50

DANGEROUS_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<script", re.IGNORECASE), "Script tags are not allowed"),
    (re.compile(r"javascript:", re.IGNORECASE), "JavaScript URLs are not allowed"),
    (re.compile(r"on\w+\s*=", re.IGNORECASE), "Event handlers are not allowed"),
    (re.compile(r"eval\s*\(", re.IGNORECASE), "Eval functions are not allowed"),
    (re.compile(r"function\s*\(", re.IGNORECASE), "Function definitions are not allowed"),
    (re.compile(r"import\s+", re.IGNORECASE), "Import statements are not allowed"),
    (re.compile(r"require\s*\(", re.IGNORECASE), "Require statements are not allowed"),
)

SPAM_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(.)\1{10,}"), "Repeated characters detected"),
    (
        re.compile(r"\b(viagra|casino|poker|lottery)\b", re.IGNORECASE),
        "Spam-like content detected",
    ),
)

SCRIPT_BLOCK_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_prompt(prompt: Any) -> ValidationResult:
    """Check a user prompt against length bounds, the denylist and spam heuristics."""

    result = ValidationResult()

    if not isinstance(prompt, str) or not prompt:
        result.errors.append("Prompt is required and must be a string")
        return result

    text = prompt.strip()

    if len(text) < PROMPT_MIN_LENGTH:
        result.errors.append(f"Prompt must be at least {PROMPT_MIN_LENGTH} characters long")
    if len(text) > PROMPT_MAX_LENGTH:
        result.errors.append(f"Prompt must be at most {PROMPT_MAX_LENGTH} characters long")
    if len(text) > PROMPT_WARN_LENGTH:
        result.warnings.append("Long prompts may take longer to process")

    for pattern, message in DANGEROUS_PATTERNS:
        if pattern.search(text):
            result.errors.append(message)

    for pattern, message in SPAM_PATTERNS:
        if pattern.search(text):
            result.warnings.append(message)

    return result


def _is_missing(value: Any) -> bool:
    return not isinstance(value, str) or not value


def validate_template(template: Any) -> ValidationResult:
    """Check a parsed model reply against the template shape.

    All problems are collected so one call reports every structural defect,
    with 1-based positions for section and property entries.
    """

    result = ValidationResult()
    errors, warnings = result.errors, result.warnings

    if not isinstance(template, dict):
        errors.append("Template must be an object")
        return result

    title = template.get("title")
    if _is_missing(title):
        errors.append("Title is required and must be a string")
    elif not title.strip():
        errors.append("Title cannot be empty")
    elif len(title) > TITLE_WARN_LENGTH:
        warnings.append("Title is quite long, consider shortening it")

    sections = template.get("sections")
    if not isinstance(sections, list):
        errors.append("Sections must be an array")
    else:
        if not sections:
            warnings.append("No sections defined")
        elif len(sections) > MAX_SECTIONS:
            warnings.append("Many sections defined, consider simplifying")

        for index, section in enumerate(sections, start=1):
            if not isinstance(section, dict):
                errors.append(f"Section {index} must be an object")
                continue

            name = section.get("name")
            if _is_missing(name):
                errors.append(f"Section {index}: name is required and must be a string")
            elif not name.strip():
                errors.append(f"Section {index}: name cannot be empty")

            description = section.get("description")
            if _is_missing(description):
                errors.append(f"Section {index}: description is required and must be a string")
            elif not description.strip():
                errors.append(f"Section {index}: description cannot be empty")
            elif len(description) > SECTION_DESCRIPTION_WARN_LENGTH:
                warnings.append(f"Section {index}: description is quite long")

    properties = template.get("properties")
    if not isinstance(properties, list):
        errors.append("Properties must be an array")
    else:
        if not properties:
            warnings.append("No properties defined")
        elif len(properties) > MAX_PROPERTIES:
            warnings.append("Many properties defined, consider simplifying")

        for index, prop in enumerate(properties, start=1):
            if not isinstance(prop, dict):
                errors.append(f"Property {index} must be an object")
                continue

            name = prop.get("name")
            if _is_missing(name):
                errors.append(f"Property {index}: name is required and must be a string")
            elif not name.strip():
                errors.append(f"Property {index}: name cannot be empty")

            kind = prop.get("type")
            if _is_missing(kind):
                errors.append(f"Property {index}: type is required and must be a string")
            elif kind not in PROPERTY_TYPES:
                errors.append(
                    f"Property {index}: type must be one of: {', '.join(PROPERTY_TYPES)}"
                )

            description = prop.get("description")
            if _is_missing(description):
                errors.append(f"Property {index}: description is required and must be a string")
            elif not description.strip():
                errors.append(f"Property {index}: description cannot be empty")
            elif len(description) > PROPERTY_DESCRIPTION_WARN_LENGTH:
                warnings.append(f"Property {index}: description is quite long")

    # A JSON null is treated like an absent key.
    notes = template.get("notes")
    if notes is not None:
        if not isinstance(notes, str):
            errors.append("Notes must be a string if provided")
        elif len(notes) > NOTES_WARN_LENGTH:
            warnings.append("Notes are quite long")

    return result


def sanitize_content(content: str) -> str:
    """Strip script blocks and every denylisted construct from ``content``."""

    cleaned = SCRIPT_BLOCK_RE.sub("", content)
    for pattern in (
        r"javascript:",
        r"on\w+\s*=",
        r"eval\s*\(",
        r"function\s*\(",
        r"import\s+",
        r"require\s*\(",
    ):
        cleaned = re.sub(pattern, "", cleaned, flags=re.IGNORECASE)
    return cleaned.strip()


def validate_environment(settings: Settings) -> ValidationResult:
    """Check that upstream secrets are present and look well formed."""

    result = ValidationResult()

    if not settings.hf_api_key:
        result.errors.append("Required environment variable HF_API_KEY is not set")
    else:
        if not settings.hf_api_key.startswith("hf_"):
            result.errors.append('HF_API_KEY should start with "hf_"')
        if len(settings.hf_api_key) < 20:
            result.warnings.append("HF_API_KEY seems too short")

    if not settings.github_token:
        result.warnings.append("Optional environment variable GITHUB_TOKEN is not set")
    elif not settings.github_token.startswith(("ghp_", "gho_", "github_pat_")):
        result.warnings.append('GITHUB_TOKEN should start with "ghp_", "gho_" or "github_pat_"')

    return result
