"""Template generation pipeline: prompt, inference, extraction, validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from notionify.exceptions import InvalidTemplateError
from notionify.extraction import extract_template_candidate
from notionify.models import Template, TemplateType
from notionify.prompting import build_prompt
from notionify.services.inference_service import InferenceService
from notionify.validation import validate_template

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    template: Template
    warnings: list[str] = field(default_factory=list)


class TemplateService:
    """Turn a validated user description into a :class:`Template`."""

    def __init__(self, inference: InferenceService) -> None:
        self._inference = inference

    async def generate(
        self, purpose: str, template_type: TemplateType | None = None
    ) -> GenerationResult:
        prompt = build_prompt(purpose, template_type)
        raw = await self._inference.complete(prompt)
        candidate = extract_template_candidate(raw)

        validation = validate_template(candidate)
        if not validation.is_valid:
            logger.warning(
                "Generated template failed validation",
                extra={"errors": validation.errors},
            )
            raise InvalidTemplateError(errors=validation.errors)

        if validation.warnings:
            logger.info(
                "Generated template has warnings",
                extra={"warnings": validation.warnings},
            )

        return GenerationResult(
            template=Template.model_validate(candidate),
            warnings=validation.warnings,
        )
