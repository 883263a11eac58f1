"""Pydantic models shared across application layers."""

from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

PropertyType = Literal[
    "text",
    "select",
    "multi-select",
    "number",
    "date",
    "checkbox",
    "url",
    "email",
    "phone",
    "formula",
    "relation",
    "rollup",
    "created_time",
    "created_by",
    "last_edited_time",
    "last_edited_by",
    "files",
    "status",
]

PROPERTY_TYPES: tuple[str, ...] = get_args(PropertyType)

TemplateType = Literal[
    "project-management",
    "personal-productivity",
    "content-creation",
    "learning-education",
    "finance-budgeting",
    "health-fitness",
    "business-entrepreneur",
    "event-planning",
    "research-knowledge",
    "creative-writing",
]

TEMPLATE_TYPES: tuple[str, ...] = get_args(TemplateType)


class TemplateSection(BaseModel):
    """A page section, in the order the model proposed it."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class TemplateProperty(BaseModel):
    """A database property with one of the recognised Notion kinds."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: PropertyType
    description: str


class Template(BaseModel):
    """Structured page template produced from a user prompt."""

    model_config = ConfigDict(frozen=True)

    title: str
    sections: tuple[TemplateSection, ...] = ()
    properties: tuple[TemplateProperty, ...] = ()
    notes: str | None = None


class GenerateRequest(BaseModel):
    """Body of ``POST /api/generate``.

    ``prompt`` is left untyped; non-string values are reported by
    :func:`notionify.validation.validate_prompt`.
    """

    prompt: Any = None
    template_type: TemplateType | None = Field(
        default=None, description="Optional template category hint, e.g. 'event-planning'."
    )


class GenerateResponse(BaseModel):
    ok: Literal[True] = True
    template: Template
    warnings: list[str] = Field(default_factory=list)


class PublishRequest(BaseModel):
    """Body of ``POST /api/save``; content is a string or any JSON object/array."""

    content: Any = None


class PublishedGist(BaseModel):
    url: str
    id: str


class PublishResponse(BaseModel):
    ok: Literal[True] = True
    url: str
    id: str


class ErrorResponse(BaseModel):
    """Error payload returned by every API route."""

    ok: Literal[False] = False
    error: str


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    timestamp: str
    uptime_seconds: float
    version: str
    environment: dict[str, bool]
    dependencies: dict[str, bool]
