"""Service error taxonomy.

Every error carries the public ``message`` returned to clients and the HTTP
``status_code`` it maps to. Upstream details are logged where the error is
raised and never travel on the exception.
"""

from dataclasses import dataclass, field


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int = 500

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(eq=False)
class InferenceError(ServiceError):
    """Raised when a template could not be generated."""

    message: str = "Failed to generate template. Please try again."
    code: str = "inference_error"
    status_code: int = 500


@dataclass(eq=False)
class ConfigurationMissingError(InferenceError):
    """A required secret is not configured; never says which one."""

    message: str = "Service temporarily unavailable"
    code: str = "configuration_missing"
    status_code: int = 500


@dataclass(eq=False)
class UpstreamRateLimitedError(InferenceError):
    message: str = "AI service is busy. Please try again in a moment."
    code: str = "upstream_rate_limited"
    status_code: int = 503


@dataclass(eq=False)
class UpstreamUnavailableError(InferenceError):
    message: str = "AI service temporarily unavailable"
    code: str = "upstream_unavailable"
    status_code: int = 503


@dataclass(eq=False)
class UpstreamTimeoutError(InferenceError):
    message: str = "Request timeout. Please try again."
    code: str = "upstream_timeout"
    status_code: int = 408


@dataclass(eq=False)
class InvalidTemplateError(InferenceError):
    """The model reply parsed but failed structural validation."""

    message: str = "Invalid template generated. Please try again."
    code: str = "invalid_template"
    status_code: int = 500
    errors: list[str] = field(default_factory=list)


@dataclass(eq=False)
class PublishError(ServiceError):
    """Raised when content could not be published."""

    message: str = "Failed to save template. Please try again."
    code: str = "publish_error"
    status_code: int = 500


@dataclass(eq=False)
class InvalidContentError(PublishError):
    message: str = "Invalid content format"
    code: str = "invalid_content"
    status_code: int = 400


@dataclass(eq=False)
class PublishAuthError(PublishError):
    message: str = "Authentication failed"
    code: str = "publish_auth"
    status_code: int = 401


@dataclass(eq=False)
class PublishQuotaError(PublishError):
    message: str = "Rate limit exceeded for save service"
    code: str = "publish_quota"
    status_code: int = 429


@dataclass(eq=False)
class PublishUnavailableError(PublishError):
    message: str = "Save service temporarily unavailable"
    code: str = "publish_unavailable"
    status_code: int = 503


@dataclass(eq=False)
class PublishTimeoutError(PublishError):
    message: str = "Save request timeout. Please try again."
    code: str = "publish_timeout"
    status_code: int = 408


@dataclass(eq=False)
class PublishResponseError(PublishError):
    message: str = "Failed to create shareable link"
    code: str = "publish_response"
    status_code: int = 500
