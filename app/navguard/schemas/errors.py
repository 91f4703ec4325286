from pydantic import BaseModel, Field

from app.navguard.core.error_catalog import ErrorCatalog, ErrorDefinition


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: dict | None = None
    trace_id: str = ""


class ValidationIssue(BaseModel):
    field: str | None = None
    message: str
    type: str
    loc: list[str | int] = Field(default_factory=list)


class ValidationIssues(BaseModel):
    errors: list[ValidationIssue]


class ValidationErrorEnvelope(ErrorEnvelope):
    details: ValidationIssues


class UnknownFamilyDetails(BaseModel):
    family: str


class UnknownFamilyEnvelope(ErrorEnvelope):
    details: UnknownFamilyDetails


_ENVELOPES: dict[str, type[ErrorEnvelope]] = {
    ErrorCatalog.VALIDATION_ERROR.code: ValidationErrorEnvelope,
    ErrorCatalog.NAVIGATION_FAMILY_NOT_FOUND.code: UnknownFamilyEnvelope,
}


def error_responses(*errors: ErrorDefinition) -> dict[int, dict]:
    """OpenAPI ``responses`` for catalog errors; errors sharing a status share one entry."""
    responses: dict[int, dict] = {}
    for error in errors:
        line = f"{error.code}: {error.message}"
        entry = responses.get(error.status_code)
        if entry is None:
            responses[error.status_code] = {
                "model": _ENVELOPES.get(error.code, ErrorEnvelope),
                "description": line,
            }
        else:
            entry["description"] = f"{entry['description']}; {line}"
    return responses
