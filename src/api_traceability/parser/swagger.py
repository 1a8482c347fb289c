"""OpenAPI 3.x structural validation and endpoint extraction."""

import re

from api_traceability.errors import SpecValidationError
from api_traceability.parser.base import Endpoint, SchemaDefinition, SpecDocument, ValidationResult

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "head", "trace")

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def _missing(value) -> bool:
    # Empty mappings and lists count as present; empty strings do not.
    return value is None or (not value and not isinstance(value, (dict, list)))


def validate_spec(doc: SpecDocument) -> ValidationResult:
    """Check presence of the mandatory top-level fields.

    Every applicable error is reported; this never raises.
    """
    if not isinstance(doc, dict):
        doc = {}
    errors = []

    version = doc.get("openapi")
    if _missing(version):
        errors.append("Missing required field: openapi")

    info = doc.get("info")
    if _missing(info):
        errors.append("Missing required field: info")
    else:
        if not isinstance(info, dict):
            info = {}
        if _missing(info.get("title")):
            errors.append("Missing required field: info.title")
        if _missing(info.get("version")):
            errors.append("Missing required field: info.version")

    if _missing(doc.get("paths")):
        errors.append("Missing required field: paths")

    if not _missing(version) and not str(version).startswith("3."):
        errors.append("Only OpenAPI 3.x specifications are supported")

    return ValidationResult(valid=not errors, errors=errors)


def _text(value) -> str | None:
    return None if value is None else str(value)


def _tags(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(t) for t in value]


def endpoint_id(method: str, path: str) -> str:
    """``GET`` + ``/users/{id}`` -> ``GET__users__id_``."""
    return f"{method.upper()}_{_NON_ALNUM.sub('_', path)}"


def extract_endpoints(doc: SpecDocument) -> list[Endpoint]:
    """One Endpoint per (path, verb) with a defined operation, in document order."""
    endpoints = []
    paths = doc.get("paths")
    if not isinstance(paths, dict):
        return endpoints

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue
        path = str(path)
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue

            endpoints.append(
                Endpoint(
                    id=endpoint_id(method, path),
                    path=path,
                    method=method.upper(),
                    operation_id=_text(operation.get("operationId")),
                    summary=_text(operation.get("summary")),
                    description=_text(operation.get("description")),
                    tags=_tags(operation.get("tags")),
                )
            )

    return endpoints


def extract_schemas(doc: SpecDocument) -> list[SchemaDefinition]:
    """Named schemas from ``components.schemas``, definitions passed through."""
    components = doc.get("components") or {}
    schemas = components.get("schemas") if isinstance(components, dict) else None
    if not schemas:
        return []
    return [SchemaDefinition(name=str(name), definition=schema) for name, schema in schemas.items()]


def ensure_valid(doc: SpecDocument) -> None:
    """Raise SpecValidationError carrying every error of ``validate_spec``."""
    result = validate_spec(doc)
    if not result.valid:
        raise SpecValidationError(result.errors)
