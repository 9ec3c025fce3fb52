# catalog/validation.py
"""
Request validation for the catalog resources.

Rule sets are pydantic models. Every failure pydantic reports is collected
and rewritten into a field-keyed map of readable messages, then the
existence rules (ids that must point at live rows) are checked against the
database and merged into the same map. Nothing is raised until every rule
has been looked at.
"""
import uuid
import logging
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Type

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticCustomError
from sqlalchemy.orm import Session

from .exceptions import ValidationFailed

logger = logging.getLogger(__name__)

MESSAGES = {
    "missing": "The {attribute} field is required.",
    "string_type": "The {attribute} must be a string.",
    "string_too_long": "The {attribute} may not be greater than {max_length} characters.",
    "bool_type": "The {attribute} field must be true or false.",
    "bool_parsing": "The {attribute} field must be true or false.",
    "int_type": "The {attribute} must be an integer.",
    "int_parsing": "The {attribute} must be an integer.",
    "int_from_float": "The {attribute} must be an integer.",
    "literal_error": "The selected {attribute} is invalid.",
    "enum": "The selected {attribute} is invalid.",
    "list_type": "The {attribute} must be an array.",
    "exists": "The selected {attribute} is invalid.",
    "date_format": "The {attribute} does not match the format {format}.",
    "dict_type": "The {attribute} must be an object.",
}

# blank strings and empty arrays fail "required", not a length rule
REQUIRED_ALIASES = {"string_too_short", "too_short"}

# request locations FastAPI prefixes to every error
LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

# the only inputs the boolean rule accepts
BOOLEAN_VALUES = (True, False, 0, 1, "0", "1")


class RuleSet(BaseModel):
    """
    Base class for request rule sets.

    exists_rules maps a field holding a list of ids to the model whose live
    (not soft-deleted) rows those ids must all point at.
    """
    exists_rules: ClassVar[Dict[str, Any]] = {}

    class Config:
        str_strip_whitespace = True
        use_enum_values = True
        extra = 'ignore'


def attribute_name(field: str) -> str:
    return field.replace("_", " ")


def boolean(value: Any) -> Any:
    """
    Before-validator for boolean fields: only true/false, 0/1 and "0"/"1"
    get through to pydantic's bool coercion.
    """
    if type(value) in (bool, int, str) and value in BOOLEAN_VALUES:
        return value
    raise PydanticCustomError("bool_type", "Input should be a valid boolean")


def error_field(loc: Sequence[Any]) -> str:
    parts = list(loc)
    if parts and parts[0] in LOCATION_PREFIXES:
        parts = parts[1:]
    if not parts:
        return "body"
    return ".".join(str(part) for part in parts)


def required_fields(rules: Type[RuleSet]) -> Set[str]:
    return {name for name, info in rules.model_fields.items() if info.is_required()}


def error_message(error: Mapping[str, Any], field: str, required: Optional[Set[str]] = None) -> str:
    """
    A null input on a required field reads as missing. When the required
    fields are not known every null is treated that way.
    """
    kind = error.get("type", "")
    null_input = kind != "missing" and "input" in error and error["input"] is None
    if kind in REQUIRED_ALIASES or (null_input and (required is None or field in required)):
        kind = "missing"

    template = MESSAGES.get(kind)
    if template is None:
        return error.get("msg") or f"The {attribute_name(field)} is invalid."

    context = dict(error.get("ctx") or {})
    try:
        return template.format(attribute=attribute_name(field), **context)
    except (KeyError, IndexError):
        return error.get("msg", template)


def translate_errors(
    errors: Iterable[Mapping[str, Any]], required: Optional[Set[str]] = None
) -> Dict[str, List[str]]:
    """Rewrite pydantic error dicts into {field: [message, ...]}"""
    translated: Dict[str, List[str]] = {}
    for error in errors:
        field = error_field(error.get("loc", ()))
        message = error_message(error, field, required)
        messages = translated.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return translated


def find_missing_ids(db: Session, model: Type[Any], ids: Iterable[Any]) -> List[str]:
    """
    Return the ids that do not name a live row of model.
    Malformed UUIDs count as missing.
    """
    missing: List[str] = []
    wanted = set()
    for raw in ids:
        try:
            wanted.add(uuid.UUID(str(raw)))
        except ValueError:
            missing.append(str(raw))

    if wanted:
        found = {
            row_id
            for (row_id,) in db.query(model.id)
            .filter(model.id.in_(wanted), model.deleted_at.is_(None))
            .all()
        }
        missing.extend(str(row_id) for row_id in wanted - found)
    return missing


def validate(db: Session, rules: Type[RuleSet], data: Any) -> Dict[str, Any]:
    """
    Validate request data against a rule set.

    Returns only the fields present in the request (after coercion), so
    callers can tell "not sent" apart from "sent with the default value".
    Raises ValidationFailed carrying every violation found.
    """
    if not isinstance(data, Mapping):
        raise ValidationFailed({"body": [MESSAGES["dict_type"].format(attribute="body")]})

    errors: Dict[str, List[str]] = {}
    validated = None
    try:
        validated = rules.model_validate(data)
    except ValidationError as exc:
        errors = translate_errors(exc.errors(), required_fields(rules))

    for field, model in rules.exists_rules.items():
        # coerced ids when the rule set passed, raw input otherwise
        value = getattr(validated, field) if validated is not None else data.get(field)
        if field in errors or not isinstance(value, list) or not value:
            continue
        missing = find_missing_ids(db, model, value)
        if missing:
            logger.info(f"{field} references unknown ids: {missing}")
            errors[field] = [MESSAGES["exists"].format(attribute=attribute_name(field))]

    if errors:
        raise ValidationFailed(errors)

    return validated.model_dump(exclude_unset=True)
