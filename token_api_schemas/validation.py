"""
Shared Validation Machinery

Every payload schema in this package is a frozen pydantic model deriving from
``PayloadModel``. Validation never raises for bad input: ``safe_validate`` returns a
``ValidationResult`` holding either the validated model or an ordered list of
``ValidationFailure`` records. ``parse`` is the raising counterpart.

Validation runs in two passes:
1. Field constraints (type, length, range, pattern, enum) declared on the model
   and checked by pydantic. Every failing field is reported.
2. Cross-field consistency checks (``consistency_failures``), evaluated only when
   the first pass succeeded.

Failure messages come from the localized catalogs in ``messages``; failures with no
catalog entry keep pydantic's message.

``JsonStringSchema`` wraps a model with a JSON decoding step so raw wire payloads
can be validated through a single call.
"""
import json
from typing import Annotated, Any, Dict, List, Optional, Tuple, Type, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, StrictStr, ValidationError, conint, constr
from pydantic_core import PydanticKnownError

from token_api_schemas.errors import PayloadValidationError
from token_api_schemas.messages import invalid_json_message, lookup_message
from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)

FieldPath = Tuple[Union[str, int], ...]


# --- Wire field types ---
# Payloads are produced by JavaScript clients, so these follow JSON.parse semantics
# rather than Python's: integral numbers may arrive as floats (1e3), optional
# strings may be omitted but not sent as null, and lengths count UTF-16 code units.

def _integral_float_to_int(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _reject_null(value: Any) -> Any:
    if value is None:
        raise PydanticKnownError("string_type")
    return value


def utf16_length(value: str) -> int:
    """Length of ``value`` as JavaScript's ``String.length`` reports it."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def wire_int(**constraints):
    """Strict int that also accepts integral floats such as ``1e3``; bools and strings are rejected."""
    return Annotated[conint(strict=True, **constraints), BeforeValidator(_integral_float_to_int)]


def optional_str(**constraints):
    """Strict string that may be left out of the payload but is never null."""
    return Annotated[Optional[constr(strict=True, **constraints)], BeforeValidator(_reject_null)]


def js_str(min_length: int, max_length: int):
    """Strict string whose length bounds count UTF-16 code units."""

    def check_length(value: str) -> str:
        length = utf16_length(value)
        if length < min_length:
            raise PydanticKnownError("string_too_short", {"min_length": min_length})
        if length > max_length:
            raise PydanticKnownError("string_too_long", {"max_length": max_length})
        return value

    return Annotated[StrictStr, AfterValidator(check_length)]


class ValidationFailure(BaseModel):
    """One constraint violation: where it happened and why."""

    model_config = ConfigDict(frozen=True)

    path: FieldPath = ()
    message: str
    code: str

    def __str__(self) -> str:
        location = ".".join(str(part) for part in self.path) or "<root>"
        return f"{location}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of a validation call. ``data`` is set only when ``success`` is True."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[Any] = None
    errors: List[ValidationFailure] = Field(default_factory=list)

    @classmethod
    def ok(cls, data: Any) -> "ValidationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, errors: List[ValidationFailure]) -> "ValidationResult":
        return cls(success=False, errors=errors)


def failure_key(loc: FieldPath, error_type: str) -> str:
    """Builds the catalog key for a failure, dropping list indexes from the path."""
    names = [part for part in loc if isinstance(part, str)]
    return ".".join(names + [error_type])


def failures_from_pydantic(schema_name: str, exc: ValidationError) -> List[ValidationFailure]:
    """Converts a pydantic ValidationError into catalog-backed failure records."""
    failures = []
    for error in exc.errors(include_url=False):
        loc = tuple(error["loc"])
        error_type = error["type"]
        message = lookup_message(schema_name, failure_key(loc, error_type)) or error["msg"]
        failures.append(ValidationFailure(path=loc, message=message, code=error_type))
    return failures


class PayloadModel(BaseModel):
    """Base class for all payload schemas."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def consistency_failures(self) -> List[ValidationFailure]:
        """Cross-field checks. Only called on values that passed every field check."""
        return []

    def consistency_failure(self, field: str, code: str) -> ValidationFailure:
        """Builds a cross-field failure attached to ``field`` with a catalog message."""
        schema_name = type(self).__name__
        message = lookup_message(schema_name, f"{field}.{code}") or code
        return ValidationFailure(path=(field,), message=message, code=code)

    @classmethod
    def safe_validate(cls, data: Any) -> ValidationResult:
        """
        Validates an already-decoded payload.

        Args:
            data: The untyped input, normally a dict decoded from JSON.

        Returns:
            A ValidationResult holding the model instance or the failure list.
        """
        try:
            instance = cls.model_validate(data)
        except ValidationError as e:
            failures = failures_from_pydantic(cls.__name__, e)
            logger.debug(f"{cls.__name__} validation failed with {len(failures)} error(s)")
            return ValidationResult.failed(failures)

        failures = instance.consistency_failures()
        if failures:
            logger.debug(f"{cls.__name__} consistency check failed with {len(failures)} error(s)")
            return ValidationResult.failed(failures)
        return ValidationResult.ok(instance)

    @classmethod
    def parse(cls, data: Any):
        """Validates ``data`` and returns the model, raising PayloadValidationError on failure."""
        result = cls.safe_validate(data)
        if not result.success:
            raise PayloadValidationError(cls.__name__, result.errors)
        return result.data

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible dict of the value; optional fields absent from the input are omitted."""
        return self.model_dump(mode="json", exclude_unset=True)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Unexpected token {name}")


class JsonStringSchema:
    """Validates a JSON text by decoding it and delegating to ``model``."""

    def __init__(self, model: Type[PayloadModel]):
        self.model = model

    @property
    def name(self) -> str:
        return f"{self.model.__name__}String"

    def __repr__(self) -> str:
        return f"JsonStringSchema({self.model.__name__})"

    def safe_validate(self, text: Any) -> ValidationResult:
        """
        Decodes ``text`` as JSON and validates the result against the wrapped model.

        A non-string input or undecodable text yields a single failure at the root
        path. Failures from the wrapped model are returned unchanged.
        """
        if not isinstance(text, str):
            failure = ValidationFailure(path=(), message="Input should be a valid string", code="string_type")
            return ValidationResult.failed([failure])
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            logger.debug(f"{self.name} received undecodable JSON: {e}")
            failure = ValidationFailure(path=(), message=invalid_json_message(str(e)), code="json_invalid")
            return ValidationResult.failed([failure])
        return self.model.safe_validate(data)

    def parse(self, text: Any):
        result = self.safe_validate(text)
        if not result.success:
            raise PayloadValidationError(self.name, result.errors)
        return result.data
