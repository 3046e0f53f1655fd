"""JSON output validator.

Checks a model's JSON output against a JSON Schema and collects every
violation, the way a structured-output pipeline would before accepting
a response.
"""

import logging
from collections.abc import Iterable

from jsonschema import exceptions as jsonschema_exceptions
from jsonschema.validators import validator_for

from app.strategies.evaluation.models import SchemaError, ValidationReport
from app.strategies.evaluation.strict_json import JSONParseError, loads_strict

logger = logging.getLogger(__name__)


def _pointer(parts: Iterable[object]) -> str:
    """Render a path as an RFC 6901 JSON pointer ("" for the document root)."""
    return "".join(
        "/" + str(part).replace("~", "~0").replace("/", "~1") for part in parts
    )


def _single_error(keyword: str, message: str) -> ValidationReport:
    return ValidationReport(
        valid=False,
        errors=[SchemaError(path="", schema_path="", keyword=keyword, message=message)],
    )


def validate_output(schema_text: str, output_text: str) -> ValidationReport:
    """Validate JSON output text against a JSON Schema text.

    Args:
        schema_text: The JSON Schema, as JSON text.
        output_text: The model output, as JSON text.

    Returns:
        ValidationReport listing every violation. Unparseable input yields a
        single error with keyword "parse"; an invalid schema yields a single
        error with keyword "schema".
    """
    try:
        schema = loads_strict(schema_text)
        data = loads_strict(output_text)
    except JSONParseError as e:
        logger.info(f"Validator input is not valid JSON: {e}")
        return _single_error("parse", str(e))

    # A schema document is an object or a boolean
    if not isinstance(schema, (dict, bool)):
        logger.info(f"Schema is not an object or boolean: {type(schema).__name__}")
        return _single_error("schema", f"{schema!r} is not of type 'object', 'boolean'")

    validator_cls = validator_for(schema)
    try:
        validator_cls.check_schema(schema)
    except jsonschema_exceptions.SchemaError as e:
        logger.info(f"Invalid JSON schema: {e.message}")
        return _single_error("schema", e.message)

    validator = validator_cls(schema)
    errors = [
        SchemaError(
            path=_pointer(error.absolute_path),
            schema_path=_pointer(error.absolute_schema_path),
            keyword=str(error.validator) if error.validator is not None else "false",
            message=error.message,
        )
        for error in validator.iter_errors(data)
    ]
    errors.sort(key=lambda e: (e.path, e.schema_path))

    logger.debug(f"Validated output: {len(errors)} errors")
    return ValidationReport(valid=not errors, errors=errors)
