import json
import os
from datetime import date
from jsonschema import Draft7Validator, FormatChecker, ValidationError, SchemaError
from jsonschema.validators import extend

BODY_FIELD = "body"


class SchemaValidationError(ValueError):
    """
    Raised when a request body fails its JSON schema.

    Carries every failing field, not only the first one, as a list of
    {"field": ..., "message": ...} dictionaries.
    """

    def __init__(self, errors: list[dict], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors


def _date_order(validator, fields, instance, schema):
    """
    `dateOrder` keyword: {"before": "from", "after": "to"}.

    Fails when both dates are present and `before` is not strictly earlier
    than `after`. Unparseable dates are left to the `format` keyword.
    """
    if not validator.is_type(instance, "object"):
        return

    start_field, end_field = fields["before"], fields["after"]
    start, end = instance.get(start_field), instance.get(end_field)
    if not start or not end:
        return

    try:
        in_order = date.fromisoformat(start) < date.fromisoformat(end)
    except (TypeError, ValueError):
        return

    if not in_order:
        yield ValidationError(
            f"{start_field!r} must be before {end_field!r}", path=[start_field]
        )


RequestBodyValidator = extend(Draft7Validator, validators={"dateOrder": _date_order})


class JsonSchemaValidator:
    def __init__(self, logger, schemas_dir: str = "../schemas"):
        """
        Initializes the JSON Schema Validator.

        Args:
            logger: Logger instance to use for logging.
            schemas_dir (str): Directory where JSON schemas are stored, relative
                to this module.
        """
        self.logger = logger
        self.schemas_dir = schemas_dir

    def load_schema(self, schema_filename: str) -> dict:
        """
        Load a JSON schema from the schemas directory.

        Args:
            schema_filename (str): Name of the JSON schema file.

        Returns:
            dict: Loaded JSON schema as a Python dictionary.

        Raises:
            FileNotFoundError: If the schema file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        schema_path = os.path.join(
            os.path.dirname(__file__), self.schemas_dir, schema_filename
        )
        try:
            with open(schema_path, "r", encoding="utf-8") as f:
                schema = json.load(f)
            return schema
        except FileNotFoundError:
            self.logger.error(f"Schema file not found: {schema_path}")
            raise
        except json.JSONDecodeError as e:
            self.logger.error(f"Failed to parse schema JSON: {e}")
            raise

    def validate_data(self, data, schema_filename: str) -> None:
        """
        Validate a request body against a schema, collecting every failure.

        Each property schema may carry an `errorMessage` which replaces the
        generic jsonschema message for that field.

        Args:
            data: The decoded JSON body to validate.
            schema_filename (str): Filename of the JSON schema to use.

        Raises:
            SchemaValidationError: If the body breaks one or more rules.
            ValueError: If the schema itself is malformed.
        """
        schema = self.load_schema(schema_filename)

        try:
            RequestBodyValidator.check_schema(schema)
        except SchemaError as se:
            self.logger.error(f"Schema error: {se.message}")
            raise ValueError(f"Schema error: {se.message}") from se

        validator = RequestBodyValidator(schema, format_checker=FormatChecker())
        errors = self._collect_field_errors(schema, validator.iter_errors(data))

        if errors:
            self.logger.warning(
                f"Validation failed for schema {schema_filename}: "
                f"{[error['field'] for error in errors]}"
            )
            raise SchemaValidationError(errors)

        self.logger.debug(f"Validation passed for schema: {schema_filename}")

    def _collect_field_errors(self, schema: dict, validation_errors) -> list[dict]:
        """Flatten jsonschema errors into one entry per failing top-level field."""
        properties = schema.get("properties", {})
        errors: list[dict] = []
        seen: set[str] = set()

        for error in validation_errors:
            if error.validator == "required":
                fields = [
                    name for name in error.validator_value if name not in error.instance
                ]
            elif error.absolute_path:
                fields = [str(error.absolute_path[0])]
            else:
                fields = [BODY_FIELD]

            for field in fields:
                if field in seen:
                    continue
                seen.add(field)
                errors.append(
                    {
                        "field": field,
                        "message": properties.get(field, {}).get(
                            "errorMessage", error.message
                        ),
                    }
                )

        return errors
