from functools import wraps
from flask import request
from pydantic import ValidationError
from .responses import error, validation_error_response


def validate_schema(schema):
    """Validate the JSON body against a pydantic model.

    The parsed model is left on ``request.validated_data``. A missing body is
    validated as ``{}`` so required fields are reported by name.
    """

    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            payload = request.get_json(silent=True)
            if payload is None:
                payload = {}
            if not isinstance(payload, dict):
                return error("Request body must be a JSON object", status=400)
            try:
                obj = schema.model_validate(payload)
            except ValidationError as ve:
                return validation_error_response(
                    ve.errors(include_url=False, include_context=False, include_input=False)
                )
            request.validated_data = obj
            return fn(*args, **kwargs)
        return wrapper

    return decorator
