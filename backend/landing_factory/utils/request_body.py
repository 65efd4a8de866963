from typing import Any, Dict

from flask import request

from landing_factory.domain.exceptions import ValidationError


def json_object_body() -> Dict[str, Any]:
    """
    Parsed JSON request body. A missing or unparseable body reads as ``{}``;
    any other JSON type (array, string, number) is rejected.
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
