# utils/utils.py

import json

from utils.exceptions import ValidationError

# =============================================================================
# CORE UTILITY HELPER FUNCTIONS
# =============================================================================

def parse_filters(request, filter_keys):
    """
    Extract filter values from request.GET.
    filter_keys: list of filter names to extract
    Returns dict: {key: value or None}
    """
    filters = {}
    for key in filter_keys:
        value = request.GET.get(key, '').strip()
        filters[key] = value if value else None
    return filters

def parse_json_body(request):
    """Decode a JSON object body; an empty body is an empty dict."""
    if not request.body:
        return {}
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data

def parse_bool(value, default=False):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')

def require_fields(data, fields):
    """Raise ValidationError naming every missing or blank field."""
    missing = [
        field for field in fields
        if data.get(field) is None or (isinstance(data.get(field), str) and not data.get(field).strip())
    ]
    if missing:
        raise ValidationError(
            "Missing required fields",
            errors={field: "This field is required." for field in missing},
        )

def parse_int(value, field, required=True):
    """Coerce a JSON/form value to int, raising ValidationError on junk."""
    if value is None or value == '':
        if required:
            raise ValidationError(f"{field} is required", errors={field: "This field is required."})
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a whole number", errors={field: "Enter a whole number."})
