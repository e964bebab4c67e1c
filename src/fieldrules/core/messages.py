"""
Default English messages for failure descriptors.

A validator returns either the rule's custom message or a descriptor dict
such as {"name": "password", "min": 8}. render_failure() turns the latter
into a sentence; custom messages pass through untouched.
"""

from typing import Any

MESSAGE_TEMPLATES = {
    "present": "Field '{name}' is required.",
    "absent": "Field '{name}' must not be filled in.",
    "confirmed": "Field '{name}' and field '{qual}' must match.",
    "format": "Field '{name}' is not correctly formatted.",
    "length": "Field '{name}' is not the correct length.",
    "length_min": "Field '{name}' must be at least {min} characters long.",
    "length_max": "Field '{name}' may not be more than {max} characters long.",
    "withFunction": "Field '{name}' is not valid.",
}

FALLBACK_TEMPLATE = "Field '{name}' is invalid."


def _template_key(validator_name: str, descriptor: dict[str, Any]) -> str:
    if validator_name == "length":
        if "min" in descriptor:
            return "length_min"
        if "max" in descriptor:
            return "length_max"
    return validator_name


def render_failure(validator_name: str, failure: str | dict[str, Any]) -> str:
    """
    Render a failure descriptor as a readable message.

    Args:
        validator_name: Name of the validator that produced the failure
        failure: Custom message string or descriptor dict

    Returns:
        The custom message unchanged, or the default sentence for the validator
    """
    if isinstance(failure, str):
        return failure

    template = MESSAGE_TEMPLATES.get(_template_key(validator_name, failure), FALLBACK_TEMPLATE)
    try:
        return template.format(**failure)
    except KeyError:
        # Descriptor is missing a placeholder the template needs
        return FALLBACK_TEMPLATE.format(name=failure.get("name", "?"))
