"""
Form Validator Module

Pure validation of post drafts before they are submitted.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from ..config import config


# Field name -> message. A missing or None entry means the field is valid.
FormErrors = Dict[str, Optional[str]]

FIELDS = ("title", "body")


@dataclass
class Draft:
    """Unsaved title/body pair held by a form."""
    title: str = ""
    body: str = ""


def validate_draft(draft: Draft) -> FormErrors:
    """
    Map a draft to its field errors.

    Required checks run first, then length checks, so a length message
    replaces a required message for the same field. Lengths are measured
    on the untrimmed text.

    Args:
        draft: The draft to check.

    Returns:
        A new mapping of field errors; empty exactly when the draft is valid.
    """
    rules = config.form
    errors: FormErrors = {}

    if not draft.title.strip():
        errors["title"] = rules.title_required_message
    if not draft.body.strip():
        errors["body"] = rules.body_required_message
    if len(draft.title) > rules.title_max_length:
        errors["title"] = rules.title_length_message
    if len(draft.body) > rules.body_max_length:
        errors["body"] = rules.body_length_message

    return errors


def has_errors(errors: FormErrors) -> bool:
    """True if any field carries a message."""
    return any(message for message in errors.values())
