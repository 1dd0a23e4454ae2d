"""tsinit prompts -- the interactive half of project initialization.

Key classes:
    Prompter       - rich.prompt adapter (text / select, validation, cancel)
    Questionnaire  - the ordered question sequence producing ProjectAnswers
"""

from .prompter import Prompter
from .questionnaire import Questionnaire
from .validators import (
    CANCEL_SENTINEL,
    is_cancel,
    parse_keywords,
    validate_optional_repo_url,
    validate_project_name,
    validate_repo_url,
)

__all__ = [
    "CANCEL_SENTINEL",
    "Prompter",
    "Questionnaire",
    "is_cancel",
    "parse_keywords",
    "validate_optional_repo_url",
    "validate_project_name",
    "validate_repo_url",
]
