from __future__ import annotations

from gitlab_annotator.core.exceptions.annotator_error import AnnotatorError


class ConfigurationError(AnnotatorError):
    """Raised when configuration is invalid or incomplete."""
