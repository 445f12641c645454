from gitlab_annotator.core.exceptions.annotator_error import AnnotatorError
from gitlab_annotator.core.exceptions.configuration_error import ConfigurationError
from gitlab_annotator.core.exceptions.diff_parse_error import DiffParseError
from gitlab_annotator.core.exceptions.provider_error import ProviderError
from gitlab_annotator.core.exceptions.target_resolution_error import TargetResolutionError

__all__ = [
    "AnnotatorError",
    "ConfigurationError",
    "DiffParseError",
    "ProviderError",
    "TargetResolutionError",
]
