from unittest.mock import MagicMock

import pytest
from factories import make_settings

from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.infrastructure.configuration.annotator_settings import AnnotatorSettings


@pytest.fixture()
def settings() -> AnnotatorSettings:
    return make_settings()


@pytest.fixture()
def review() -> MagicMock:
    """ReviewPort double with an empty review thread."""
    port = MagicMock(spec=ReviewPort)
    port.list_merge_request_notes.return_value = []
    port.list_merge_request_discussion_notes.return_value = []
    port.list_commit_discussion_notes.return_value = []
    port.get_merge_request.return_value = {"iid": 7}
    port.get_latest_diff_version.return_value = None
    port.get_merge_request_diffs.return_value = []
    port.get_commit_diffs.return_value = []
    return port
