"""Assembles the publishing workflow from validated settings."""

from collections.abc import Iterator
from contextlib import contextmanager

from gitlab_annotator.core.application.workflows import PublishAnnotationsWorkflow
from gitlab_annotator.infrastructure.configuration.annotator_settings import AnnotatorSettings
from gitlab_annotator.infrastructure.tools.vcs.gitlab import GitLabHttpClient, GitLabReviewClient


@contextmanager
def build_workflow(settings: AnnotatorSettings) -> Iterator[PublishAnnotationsWorkflow]:
    """Yield a workflow bound to a GitLab client that is closed on exit.

    Raises ConfigurationError before any client is created when a required
    setting is missing.
    """
    settings.validate_required()
    http_client = GitLabHttpClient(settings)
    try:
        review = GitLabReviewClient(http_client, settings.project_id.strip())
        yield PublishAnnotationsWorkflow(review, settings.annotation_options())
    finally:
        http_client.close()
