from gitlab_annotator.infrastructure.tools.vcs.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
)
from gitlab_annotator.infrastructure.tools.vcs.gitlab.gitlab_review_client import (
    GitLabReviewClient,
)

__all__ = ["GitLabHttpClient", "GitLabReviewClient"]
