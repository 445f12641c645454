from gitlab_annotator.core.application.cleanup.session_cleanup import SessionCleanup

__all__ = ["SessionCleanup"]
