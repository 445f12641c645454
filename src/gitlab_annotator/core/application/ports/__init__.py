from gitlab_annotator.core.application.ports.review_port import ReviewPort

__all__ = ["ReviewPort"]
