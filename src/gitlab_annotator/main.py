import sys

from gitlab_annotator.core.application.workflows import PublishAnnotationsInput
from gitlab_annotator.core.exceptions import AnnotatorError
from gitlab_annotator.infrastructure.configuration.annotator_settings import AnnotatorSettings
from gitlab_annotator.infrastructure.observability import configure_logging, get_logger
from gitlab_annotator.infrastructure.reports import load_findings, load_summary
from gitlab_annotator.infrastructure.resolution.container import build_workflow


def run(settings: AnnotatorSettings | None = None) -> int:
    """Publish the configured findings; returns the process exit status."""
    try:
        settings = settings or AnnotatorSettings.load()
        configure_logging(settings.log_level)
        with build_workflow(settings) as workflow:
            request = PublishAnnotationsInput(
                target=settings.review_target(),
                findings=load_findings(settings.findings_file, settings.relative_path),
                summary=load_summary(settings.summary_file),
            )
            workflow.execute(request)
    except AnnotatorError as exc:
        # No-op when settings were valid; otherwise logs at the default level.
        configure_logging()
        logger = get_logger("gitlab_annotator.main")
        logger.error("GitLab annotation aborted", error=str(exc), **exc.context)
        return 1
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
