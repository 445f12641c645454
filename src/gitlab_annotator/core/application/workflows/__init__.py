from gitlab_annotator.core.application.workflows.annotation_options import AnnotationOptions
from gitlab_annotator.core.application.workflows.publish_annotations_workflow import (
    PublishAnnotationsInput,
    PublishAnnotationsWorkflow,
)

__all__ = ["AnnotationOptions", "PublishAnnotationsInput", "PublishAnnotationsWorkflow"]
