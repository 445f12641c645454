from pydantic import BaseModel, Field, field_validator

from gitlab_annotator.core.domain.annotation import FindingKind


class FindingDTO(BaseModel):
    kind: FindingKind
    path: str = Field(min_length=1)
    line_start: int = Field(0, alias="lineStart")
    line_end: int = Field(0, alias="lineEnd")
    column_start: int = Field(0, alias="columnStart")
    column_end: int = Field(0, alias="columnEnd")
    title: str = ""
    message: str = ""
    details: str = ""
    markdown_details: str = Field("", alias="markdownDetails")

    model_config = {"populate_by_name": True}

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper().replace("-", "_")
        return value


class FindingsReportDTO(BaseModel):
    findings: list[FindingDTO] = []
