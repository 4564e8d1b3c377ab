import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

REQUIRED_FIELDS = (
    "school_name",
    "teacher_name",
    "subject",
    "class_name",
    "unit_title",
    "lesson_title",
    "instructional_objective",
)


class LessonRequest(BaseModel):
    """Lesson-plan form fields. Wire names are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    school_name: str = ""
    teacher_name: str = ""
    term: str = ""
    date: str = ""
    subject: str = ""
    class_name: str = ""
    unit_no: str = ""
    lesson_no: str = ""
    duration: str = ""
    class_size: str = ""
    special_needs: str = ""
    unit_title: str = ""
    key_competence: str = ""
    lesson_title: str = ""
    instructional_objective: str = ""
    location: str = ""
    materials: str = ""
    references: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if value is None or value is False:
            return ""
        if value is True:
            return "true"
        if isinstance(value, (dict, list)):
            return json.dumps(value, ensure_ascii=False)
        return value

    def missing_fields(self) -> list[str]:
        return [to_camel(name) for name in REQUIRED_FIELDS if not getattr(self, name)]
