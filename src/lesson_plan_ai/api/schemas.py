import re
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, Field

# Characters that cannot appear verbatim in a quoted ASCII header value.
_HEADER_UNSAFE = re.compile(r'[^\x20-\x7e]|["\\]')


class LessonPlanResponse(BaseModel):
    success: bool
    html: str
    usage: dict[str, Any] | None = None
    error: str | None = None
    message: str


class PdfRequest(BaseModel):
    html: str | None = None
    lesson_data: dict[str, Any] | None = Field(default=None, alias="lessonData")

    def filename(self) -> str:
        data = self.lesson_data or {}
        subject = data.get("subject") or "subject"
        date = data.get("date") or "date"
        return f"lesson-plan-{subject}-{date}.pdf"

    def content_disposition(self) -> str:
        """Attachment header; non-ASCII names get an RFC 6266 ``filename*``."""
        filename = self.filename()
        ascii_name = _HEADER_UNSAFE.sub("_", filename)
        if ascii_name == filename:
            return f'attachment; filename="{filename}"'
        return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename, safe='')}"
