from fastapi.testclient import TestClient

from lesson_plan_ai.api import app as app_module
from lesson_plan_ai.api.app import app
from lesson_plan_ai.config import Settings
from lesson_plan_ai.models import LessonRequest
from lesson_plan_ai.rendering.pdf import RenderResult
from lesson_plan_ai.service.generator import GenerationResult, LessonPlanGenerator

client = TestClient(app)

REQUIRED = [
    "schoolName",
    "teacherName",
    "subject",
    "className",
    "unitTitle",
    "lessonTitle",
    "instructionalObjective",
]


def _sample() -> dict:
    return client.get("/generate/test").json()["sampleData"]


def test_healthz() -> None:
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_sample_endpoint_returns_complete_lesson() -> None:
    resp = client.get("/generate/test")
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Test endpoint working"
    assert data["sampleData"]["subject"] == "Mathematics"
    assert all(data["sampleData"][field] for field in REQUIRED)


def test_api_prefix_mirrors_routes() -> None:
    resp = client.get("/api/generate/test")
    assert resp.status_code == 200
    assert resp.json()["sampleData"]["schoolName"] == "Springfield Elementary School"


def test_missing_fields_rejected_before_generation(monkeypatch) -> None:
    called = {"generate": False}

    async def fake_generate(lesson: LessonRequest) -> GenerationResult:
        called["generate"] = True
        return GenerationResult(success=True, html="")

    monkeypatch.setattr(app_module.generator, "generate", fake_generate)

    resp = client.post("/generate/lesson-plan", json={"schoolName": "Springfield", "subject": "", "term": "Fall"})

    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Missing required fields"
    assert data["missingFields"] == [field for field in REQUIRED if field != "schoolName"]
    assert called["generate"] is False


def test_null_and_false_count_as_missing_but_whitespace_does_not(monkeypatch) -> None:
    called = {"generate": False}

    async def fake_generate(lesson: LessonRequest) -> GenerationResult:
        called["generate"] = True
        return GenerationResult(success=True, html="")

    monkeypatch.setattr(app_module.generator, "generate", fake_generate)
    payload = {**_sample(), "teacherName": None, "subject": False, "schoolName": "   "}

    resp = client.post("/generate/lesson-plan", json=payload)

    assert resp.status_code == 400
    assert resp.json()["missingFields"] == ["teacherName", "subject"]
    assert called["generate"] is False


def test_empty_body_lists_every_required_field() -> None:
    resp = client.post("/generate/lesson-plan")

    assert resp.status_code == 400
    assert resp.json()["missingFields"] == REQUIRED


def test_boolean_and_object_values_are_read_as_text(monkeypatch) -> None:
    captured: dict = {}

    async def fake_generate(lesson: LessonRequest) -> GenerationResult:
        captured["lesson"] = lesson
        return GenerationResult(success=True, html="<table></table>")

    monkeypatch.setattr(app_module.generator, "generate", fake_generate)
    payload = {**_sample(), "specialNeeds": True, "location": False, "materials": {"items": ["bars"]}}

    resp = client.post("/generate/lesson-plan", json=payload)

    assert resp.status_code == 200
    lesson = captured["lesson"]
    assert lesson.special_needs == "true"
    assert lesson.location == ""
    assert lesson.materials == '{"items": ["bars"]}'


def test_lesson_plan_without_credential_returns_fallback(monkeypatch) -> None:
    generator = LessonPlanGenerator(Settings(_env_file=None, OPENAI_API_KEY=""))
    monkeypatch.setattr(app_module, "generator", generator)

    resp = client.post("/generate/lesson-plan", json=_sample())

    assert resp.status_code == 500
    data = resp.json()
    assert data["success"] is False
    assert data["error"] == "OpenAI API key not configured"
    assert data["message"] == "Lesson plan generation failed, using fallback template"
    assert "fallback lesson plan" in data["html"]
    assert "Mathematics" in data["html"]


def test_lesson_plan_success_shape(monkeypatch) -> None:
    captured: dict = {}

    async def fake_generate(lesson: LessonRequest) -> GenerationResult:
        captured["lesson"] = lesson
        return GenerationResult(
            success=True,
            html='<table class="lp-table"></table>',
            usage={"total_tokens": 42},
        )

    monkeypatch.setattr(app_module.generator, "generate", fake_generate)
    payload = {**_sample(), "unitNo": 3, "unknownField": "ignored"}

    resp = client.post("/generate/lesson-plan", json=payload)

    assert resp.status_code == 200
    assert resp.json() == {
        "success": True,
        "html": '<table class="lp-table"></table>',
        "usage": {"total_tokens": 42},
        "message": "Lesson plan generated successfully",
    }
    assert captured["lesson"].unit_no == "3"
    assert captured["lesson"].class_name == "Grade 5A"


def test_lesson_plan_unexpected_error_hides_details_outside_development(monkeypatch) -> None:
    async def broken_generate(lesson: LessonRequest) -> GenerationResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(app_module.generator, "generate", broken_generate)

    monkeypatch.setattr(app_module, "settings", Settings(_env_file=None, APP_ENV="development"))
    resp = client.post("/generate/lesson-plan", json=_sample())
    assert resp.status_code == 500
    assert resp.json() == {
        "error": "Internal server error",
        "message": "Failed to generate lesson plan",
        "details": "boom",
    }

    monkeypatch.setattr(app_module, "settings", Settings(_env_file=None, APP_ENV="production"))
    resp = client.post("/generate/lesson-plan", json=_sample())
    assert resp.status_code == 500
    assert resp.json()["details"] is None


def test_pdf_download_headers(monkeypatch) -> None:
    rendered: dict = {}

    async def fake_render(html: str, page_format: str | None = None) -> RenderResult:
        rendered["html"] = html
        return RenderResult(success=True, pdf=b"%PDF-1.4\n%fake")

    monkeypatch.setattr(app_module.renderer, "render", fake_render)

    resp = client.post(
        "/generate/pdf",
        json={"html": "<p>x</p>", "lessonData": {"subject": "Math", "date": "2024-01-15"}},
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"] == 'attachment; filename="lesson-plan-Math-2024-01-15.pdf"'
    assert resp.content.startswith(b"%PDF")
    assert rendered["html"] == "<p>x</p>"


def test_pdf_filename_placeholders(monkeypatch) -> None:
    async def fake_render(html: str, page_format: str | None = None) -> RenderResult:
        return RenderResult(success=True, pdf=b"%PDF-1.4")

    monkeypatch.setattr(app_module.renderer, "render", fake_render)

    resp = client.post("/generate/pdf", json={"html": "<p>x</p>"})

    assert resp.status_code == 200
    assert resp.headers["content-disposition"] == 'attachment; filename="lesson-plan-subject-date.pdf"'


def test_pdf_non_latin1_filename_uses_encoded_form(monkeypatch) -> None:
    async def fake_render(html: str, page_format: str | None = None) -> RenderResult:
        return RenderResult(success=True, pdf=b"%PDF-1.4")

    monkeypatch.setattr(app_module.renderer, "render", fake_render)

    resp = client.post(
        "/generate/pdf",
        json={"html": "<p>x</p>", "lessonData": {"subject": "数学", "date": "2024-01-15"}},
    )

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "application/pdf"
    assert resp.headers["content-disposition"] == (
        "attachment; filename=\"lesson-plan-__-2024-01-15.pdf\"; "
        "filename*=UTF-8''lesson-plan-%E6%95%B0%E5%AD%A6-2024-01-15.pdf"
    )


def test_pdf_filename_with_quotes_and_newlines_stays_one_header(monkeypatch) -> None:
    async def fake_render(html: str, page_format: str | None = None) -> RenderResult:
        return RenderResult(success=True, pdf=b"%PDF-1.4")

    monkeypatch.setattr(app_module.renderer, "render", fake_render)

    resp = client.post(
        "/generate/pdf",
        json={"html": "<p>x</p>", "lessonData": {"subject": 'Math "A"\r\nX-Injected: 1'}},
    )

    assert resp.status_code == 200
    assert "x-injected" not in resp.headers
    disposition = resp.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="lesson-plan-Math _A___X-Injected: 1-date.pdf"; ')
    assert "filename*=UTF-8''lesson-plan-Math%20%22A%22%0D%0AX-Injected%3A%201-date.pdf" in disposition


def test_pdf_requires_html() -> None:
    resp = client.post("/generate/pdf", json={"lessonData": {"subject": "Math"}})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing HTML content"


def test_pdf_render_failure(monkeypatch) -> None:
    async def failing_render(html: str, page_format: str | None = None) -> RenderResult:
        return RenderResult(success=False, error="Could not find Chrome.")

    monkeypatch.setattr(app_module.renderer, "render", failing_render)

    resp = client.post("/generate/pdf", json={"html": "<p>x</p>", "lessonData": None})

    assert resp.status_code == 500
    assert resp.json() == {
        "error": "PDF generation failed",
        "message": "Failed to generate PDF document",
        "details": "Could not find Chrome.",
    }
