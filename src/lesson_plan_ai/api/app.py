import logging

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from lesson_plan_ai.api.sample import SAMPLE_LESSON
from lesson_plan_ai.api.schemas import LessonPlanResponse, PdfRequest
from lesson_plan_ai.config import get_settings
from lesson_plan_ai.models import LessonRequest
from lesson_plan_ai.rendering.pdf import PdfRenderer
from lesson_plan_ai.service.generator import LessonPlanGenerator

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="lesson-plan-ai", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

generator = LessonPlanGenerator(settings)
renderer = PdfRenderer(settings)
router = APIRouter()


def _internal_error(message: str, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": message,
            "details": str(exc) if settings.is_development else None,
        },
    )


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@router.post("/lesson-plan", response_model=None)
async def generate_lesson_plan(lesson: LessonRequest | None = None) -> JSONResponse:
    # A request without a body is an empty form.
    lesson = lesson or LessonRequest()
    missing = lesson.missing_fields()
    if missing:
        logger.info("lesson_plan.rejected missing=%s", ",".join(missing))
        return JSONResponse(
            status_code=400,
            content={
                "error": "Missing required fields",
                "missingFields": missing,
                "message": "Please provide all required lesson plan information",
            },
        )

    logger.info("lesson_plan.generate lesson=%s", lesson.lesson_title)
    try:
        result = await generator.generate(lesson)
    except Exception as exc:
        logger.exception("lesson_plan.failed lesson=%s", lesson.lesson_title)
        return _internal_error("Failed to generate lesson plan", exc)

    if result.success:
        body = LessonPlanResponse(
            success=True,
            html=result.html,
            usage=result.usage,
            message="Lesson plan generated successfully",
        )
        return JSONResponse(status_code=200, content=body.model_dump(exclude={"error"}))

    logger.warning("lesson_plan.fallback error=%s", result.error)
    body = LessonPlanResponse(
        success=False,
        html=result.html,
        error=result.error,
        message="Lesson plan generation failed, using fallback template",
    )
    return JSONResponse(status_code=500, content=body.model_dump(exclude={"usage"}))


@router.post("/pdf", response_model=None)
async def generate_pdf(req: PdfRequest) -> Response:
    if not req.html:
        return JSONResponse(
            status_code=400,
            content={
                "error": "Missing HTML content",
                "message": "Please provide HTML content to convert to PDF",
            },
        )

    try:
        result = await renderer.render(req.html)
    except Exception as exc:
        logger.exception("pdf.route_failed")
        return _internal_error("Failed to generate PDF", exc)

    if not result.success:
        return JSONResponse(
            status_code=500,
            content={
                "error": "PDF generation failed",
                "message": "Failed to generate PDF document",
                "details": result.error,
            },
        )

    try:
        response = Response(
            content=result.pdf,
            media_type="application/pdf",
            headers={"Content-Disposition": req.content_disposition()},
        )
    except Exception as exc:
        logger.exception("pdf.response_failed")
        return _internal_error("Failed to generate PDF", exc)

    logger.info("pdf.sent filename=%s bytes=%d", req.filename(), len(result.pdf))
    return response


@router.get("/test")
async def sample_lesson() -> dict:
    return {
        "message": "Test endpoint working",
        "sampleData": SAMPLE_LESSON,
        "instructions": "Use this sample data to test the lesson plan generation",
    }


app.include_router(router, prefix="/generate", tags=["Generate"])
# Path used by the browser frontend.
app.include_router(router, prefix="/api/generate", include_in_schema=False)
