from html import escape

from lesson_plan_ai.models import LessonRequest

FALLBACK_NOTICE = (
    "Note: This is a fallback lesson plan. Please check your OpenAI API configuration "
    "to generate a complete AI-powered lesson plan."
)


def _cell(value: str) -> str:
    return escape(value) if value else "N/A"


def render_fallback_html(request: LessonRequest) -> str:
    """Static lesson-plan table used whenever generation cannot produce one.

    Only depends on the request, so two calls with equal requests return
    identical markup.
    """
    rows = [
        ("School", request.school_name),
        ("Teacher", request.teacher_name),
        ("Subject", request.subject),
        ("Lesson Title", request.lesson_title),
        ("Duration", request.duration),
    ]
    lines = [
        '<table class="lp-table" border="1" style="width: 100%; border-collapse: collapse;">',
        "  <tr>",
        '    <td colspan="2" style="text-align: center; background-color: #f0f0f0;">',
        "      <h2>Lesson Plan</h2>",
        "    </td>",
        "  </tr>",
    ]
    for label, value in rows:
        lines.extend(
            [
                "  <tr>",
                f"    <td><strong>{label}:</strong></td>",
                f"    <td>{_cell(value)}</td>",
                "  </tr>",
            ]
        )
    lines.extend(
        [
            "  <tr>",
            '    <td colspan="2" style="text-align: center; background-color: #e0e0e0;">',
            f"      <p><em>{FALLBACK_NOTICE}</em></p>",
            "    </td>",
            "  </tr>",
            "</table>",
        ]
    )
    return "\n".join(lines)
