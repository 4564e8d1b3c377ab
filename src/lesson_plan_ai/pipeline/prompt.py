from lesson_plan_ai.models import LessonRequest

SYSTEM_PROMPT = (
    "You are an expert educational consultant specializing in creating detailed, "
    "professional lesson plans. Generate lesson plans in HTML table format with proper "
    "structure and formatting."
)

LESSON_SECTIONS = (
    "Header section with school and lesson information",
    "Learning objectives",
    "Materials and resources",
    "Introduction/Warm-up activities",
    "Main activities (with timing)",
    "Assessment methods",
    "Conclusion/Plenary",
    "Homework/Extension activities",
    "Teacher reflection notes",
)


def build_prompt(request: LessonRequest) -> str:
    school_info = [
        ("School Name", request.school_name),
        ("Teacher Name", request.teacher_name),
        ("Term", request.term),
        ("Date", request.date),
        ("Subject", request.subject),
        ("Class", request.class_name),
        ("Unit No", request.unit_no),
        ("Lesson No", request.lesson_no),
        ("Duration", request.duration),
        ("Class Size", request.class_size),
        ("Special Needs", request.special_needs or "None specified"),
    ]
    lesson_details = [
        ("Unit Title", request.unit_title),
        ("Key Competence", request.key_competence),
        ("Lesson Title", request.lesson_title),
        ("Instructional Objective", request.instructional_objective),
        ("Location", request.location),
        ("Materials", request.materials),
        ("References", request.references),
    ]
    lines = ["Create a professional lesson plan in HTML table format with the following details:", ""]
    lines.append("School Information:")
    lines.extend(f"- {label}: {value}" for label, value in school_info)
    lines.extend(["", "Lesson Details:"])
    lines.extend(f"- {label}: {value}" for label, value in lesson_details)
    lines.extend(
        [
            "",
            "Please create a comprehensive lesson plan with the following structure in HTML table format:",
            "",
        ]
    )
    lines.extend(f"{idx}. {section}" for idx, section in enumerate(LESSON_SECTIONS, start=1))
    lines.extend(
        [
            "",
            'Format the entire response as a single HTML table with class "lp-table" and ensure '
            "it's well-structured for both screen viewing and printing. Use appropriate styling "
            "classes for different sections.",
            "",
            "Return only the HTML table content, no additional text or explanations.",
        ]
    )
    return "\n".join(lines)
