#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
from datetime import datetime
from pathlib import Path


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _bootstrap_pythonpath() -> None:
    import sys

    src = _repo_root() / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_bootstrap_pythonpath()

from lesson_plan_ai.api.sample import SAMPLE_LESSON  # noqa: E402
from lesson_plan_ai.api.schemas import PdfRequest  # noqa: E402
from lesson_plan_ai.config import get_settings  # noqa: E402
from lesson_plan_ai.models import LessonRequest  # noqa: E402
from lesson_plan_ai.rendering.pdf import PdfRenderer  # noqa: E402
from lesson_plan_ai.service.generator import LessonPlanGenerator  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate the sample lesson plan and render it to PDF.")
    parser.add_argument(
        "--input",
        default="",
        help="JSON file with lesson fields (camelCase). Default: built-in sample lesson.",
    )
    parser.add_argument(
        "--output-dir",
        default="",
        help="Directory for the HTML and PDF. Default: out/sample_<timestamp>",
    )
    parser.add_argument("--format", default="", help="PDF page format, e.g. A4 or Letter.")
    parser.add_argument("--skip-pdf", action="store_true", help="Only write the generated HTML.")
    return parser.parse_args()


def load_lesson(path: str) -> dict[str, str]:
    if not path:
        return dict(SAMPLE_LESSON)
    with Path(path).open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


async def main() -> int:
    args = parse_args()
    settings = get_settings()
    lesson_data = load_lesson(args.input)
    lesson = LessonRequest.model_validate(lesson_data)
    missing = lesson.missing_fields()
    if missing:
        print(f"[render-sample] missing required fields: {', '.join(missing)}")
        return 2

    now = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_dir = Path(args.output_dir) if args.output_dir else Path(f"out/sample_{now}")
    output_dir.mkdir(parents=True, exist_ok=True)

    result = await LessonPlanGenerator(settings).generate(lesson)
    html_path = output_dir / "lesson-plan.html"
    html_path.write_text(result.html, encoding="utf-8")
    status = "generated" if result.success else f"fallback ({result.error})"
    print(f"[render-sample] html={html_path} status={status}")
    if result.usage:
        print(f"[render-sample] usage={json.dumps(result.usage)}")

    if args.skip_pdf:
        return 0

    rendered = await PdfRenderer(settings).render(result.html, args.format or None)
    if not rendered.success:
        print(f"[render-sample] pdf failed: {rendered.error}")
        return 1
    pdf_path = output_dir / PdfRequest(html=result.html, lessonData=lesson_data).filename()
    pdf_path.write_bytes(rendered.pdf)
    print(f"[render-sample] pdf={pdf_path} bytes={len(rendered.pdf)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
