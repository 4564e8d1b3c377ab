import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from lesson_plan_ai.config import Settings, get_settings
from lesson_plan_ai.rendering.template import wrap_document

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 500
BROWSER_NOT_FOUND_MESSAGE = "Could not find Chrome. Please install Chrome or run: playwright install chromium"
LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-accelerated-2d-canvas",
    "--no-first-run",
    "--no-zygote",
    "--disable-gpu",
]
PDF_MARGIN = {"top": "20px", "right": "20px", "bottom": "20px", "left": "20px"}


class BrowserNotFoundError(RuntimeError):
    """No headless browser could be launched from any known location."""


@dataclass(frozen=True)
class RenderResult:
    success: bool
    pdf: bytes = b""
    error: str | None = None


class PdfRenderer:
    """Render HTML fragments to PDF bytes with headless Chromium.

    The bundled Playwright browser is tried first. When it cannot start, each
    existing path in ``candidate_paths`` is tried in order.
    """

    def __init__(self, settings: Settings | None = None, candidate_paths: Sequence[str] | None = None) -> None:
        self.settings = settings or get_settings()
        if candidate_paths is None:
            candidate_paths = self.settings.browser_candidates
        self.candidate_paths = list(candidate_paths)

    async def render(self, html: str, page_format: str | None = None) -> RenderResult:
        page_format = page_format or self.settings.pdf_page_format
        document = wrap_document(html)
        try:
            async with async_playwright() as playwright:
                browser = await self._launch(playwright.chromium)
                try:
                    page = await browser.new_page()
                    await page.set_content(document, wait_until="networkidle")
                    pdf_bytes = await page.pdf(
                        format=page_format,
                        print_background=True,
                        margin=PDF_MARGIN,
                        prefer_css_page_size=True,
                        display_header_footer=False,
                    )
                finally:
                    await browser.close()
        except Exception as exc:
            logger.error(
                "pdf.failed format=%s type=%s detail=%s",
                page_format,
                exc.__class__.__name__,
                self._clip(str(exc), ERROR_LOG_LIMIT),
            )
            return RenderResult(success=False, error=str(exc) or exc.__class__.__name__)

        logger.info("pdf.rendered format=%s bytes=%d", page_format, len(pdf_bytes))
        return RenderResult(success=True, pdf=pdf_bytes)

    async def _launch(self, chromium: Any) -> Any:
        try:
            browser = await chromium.launch(headless=True, args=LAUNCH_ARGS)
            logger.info("pdf.launch source=default")
            return browser
        except PlaywrightError as exc:
            logger.warning("pdf.launch.default_failed detail=%s", self._clip(str(exc), ERROR_LOG_LIMIT))

        for path in self.candidate_paths:
            if not Path(path).exists():
                continue
            logger.info("pdf.launch.candidate path=%s", path)
            try:
                return await chromium.launch(headless=True, args=LAUNCH_ARGS, executable_path=path)
            except PlaywrightError as exc:
                logger.warning(
                    "pdf.launch.candidate_failed path=%s detail=%s",
                    path,
                    self._clip(str(exc), ERROR_LOG_LIMIT),
                )

        raise BrowserNotFoundError(BROWSER_NOT_FOUND_MESSAGE)

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"
