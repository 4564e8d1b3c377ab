import logging
from dataclasses import dataclass
from typing import Any

from lesson_plan_ai.config import Settings, get_settings
from lesson_plan_ai.models import LessonRequest
from lesson_plan_ai.pipeline.fallback import render_fallback_html
from lesson_plan_ai.pipeline.prompt import SYSTEM_PROMPT, build_prompt
from lesson_plan_ai.pipeline.sanitize import sanitize_html
from lesson_plan_ai.providers.llm.routing import ProviderRoute, resolve_route

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000
MISSING_CREDENTIAL_ERROR = "OpenAI API key not configured"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one generation. ``html`` is always renderable."""

    success: bool
    html: str
    usage: dict[str, Any] | None = None
    error: str | None = None


class LessonPlanGenerator:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.route: ProviderRoute = resolve_route(self.settings)

    @property
    def has_credential(self) -> bool:
        return bool(self.settings.openai_api_key)

    async def generate(self, request: LessonRequest) -> GenerationResult:
        if not self.has_credential:
            logger.warning(
                "generate.fallback reason=credential_missing lesson=%s",
                self._clip(request.lesson_title, 80),
            )
            return GenerationResult(
                success=False,
                html=render_fallback_html(request),
                error=MISSING_CREDENTIAL_ERROR,
            )

        try:
            response = await self._complete(build_prompt(request))
            html = sanitize_html(self._first_content(response))
            usage = self._usage_payload(self._field(response, "usage"))
        except Exception as exc:
            logger.error(
                "llm.error provider=%s model=%s type=%s detail=%s",
                self.route.provider.value,
                self.route.model,
                exc.__class__.__name__,
                self._extract_error_detail(exc),
            )
            return GenerationResult(
                success=False,
                html=render_fallback_html(request),
                error=str(exc) or exc.__class__.__name__,
            )

        logger.info(
            "generate.done lesson=%s chars=%d total_tokens=%s",
            self._clip(request.lesson_title, 80),
            len(html),
            (usage or {}).get("total_tokens"),
        )
        return GenerationResult(success=True, html=html, usage=usage)

    async def _complete(self, prompt: str) -> Any:
        import litellm

        logger.info(
            "llm.call provider=%s model=%s base_url=%s max_tokens=%d temperature=%.2f timeout=%.1fs",
            self.route.provider.value,
            self.route.model,
            self.route.base_url,
            self.settings.llm_max_tokens,
            self.settings.llm_temperature,
            self.settings.llm_timeout_seconds,
        )
        return await litellm.acompletion(
            model=self.route.litellm_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self.settings.llm_max_tokens,
            temperature=self.settings.llm_temperature,
            api_key=self.settings.openai_api_key,
            base_url=self.route.base_url,
            timeout=self.settings.llm_timeout_seconds,
            num_retries=0,
        )

    @staticmethod
    def _field(obj: Any, name: str) -> Any:
        if isinstance(obj, dict):
            return obj.get(name)
        return getattr(obj, name, None)

    @classmethod
    def _first_content(cls, response: Any) -> str:
        choices = cls._field(response, "choices")
        if not choices:
            raise ValueError("Completion response contained no choices")
        message = cls._field(choices[0], "message")
        content = cls._field(message, "content") if message is not None else None
        if not content:
            raise ValueError("Completion response contained no message content")
        return str(content)

    @staticmethod
    def _usage_payload(usage: Any) -> dict[str, Any] | None:
        if usage is None:
            return None
        if isinstance(usage, dict):
            return dict(usage)
        model_dump = getattr(usage, "model_dump", None)
        if callable(model_dump):
            return model_dump(exclude_none=True)
        return {
            key: getattr(usage, key)
            for key in ("prompt_tokens", "completion_tokens", "total_tokens")
            if getattr(usage, key, None) is not None
        }

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    def _extract_error_detail(self, exc: Exception) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        body = getattr(exc, "body", None)
        details = [f"status_code={status_code}" if status_code is not None else ""]
        if body is not None:
            details.append(f"body={body}")
        details.append(f"message={message}")
        return self._clip(" ".join([part for part in details if part]).strip(), ERROR_LOG_LIMIT)
