# src/campusqa/generator.py
"""Answer generation over an LLM client."""

import logging

from campusqa.providers.base import LLMClient

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "未从资料中检索到答案，请联系相关部门进一步确认。"


class AnswerGenerator:
    """Turns an assembled prompt into a plain-text answer.

    Example:
        from campusqa.providers.litellm import LiteLLMClient

        generator = AnswerGenerator(llm_client=LiteLLMClient())
        text = generator.generate(prompt)
    """

    def __init__(
        self,
        llm_client: LLMClient,
        temperature: float | None = None,
        fallback_answer: str = FALLBACK_ANSWER,
    ) -> None:
        """Initialize the generator.

        Args:
            llm_client: Any LLMClient implementation
            temperature: Optional generation temperature. None uses the provider default.
            fallback_answer: Text returned when the model produces no text
        """
        self._client = llm_client
        self.temperature = temperature
        self.fallback_answer = fallback_answer

    def generate(self, prompt: str) -> str:
        """Send the prompt as a single user message and return the answer text.

        Provider errors propagate. An empty response is not an error and
        yields the fallback answer.
        """
        messages = [{"role": "user", "content": prompt}]
        parts = self._client.complete_parts(messages, temperature=self.temperature)

        text_parts = [part for part in parts if part]
        if not text_parts:
            logger.warning("Model returned no text parts; using fallback answer")
            return self.fallback_answer

        answer = "\n".join(text_parts).strip()
        if not answer:
            logger.warning("Model returned only blank text; using fallback answer")
            return self.fallback_answer
        return answer
