# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-22
# Updated: 2026-01-23
# Description: OpenAIChat
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

from openai import OpenAI, OpenAIError

from config.Config import Config
from errors.RAGErrors import UpstreamError
from settings import USER_PROMPT_TEMPLATE
from utility.logging_utils import get_class_logger

Message = Dict[str, str]  # {"role": "system"|"user"|"assistant", "content": "..."}


def build_messages(system_prompt: str, context: str, question: str) -> List[Message]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(context=context, question=question)},
    ]


@dataclass
class OpenAIChat:
    """
        Chat wrapper for an OpenAI-compatible Chat Completions API.

        Used as the generator in the query pipeline: takes the system prompt,
        the assembled context and the question and returns the answer text.
    """

    cfg: Config
    client: Any = None
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.model = self.cfg.openai_chat_model
        self.max_tokens: Optional[int] = self.cfg.openai_max_tokens

        if self.client is None:
            self.client = OpenAI(
                api_key=self.cfg.openai_api_key,
                base_url=self.cfg.openai_base_url,
                timeout=self.cfg.openai_timeout_seconds,
                max_retries=self.cfg.openai_max_retries,
            )

        self.logger.info("OpenAIChat initialised (model=%s)", self.model)

    def chat(
            self,
            messages: List[Message],
            max_tokens: Optional[int] = None,
            extra_params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        if not messages:
            raise ValueError("messages must be non-empty.")

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if max_tokens is not None:
            params["max_tokens"] = max_tokens
        if extra_params:
            params.update(extra_params)

        self.logger.debug("Chat request: model=%s max_tokens=%s", self.model, max_tokens)

        resp = self.client.chat.completions.create(**params)

        self.logger.debug("Raw ChatCompletion response: %r", resp)
        return resp

    def generate(self, system_prompt: str, context: str, question: str) -> str:
        messages = build_messages(system_prompt, context, question)

        try:
            resp = self.chat(messages, max_tokens=self.max_tokens)
        except OpenAIError as e:
            self.logger.error("Chat request failed: %s", e)
            raise UpstreamError(f"chat request failed: {e}") from e

        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            self.logger.error("Unexpected chat response format: %s", e, exc_info=True)
            raise UpstreamError(f"unexpected chat response format: {e}") from e

        if not isinstance(content, str):
            raise UpstreamError("chat response carried no text content")

        self.logger.info("Chat answer generated (model=%s, chars=%d)", getattr(resp, "model", None), len(content))
        self.logger.debug("Token usage: %r", getattr(resp, "usage", None))
        return content

    def healthcheck(self) -> bool:
        try:
            self.chat([{"role": "user", "content": "ping"}], max_tokens=5)
            return True
        except OpenAIError as e:
            self.logger.warning("Chat healthcheck failed: %s", e)
            return False
