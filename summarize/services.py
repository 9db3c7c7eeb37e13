from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
GENERIC_FAILURE_MESSAGE = "Unknown error"


class SummarizationError(RuntimeError):
    """Raised when the summarization service fails."""


@dataclass(frozen=True)
class SummaryRequestConfig:
    """Fixed prompt and sampling settings sent with every summary request."""

    system_prompt: str = "You are a helpful assistant that summarizes text into exactly three concise sentences."
    user_template: str = (
        "Summarize the following text into exactly 3 sentences. Keep it concise and preserve the main points. "
        "Output only the summary (no commentary).\n\nText:\n{text}"
    )
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 200
    temperature: float = 0.3

    def build_messages(self, text: str) -> List[Dict[str, str]]:
        # str.replace keeps braces in the user's text untouched.
        return [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": self.user_template.replace("{text}", text)},
        ]

    def build_payload(self, text: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": self.build_messages(text),
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }


DEFAULT_REQUEST_CONFIG = SummaryRequestConfig()


@dataclass
class OpenAIConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def from_env(cls) -> Optional["OpenAIConfig"]:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            return None
        return cls(
            api_key=api_key,
            base_url=(os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        )

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"


@dataclass
class TokenUsage:
    prompt_tokens: Any
    completion_tokens: Any
    total_tokens: Any

    @classmethod
    def from_payload(cls, data: Any) -> Optional["TokenUsage"]:
        if not isinstance(data, dict):
            return None
        return cls(
            prompt_tokens=data.get("prompt_tokens"),
            completion_tokens=data.get("completion_tokens"),
            total_tokens=data.get("total_tokens"),
        )


@dataclass
class SummaryResult:
    summary: str
    usage: Optional[TokenUsage] = None
    model: Optional[str] = None


class SummarizationClient:
    """Client for a hosted chat-completion endpoint. One request per call, no retries."""

    def __init__(
        self,
        config: OpenAIConfig,
        request_config: SummaryRequestConfig = DEFAULT_REQUEST_CONFIG,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.request_config = request_config
        self.session = session or requests.Session()

    def summarize(self, text: str) -> SummaryResult:
        try:
            data = self._post_completion(text)
            return self._parse_response(data)
        except SummarizationError:
            raise
        except Exception as exc:
            raise SummarizationError(_describe(exc)) from exc

    def _post_completion(self, text: str) -> Any:
        headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        payload = self.request_config.build_payload(text)
        logger.debug(
            "Requesting summary from %s (model=%s, %d input characters)",
            self.config.completions_url,
            self.request_config.model,
            len(text),
        )
        response = self.session.post(self.config.completions_url, headers=headers, json=payload)
        if not response.ok:
            message = _api_error_message(response)
            if message:
                raise SummarizationError(message)
        response.raise_for_status()
        return response.json()

    def _parse_response(self, data: Any) -> SummaryResult:
        # A body without choices yields an empty summary, not a failure.
        if not isinstance(data, dict):
            data = {}

        choices = data.get("choices")
        if not isinstance(choices, list):
            choices = []

        content = None
        if choices and isinstance(choices[0], dict):
            message = choices[0].get("message")
            if isinstance(message, dict):
                content = message.get("content")
        summary = content.strip() if isinstance(content, str) else ""

        usage = TokenUsage.from_payload(data.get("usage"))
        logger.debug("Received %d summary characters (usage reported: %s)", len(summary), usage is not None)
        return SummaryResult(summary=summary, usage=usage, model=data.get("model"))


def _api_error_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = body["error"].get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def _describe(exc: BaseException) -> str:
    return str(exc).strip() or GENERIC_FAILURE_MESSAGE
