from typing import Any, Dict, List, Optional

import requests

from llm_config import MAX_TOKENS, TEMPERATURE, LLMConfig


class InferenceError(RuntimeError):
    """Raised when the chat-completion request fails. Never retried."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class OpenAIStyleClient:
    """Low-level HTTP client for OpenAI-style /chat/completions."""

    def __init__(self, config: LLMConfig):
        self.config = config

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    def build_payload(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        return {
            "model": self.config.model_name,
            "messages": messages,
            "temperature": TEMPERATURE,
            "max_tokens": MAX_TOKENS,
        }

    def send(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        """
        POST the message list and return the parsed response envelope.

        Raises InferenceError on transport failure, non-2xx status, or a body
        that is not a JSON object.
        """
        try:
            resp = requests.post(
                self.config.completions_url,
                headers=self._headers(),
                json=self.build_payload(messages),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise InferenceError(f"API request failed: {e}") from e

        # only 2xx counts as success; requests' resp.ok also accepts 3xx
        if not 200 <= resp.status_code < 300:
            raise InferenceError(
                f"API request failed: {resp.status_code} {resp.reason}",
                status_code=resp.status_code,
                reason=resp.reason,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise InferenceError(
                f"API returned invalid JSON: {e}",
                status_code=resp.status_code,
                reason=resp.reason,
            ) from e

        if not isinstance(data, dict):
            raise InferenceError(
                "API returned a non-object JSON body",
                status_code=resp.status_code,
                reason=resp.reason,
            )
        return data
