from typing import Any

import httpx
import openai

from smartdocs.llm.client_base import Attachment, BaseChatClient
from smartdocs.llm.exceptions import LlmNetworkError, LlmResponseError

RESPONSE_FORMATS = ("json_schema", "json_object", "none")


class OpenAIClientAdapter(BaseChatClient):
    """Chat client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 2,
        response_format: str = "json_schema",
    ) -> None:
        if response_format not in RESPONSE_FORMATS:
            raise ValueError(
                f"Unknown response format '{response_format}'. Choose from: {list(RESPONSE_FORMATS)}"
            )
        self._response_format = response_format
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=max_retries,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        schema_name: str,
        attachments: tuple[Attachment, ...] = (),
    ) -> str:
        kwargs: dict[str, Any] = {
            "model": model,
            "temperature": temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": self._user_content(user_prompt, attachments)},
            ],
        }
        response_format = self._build_response_format(json_schema, schema_name)
        if response_format is not None:
            kwargs["response_format"] = response_format

        try:
            response = self._client.chat.completions.create(**kwargs)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise LlmNetworkError(f"AI provider network error: {exc}") from exc
        except openai.AuthenticationError as exc:
            raise LlmNetworkError(f"AI provider rejected credentials: {exc}") from exc
        except openai.APIError as exc:
            raise LlmNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise LlmResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise LlmResponseError("AI returned empty response")
        return content

    def _build_response_format(
        self, json_schema: dict[str, object], schema_name: str
    ) -> dict[str, object] | None:
        if self._response_format == "json_schema":
            return {
                "type": "json_schema",
                "json_schema": {
                    "name": schema_name,
                    "strict": True,
                    "schema": json_schema,
                },
            }
        if self._response_format == "json_object":
            return {"type": "json_object"}
        return None

    @staticmethod
    def _user_content(
        user_prompt: str, attachments: tuple[Attachment, ...]
    ) -> str | list[dict[str, object]]:
        if not attachments:
            return user_prompt
        parts: list[dict[str, object]] = [{"type": "text", "text": user_prompt}]
        for attachment in attachments:
            if attachment.is_image:
                parts.append(
                    {"type": "image_url", "image_url": {"url": attachment.to_data_url()}}
                )
            else:
                parts.append(
                    {
                        "type": "file",
                        "file": {
                            "filename": attachment.filename or "document.pdf",
                            "file_data": attachment.to_data_url(),
                        },
                    }
                )
        return parts
