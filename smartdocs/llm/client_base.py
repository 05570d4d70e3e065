import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attachment:
    """A binary file sent alongside a prompt to a multimodal model."""

    mime_type: str
    data: bytes = field(repr=False)
    filename: str = ""

    @property
    def is_image(self) -> bool:
        return self.mime_type.lower().startswith("image/")

    def to_data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
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
        """Return provider response as plain text.

        Raises:
            LlmNetworkError: on transport, auth or API failures.
            LlmResponseError: when the provider returns no usable content.
        """
