"""Remote analysis by a multimodal chat model."""

import json

from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.analysis.exceptions import AnalysisNetworkError, AnalysisValidationError
from smartdocs.analysis.validator import validate_and_build
from smartdocs.documents.models import UNCATEGORIZED, AnalysisResult, SourceFile
from smartdocs.extraction.content_extractor import resolve_mime_type
from smartdocs.llm.client_base import Attachment, BaseChatClient
from smartdocs.llm.exceptions import LlmNetworkError, LlmResponseError
from smartdocs.llm.json_response import parse_json_object
from smartdocs.llm.prompt_loader import load_json_schema, load_prompt_template
from smartdocs.logging.logger import Log

FALLBACK_SUMMARY = "Could not analyze document."


class VisionAnalysisProvider(BaseAnalysisProvider):
    """Sends the raw file to a vision-capable model and validates its JSON answer.

    Malformed or missing answers degrade to an "Uncategorized" result.
    Transport and auth failures are raised as AnalysisNetworkError.
    """

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.2,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._system_prompt = load_prompt_template("analysis_system.txt")
        self._prompt_template = load_prompt_template("analysis_prompt.txt")
        self._json_schema = load_json_schema("analysis_schema.json")

    def analyze(self, file: SourceFile) -> AnalysisResult:
        prompt = self._prompt_template.format(
            filename=file.filename,
            json_schema=json.dumps(self._json_schema, indent=2),
        )
        Log.debug(f"Analysis prompt for '{file.filename}':\n{prompt}")
        attachment = Attachment(
            mime_type=resolve_mime_type(file),
            data=file.data,
            filename=file.filename,
        )
        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema,
                schema_name="analysis_result",
                attachments=(attachment,),
            )
        except LlmNetworkError as exc:
            raise AnalysisNetworkError(str(exc)) from exc
        except LlmResponseError as exc:
            Log.warning(f"Empty analysis response for '{file.filename}': {exc}")
            return self._fallback(file)
        Log.debug(f"AI raw response:\n{raw_response}")

        try:
            result = validate_and_build(parse_json_object(raw_response))
        except (LlmResponseError, AnalysisValidationError) as exc:
            Log.warning(f"Invalid analysis response for '{file.filename}': {exc}")
            return self._fallback(file)

        Log.info(f"Remote analysis of '{file.filename}' complete: {result.category}")
        return result

    @staticmethod
    def _fallback(file: SourceFile) -> AnalysisResult:
        return AnalysisResult(
            title=file.filename,
            category=UNCATEGORIZED,
            summary=FALLBACK_SUMMARY,
            tags=(),
        )
