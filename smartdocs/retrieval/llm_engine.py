"""Search delegated to a remote chat model, with local scoring as the safety net."""

import json

from smartdocs.documents.models import DocumentRecord, SearchResult
from smartdocs.llm.client_base import BaseChatClient
from smartdocs.llm.exceptions import LlmError
from smartdocs.llm.json_response import parse_json_object
from smartdocs.llm.prompt_loader import load_json_schema, load_prompt_template
from smartdocs.logging.logger import Log
from smartdocs.retrieval.base import BaseRetrievalEngine
from smartdocs.retrieval.exceptions import RetrievalValidationError
from smartdocs.retrieval.lexical_engine import EMPTY_LIBRARY_ANSWER, LexicalRetrievalEngine
from smartdocs.retrieval.validator import validate_and_build

NO_TEXT_PLACEHOLDER = "No text extracted"


class LlmRetrievalEngine(BaseRetrievalEngine):
    """Asks a chat model to pick relevant documents and phrase the answer."""

    def __init__(
        self,
        *,
        client: BaseChatClient,
        model: str,
        temperature: float = 0.2,
        ocr_char_limit: int = 1500,
        fallback: BaseRetrievalEngine | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._ocr_char_limit = ocr_char_limit
        self._fallback = fallback or LexicalRetrievalEngine()
        self._system_prompt = load_prompt_template("search_system.txt")
        self._prompt_template = load_prompt_template("search_prompt.txt")
        self._json_schema = load_json_schema("search_schema.json")

    def search(self, query: str, documents: list[DocumentRecord]) -> SearchResult:
        if not documents:
            return SearchResult(relevant_doc_ids=[], answer=EMPTY_LIBRARY_ANSWER)

        prompt = self._build_prompt(query, documents)
        Log.debug(f"Search prompt:\n{prompt}")
        try:
            raw_response = self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                json_schema=self._json_schema,
                schema_name="search_result",
            )
            Log.debug(f"AI raw response:\n{raw_response}")
            result = validate_and_build(
                parse_json_object(raw_response),
                known_ids=[doc.id for doc in documents],
            )
        except (LlmError, RetrievalValidationError) as exc:
            Log.warning(f"Remote search failed, falling back to keyword search: {exc}")
            return self._fallback.search(query, documents)

        Log.info(f"Remote search matched {len(result.relevant_doc_ids)} documents")
        return result

    def _build_prompt(self, query: str, documents: list[DocumentRecord]) -> str:
        context = [self._document_context(doc) for doc in documents]
        return self._prompt_template.format(
            query=query,
            documents=json.dumps(context, ensure_ascii=False),
            json_schema=json.dumps(self._json_schema, indent=2),
        )

    def _document_context(self, doc: DocumentRecord) -> dict[str, object]:
        context: dict[str, object] = {
            "id": doc.id,
            "title": doc.title,
            "category": doc.category,
            "summary": doc.summary,
            "tags": ", ".join(doc.tags),
        }
        if doc.created_at is not None:
            context["date"] = doc.created_at.date().isoformat()
        if doc.important_date:
            context["importantDate"] = f"{doc.date_label}: {doc.important_date}"
        context["extractedContent"] = (
            doc.ocr_text[: self._ocr_char_limit] if doc.ocr_text else NO_TEXT_PLACEHOLDER
        )
        return context
