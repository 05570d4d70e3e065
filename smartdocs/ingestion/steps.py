import json

from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.documents.models import NewDocument
from smartdocs.documents.stores import BaseDocumentStore
from smartdocs.ingestion.folder_resolver import FolderResolver
from smartdocs.ingestion.pipeline import PipelineContext, PipelineStep
from smartdocs.logging.logger import Log


class AnalyzeStep(PipelineStep):
    def __init__(self, provider: BaseAnalysisProvider) -> None:
        self._provider = provider

    def run(self, context: PipelineContext) -> PipelineContext:
        file = context.item.file
        context.analysis = self._provider.analyze(file)
        context.item.result = context.analysis
        Log.info(f"Analyzed '{file.filename}' as {context.analysis.category}")
        return context


class ResolveFolderStep(PipelineStep):
    def __init__(self, resolver: FolderResolver) -> None:
        self._resolver = resolver

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before folder resolution")
        context.folder_id = self._resolver.resolve(
            context.analysis.category,
            target_folder_id=context.target_folder_id,
        )
        return context


class CreateDocumentStep(PipelineStep):
    def __init__(self, document_store: BaseDocumentStore) -> None:
        self._document_store = document_store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis is None or context.folder_id is None:
            raise ValueError("PipelineContext.analysis and folder_id must be set before persist")
        analysis = context.analysis
        file = context.item.file
        context.record = self._document_store.create_document(
            NewDocument(
                title=analysis.title,
                category=analysis.category,
                summary=analysis.summary,
                tags=analysis.tags,
                folder_id=context.folder_id,
                mime_type=file.mime_type,
                file_size=file.size,
                content_analysis=json.dumps(analysis.to_dict()),
                important_date=analysis.important_date,
                date_label=analysis.date_label,
                ocr_text=analysis.ocr_text,
            )
        )
        context.item.record = context.record
        Log.info(f"Stored document {context.record.id} in folder {context.folder_id}")
        return context
