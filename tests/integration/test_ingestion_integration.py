from unittest.mock import MagicMock

import pytest

from smartdocs.analysis.local_provider import LocalAnalysisProvider
from smartdocs.database.repositories.document_repository import DocumentRepository
from smartdocs.database.repositories.folder_repository import FolderRepository
from smartdocs.documents.models import SourceFile
from smartdocs.extraction.content_extractor import ContentExtractor
from smartdocs.ingestion.models import ItemStatus
from smartdocs.ingestion.queue import build_ingestion_queue
from smartdocs.pdf.pdfplumber_adapter import PdfPlumberAdapter
from smartdocs.retrieval.lexical_engine import LexicalRetrievalEngine


@pytest.mark.integration
@pytest.mark.usefixtures("clean_tables")
class TestIngestionIntoDatabase:
    def test_pdf_is_analyzed_filed_and_searchable(self, sample_pdf_bytes: bytes) -> None:
        documents = DocumentRepository()
        folders = FolderRepository()
        provider = LocalAnalysisProvider(
            extractor=ContentExtractor(pdf_extractor=PdfPlumberAdapter(), ocr_engine=MagicMock())
        )
        queue = build_ingestion_queue(provider, documents, folders)
        [item] = queue.add([SourceFile("bill.pdf", "application/pdf", sample_pdf_bytes)])

        report = queue.run()

        assert item.status is ItemStatus.DONE
        [folder] = folders.list_folders()
        assert folder.name == "Receipt"
        [record] = documents.list_documents(folder.id)
        assert record == report.records[0]
        assert record.date_label == "Due Date"

        result = LexicalRetrievalEngine().search("102", documents.list_documents())
        assert result.relevant_doc_ids == [record.id]
