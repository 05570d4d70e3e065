from abc import ABC, abstractmethod
from dataclasses import dataclass

from smartdocs.documents.models import AnalysisResult, DocumentRecord
from smartdocs.ingestion.models import QueueItem


@dataclass(slots=True)
class PipelineContext:
    item: QueueItem
    target_folder_id: str | None = None
    analysis: AnalysisResult | None = None
    folder_id: str | None = None
    record: DocumentRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
