from abc import ABC, abstractmethod
from typing import ClassVar

from smartdocs.documents.models import AnalysisResult, SourceFile


class BaseAnalysisProvider(ABC):
    """Contract for all document analysis backends."""

    # Providers that never look at the file content set this to True.
    low_fidelity: ClassVar[bool] = False

    @abstractmethod
    def analyze(self, file: SourceFile) -> AnalysisResult:
        """Turn one uploaded file into a structured analysis.

        Args:
            file: The uploaded file. Only read, never retained.

        Returns:
            AnalysisResult with a non-empty category.

        Raises:
            AnalysisNetworkError: when a remote backend cannot be reached.
        """
