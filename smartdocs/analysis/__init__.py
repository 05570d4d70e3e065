from smartdocs.analysis.base import BaseAnalysisProvider
from smartdocs.analysis.factory import AnalysisProviderFactory
from smartdocs.analysis.selected import SelectedAnalysisProvider

__all__ = ["AnalysisProviderFactory", "BaseAnalysisProvider", "SelectedAnalysisProvider"]
