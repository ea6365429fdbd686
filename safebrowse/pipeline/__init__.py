"""Request pipeline for SafeBrowse."""

from .analysis import AnalysisEngine, AnalysisRequest, AnalysisResult

__all__ = ["AnalysisEngine", "AnalysisRequest", "AnalysisResult"]
