"""Value objects package."""
from .analysis import ANALYSIS_MESSAGE, AnalysisResponse, AnalysisResult, ImageAnalysisRequest

__all__ = ["ANALYSIS_MESSAGE", "AnalysisResponse", "AnalysisResult", "ImageAnalysisRequest"]
