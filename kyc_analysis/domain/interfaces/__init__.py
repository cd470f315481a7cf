"""Service interfaces package."""
from .face_analysis import FaceAnalysisClient

__all__ = ["FaceAnalysisClient"]
