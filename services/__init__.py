"""
Services module for the Prompt Gallery.
"""
from .analyzer import AnalysisResult, PromptAnalyzer, contains_chinese, pick_translation
from .entry_service import EntryService
from .gallery import filter_prompts
from .gateway import PersistenceGateway
from .image_preprocessor import ProcessedImage, preprocess_image

__all__ = [
    "AnalysisResult",
    "PromptAnalyzer",
    "contains_chinese",
    "pick_translation",
    "EntryService",
    "filter_prompts",
    "PersistenceGateway",
    "ProcessedImage",
    "preprocess_image",
]
