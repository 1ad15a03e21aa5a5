"""Data model shared by the engine and the report writer."""

from file_extractor.model.extraction_result import ExtractionResult

__all__ = ["ExtractionResult"]
