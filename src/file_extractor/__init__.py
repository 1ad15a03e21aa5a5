"""file_extractor — concatenate a directory tree's text files into one report."""

__all__ = [
    "__version__",
    "ScanConfig",
    "ExtractionResult",
    "ExtractionError",
    "run_extraction",
]
__version__ = "1.0.0"

from file_extractor.core.config import ScanConfig  # noqa: E402
from file_extractor.core.engine import ExtractionError, run_extraction  # noqa: E402
from file_extractor.model.extraction_result import ExtractionResult  # noqa: E402
