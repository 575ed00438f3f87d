from .normalizer import NormalizationError, NormalizationErrorKind, normalize
from .schema import ANALYSIS_JSON_SCHEMA, REQUIRED_FIELDS, AnalysisReport
from .service import AnalysisService

__all__ = [
    "ANALYSIS_JSON_SCHEMA",
    "AnalysisReport",
    "AnalysisService",
    "NormalizationError",
    "NormalizationErrorKind",
    "REQUIRED_FIELDS",
    "normalize",
]
