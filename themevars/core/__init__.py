"""Theme variable engine exports."""

from themevars.core.aggregator import ThemeAggregator, read_css_data
from themevars.core.colors import classify_and_parse, is_color
from themevars.core.extractor import extract_root_variables
from themevars.core.models import (
    AggregationResult,
    ColorClassification,
    ColorKind,
    FileReadFailure,
    NormalizedColor,
)
from themevars.core.resolver import MAX_RESOLVE_DEPTH, resolve_value
from themevars.core.viewer import IndicatorKind, VariableRow, build_theme_view

__all__ = [
    "AggregationResult",
    "ColorClassification",
    "ColorKind",
    "FileReadFailure",
    "IndicatorKind",
    "MAX_RESOLVE_DEPTH",
    "NormalizedColor",
    "ThemeAggregator",
    "VariableRow",
    "build_theme_view",
    "classify_and_parse",
    "extract_root_variables",
    "is_color",
    "read_css_data",
    "resolve_value",
]
