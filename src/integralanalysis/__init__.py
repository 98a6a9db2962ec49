"""
integralanalysis
================
Riemann sums and Lebesgue level-set decompositions of sampled real functions.
"""
from integralanalysis.analysis.composer import accumulated_area, area_range, integrate_measure_curve, measure_curve
from integralanalysis.analysis.measure import measure_error_bound, superlevel_measure
from integralanalysis.analysis.model import IntegralModel, IntegralSummary
from integralanalysis.analysis.riemann import RiemannResult, RiemannRule, riemann_sum, riemann_sum_at
from integralanalysis.analysis.sampler import function_points, sample, sample_points
from integralanalysis.analysis.slicer import layer_cake_slices, level_slices, simple_function_sum, slice_at
from integralanalysis.config import Resolution
from integralanalysis.errors import (
    EvaluationError,
    IntegralAnalysisError,
    InvalidParameterError,
    NonDeterministicFunctionError,
)
from integralanalysis.model.functions import ALL_FUNCTIONS, FunctionKey, FunctionSpec, get_function
from integralanalysis.model.primitives import Domain, MeasureCurvePoint, Point, Rectangle, Segment, Slice

__all__ = [
    "ALL_FUNCTIONS",
    "Domain",
    "EvaluationError",
    "FunctionKey",
    "FunctionSpec",
    "IntegralAnalysisError",
    "IntegralModel",
    "IntegralSummary",
    "InvalidParameterError",
    "MeasureCurvePoint",
    "NonDeterministicFunctionError",
    "Point",
    "Rectangle",
    "Resolution",
    "RiemannResult",
    "RiemannRule",
    "Segment",
    "Slice",
    "accumulated_area",
    "area_range",
    "function_points",
    "get_function",
    "integrate_measure_curve",
    "layer_cake_slices",
    "level_slices",
    "measure_curve",
    "measure_error_bound",
    "riemann_sum",
    "riemann_sum_at",
    "sample",
    "sample_points",
    "simple_function_sum",
    "slice_at",
    "superlevel_measure",
]
