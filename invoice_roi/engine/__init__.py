from .calculator import BIAS_FACTOR, CalculationEngine, compute
from .result import CalculatorResults

__all__ = ["BIAS_FACTOR", "CalculationEngine", "CalculatorResults", "compute"]
