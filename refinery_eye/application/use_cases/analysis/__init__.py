from .analyze_inspection import AnalyzeInspectionUseCase

__all__ = ["AnalyzeInspectionUseCase"]
