from .analysis_gateway import AnalysisGateway

__all__ = ["AnalysisGateway"]
