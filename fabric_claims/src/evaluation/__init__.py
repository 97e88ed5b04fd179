from .report import NO_CLAIMS_MESSAGE, OverlapReport, analyze_claims

__all__ = ["OverlapReport", "analyze_claims", "NO_CLAIMS_MESSAGE"]
