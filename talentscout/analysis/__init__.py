from talentscout.analysis.analyzer import ResumeAnalyzer
from talentscout.analysis.base import BaseAnalyzer
from talentscout.analysis.factory import AnalyzerFactory
from talentscout.analysis.models import AnalysisResult

__all__ = ["AnalysisResult", "AnalyzerFactory", "BaseAnalyzer", "ResumeAnalyzer"]
