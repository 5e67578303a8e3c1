from talentscout.ingestion.classifier import carries_binary, classify
from talentscout.ingestion.factory import DocumentNormalizerFactory
from talentscout.ingestion.models import (
    ExtractionStrategy,
    InlineData,
    NormalizedPayload,
    UploadedDocument,
)
from talentscout.ingestion.normalizer import DocumentNormalizer
from talentscout.ingestion.session import UploadSession, UploadState

__all__ = [
    "DocumentNormalizer",
    "DocumentNormalizerFactory",
    "ExtractionStrategy",
    "InlineData",
    "NormalizedPayload",
    "UploadSession",
    "UploadState",
    "UploadedDocument",
    "carries_binary",
    "classify",
]
