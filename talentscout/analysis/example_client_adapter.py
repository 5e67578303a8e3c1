"""Example analysis client adapter.

Returns a fixed, schema-valid analysis without any network call. Handy for
local runs of the CLI and as a starting point for new provider adapters:
implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from talentscout.analysis.client_base import BaseAnalysisClient
from talentscout.ingestion.models import InlineData


class ExampleClientAdapter(BaseAnalysisClient):
    """Offline adapter with a canned response."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "overallScore": 0,
        "summary": "Example analysis; no model was called.",
        "scores": {"impact": 0, "brevity": 0, "style": 0, "keywords": 0},
        "atsKeywords": {"matched": [], "missing": []},
        "sectionAnalysis": [],
        "formattingIssues": [],
        "grammarIssues": [],
        "duplicateContent": [],
        "starRewrites": [],
        "professionalSummaryRewrite": "",
        "coverLetter": "",
        "hardSkills": [],
        "softSkills": [],
        "optimizedResumeMarkdown": "",
    }

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        seed: int | None,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
        attachment: InlineData | None = None,
    ) -> str:
        _ = model, temperature, seed, system_prompt, user_prompt, json_schema, attachment
        return json.dumps(self.DEFAULT_RESPONSE)
