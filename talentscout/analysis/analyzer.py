"""AI-powered resume analysis."""

import json
from pathlib import Path

from talentscout.analysis.base import BaseAnalyzer
from talentscout.analysis.client_base import BaseAnalysisClient
from talentscout.analysis.exceptions import AnalysisError
from talentscout.analysis.models import AnalysisResult
from talentscout.analysis.prompt_loader import (
    load_job_context_template,
    load_json_schema,
    load_system_prompt_template,
)
from talentscout.analysis.validator import validate_and_build
from talentscout.ingestion.models import InlineData
from talentscout.logging.logger import Log

FILE_INPUT_NOTE = (
    "NOTE: The profile is provided as a file (PDF/image). "
    "Carefully extract all text and structured data."
)
TEXT_INPUT_NOTE = "NOTE: The profile is provided as text."
NO_JOB_DESCRIPTION = (
    "No job description provided. Create a general professional resume optimized "
    "for ATS systems based on the candidate's experience level and industry."
)
FILE_INSTRUCTION = (
    "The attached file is the candidate's profile. Extract all information "
    "and create a professional ATS resume."
)
DEFAULT_SEED = 42


class ResumeAnalyzer(BaseAnalyzer):
    """Critiques and rewrites a resume using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        seed: int | None = DEFAULT_SEED,
        system_prompt_path: Path | None = None,
        job_context_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._seed = seed
        self._system_template = load_system_prompt_template(system_prompt_path)
        self._job_context_template = load_job_context_template(job_context_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def analyze(
        self,
        resume_text: str,
        job_description: str,
        inline_data: InlineData | None = None,
    ) -> AnalysisResult:
        system_prompt = self._build_system_prompt(inline_data)
        user_prompt = self._build_user_prompt(resume_text, job_description, inline_data)
        Log.debug(f"Analysis prompt:\n{user_prompt}")
        Log.info(
            f"Requesting analysis from '{self._model}' "
            f"({'inline ' + inline_data.mime_type if inline_data else 'text only'})"
        )

        raw_response = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            seed=self._seed,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            json_schema=self._json_schema,
            attachment=inline_data,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Analysis complete: overall score {result.overall_score:g}")
        return result

    def _build_system_prompt(self, inline_data: InlineData | None) -> str:
        note = FILE_INPUT_NOTE if inline_data is not None else TEXT_INPUT_NOTE
        return self._system_template.format(input_note=note)

    def _build_user_prompt(
        self,
        resume_text: str,
        job_description: str,
        inline_data: InlineData | None,
    ) -> str:
        job_context = self._job_context_template.format(
            job_description=job_description.strip() or NO_JOB_DESCRIPTION
        )
        if inline_data is not None:
            return f"{job_context}\n\n{FILE_INSTRUCTION}"
        return (
            f"{job_context}\n\nPROFILE DATA:\n{resume_text}\n\n"
            "Please extract all relevant information and generate a professional "
            "ATS-optimized resume."
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AnalysisError("JSON response must be an object")
        return parsed
