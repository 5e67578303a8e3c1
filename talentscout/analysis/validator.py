"""Validates the model's raw JSON and builds an AnalysisResult."""

from typing import Any

from talentscout.analysis.exceptions import AnalysisValidationError
from talentscout.analysis.models import (
    SECTION_STATUSES,
    SKILL_IMPORTANCE_LEVELS,
    AnalysisResult,
    AtsKeywords,
    RewrittenItem,
    Scores,
    SectionAnalysis,
    SkillMatch,
)

_REQUIRED_FIELDS = (
    "overallScore",
    "summary",
    "scores",
    "atsKeywords",
    "sectionAnalysis",
    "formattingIssues",
    "grammarIssues",
    "duplicateContent",
    "starRewrites",
    "professionalSummaryRewrite",
    "coverLetter",
    "hardSkills",
    "softSkills",
    "optimizedResumeMarkdown",
)
_MIN_SCORE = 0.0
_MAX_SCORE = 100.0


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Raises:
        AnalysisValidationError: on any validation failure.
    """
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise AnalysisValidationError(f"Missing required top-level field: {name}")

    return AnalysisResult(
        overall_score=_score(data["overallScore"], "overallScore"),
        summary=_string(data["summary"], "summary"),
        scores=_build_scores(data["scores"]),
        ats_keywords=_build_keywords(data["atsKeywords"]),
        section_analysis=[
            _build_section(item, i)
            for i, item in enumerate(_list(data["sectionAnalysis"], "sectionAnalysis"))
        ],
        formatting_issues=_string_list(data["formattingIssues"], "formattingIssues"),
        grammar_issues=_string_list(data["grammarIssues"], "grammarIssues"),
        duplicate_content=_string_list(data["duplicateContent"], "duplicateContent"),
        star_rewrites=[
            _build_rewrite(item, i)
            for i, item in enumerate(_list(data["starRewrites"], "starRewrites"))
        ],
        professional_summary_rewrite=_string(
            data["professionalSummaryRewrite"], "professionalSummaryRewrite"
        ),
        cover_letter=_string(data["coverLetter"], "coverLetter"),
        hard_skills=_build_skills(data["hardSkills"], "hardSkills"),
        soft_skills=_build_skills(data["softSkills"], "softSkills"),
        optimized_resume_markdown=_string(
            data["optimizedResumeMarkdown"], "optimizedResumeMarkdown"
        ),
    )


def _score(raw: Any, path: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise AnalysisValidationError(f"'{path}' must be a number")
    if not _MIN_SCORE <= raw <= _MAX_SCORE:
        raise AnalysisValidationError(
            f"'{path}' must be between {_MIN_SCORE:g} and {_MAX_SCORE:g}, got {raw}"
        )
    return float(raw)


def _string(raw: Any, path: str) -> str:
    if not isinstance(raw, str):
        raise AnalysisValidationError(f"'{path}' must be a string")
    return raw


def _list(raw: Any, path: str) -> list[Any]:
    if not isinstance(raw, list):
        raise AnalysisValidationError(f"'{path}' must be a list")
    return raw


def _object(raw: Any, path: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise AnalysisValidationError(f"'{path}' must be an object")
    return raw


def _string_list(raw: Any, path: str) -> list[str]:
    items = _list(raw, path)
    for i, item in enumerate(items):
        if not isinstance(item, str):
            raise AnalysisValidationError(f"'{path}[{i}]' must be a string")
    return list(items)


def _build_scores(raw: Any) -> Scores:
    scores = _object(raw, "scores")
    values = {}
    for name in ("impact", "brevity", "style", "keywords"):
        if name not in scores:
            raise AnalysisValidationError(f"Missing required field: scores.{name}")
        values[name] = _score(scores[name], f"scores.{name}")
    return Scores(**values)


def _build_keywords(raw: Any) -> AtsKeywords:
    keywords = _object(raw, "atsKeywords")
    return AtsKeywords(
        matched=_string_list(keywords.get("matched"), "atsKeywords.matched"),
        missing=_string_list(keywords.get("missing"), "atsKeywords.missing"),
    )


def _build_section(raw: Any, index: int) -> SectionAnalysis:
    path = f"sectionAnalysis[{index}]"
    section = _object(raw, path)
    status = section.get("status")
    if status not in SECTION_STATUSES:
        raise AnalysisValidationError(
            f"'{path}.status' must be one of {list(SECTION_STATUSES)}, got {status!r}"
        )
    return SectionAnalysis(
        name=_string(section.get("name"), f"{path}.name"),
        status=status,
        feedback=_string(section.get("feedback"), f"{path}.feedback"),
    )


def _build_rewrite(raw: Any, index: int) -> RewrittenItem:
    path = f"starRewrites[{index}]"
    item = _object(raw, path)
    return RewrittenItem(
        original=_string(item.get("original"), f"{path}.original"),
        improved=_string(item.get("improved"), f"{path}.improved"),
        reason=_string(item.get("reason"), f"{path}.reason"),
    )


def _build_skills(raw: Any, path: str) -> list[SkillMatch]:
    skills = []
    for i, item in enumerate(_list(raw, path)):
        skill = _object(item, f"{path}[{i}]")
        found = skill.get("found")
        if not isinstance(found, bool):
            raise AnalysisValidationError(f"'{path}[{i}].found' must be a boolean")
        importance = skill.get("importance")
        if importance not in SKILL_IMPORTANCE_LEVELS:
            raise AnalysisValidationError(
                f"'{path}[{i}].importance' must be one of "
                f"{list(SKILL_IMPORTANCE_LEVELS)}, got {importance!r}"
            )
        skills.append(
            SkillMatch(
                skill=_string(skill.get("skill"), f"{path}[{i}].skill"),
                found=found,
                importance=importance,
            )
        )
    return skills
