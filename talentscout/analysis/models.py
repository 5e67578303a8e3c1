from dataclasses import dataclass, field

SECTION_STATUSES = ("Good", "Needs Improvement", "Missing")
SKILL_IMPORTANCE_LEVELS = ("High", "Medium", "Low")


@dataclass(frozen=True)
class Scores:
    """Sub-scores, each 0-100."""

    impact: float
    brevity: float
    style: float
    keywords: float


@dataclass(frozen=True)
class AtsKeywords:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class SectionAnalysis:
    name: str
    status: str  # one of SECTION_STATUSES
    feedback: str


@dataclass(frozen=True)
class RewrittenItem:
    """A weak bullet point and its STAR-method rewrite."""

    original: str
    improved: str
    reason: str


@dataclass(frozen=True)
class SkillMatch:
    skill: str
    found: bool
    importance: str  # one of SKILL_IMPORTANCE_LEVELS


@dataclass(frozen=True)
class AnalysisResult:
    """Structured critique, rewritten resume and cover letter for one document."""

    overall_score: float
    summary: str
    scores: Scores
    ats_keywords: AtsKeywords
    section_analysis: list[SectionAnalysis] = field(default_factory=list)
    formatting_issues: list[str] = field(default_factory=list)
    grammar_issues: list[str] = field(default_factory=list)
    duplicate_content: list[str] = field(default_factory=list)
    star_rewrites: list[RewrittenItem] = field(default_factory=list)
    professional_summary_rewrite: str = ""
    cover_letter: str = ""
    hard_skills: list[SkillMatch] = field(default_factory=list)
    soft_skills: list[SkillMatch] = field(default_factory=list)
    optimized_resume_markdown: str = ""
