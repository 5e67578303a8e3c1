from pathlib import Path

from talentscout.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT_FILE = "system_prompt.txt"
JOB_CONTEXT_FILE = "job_context.txt"
JSON_SCHEMA_FILE = "analysis_schema.json"


def load_prompt_file(filename: str, path: Path | None = None) -> str:
    """Read a bundled prompt asset, or the file at ``path`` when given.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / filename
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {filename}: {exc}") from exc


def load_system_prompt_template(path: Path | None = None) -> str:
    return load_prompt_file(SYSTEM_PROMPT_FILE, path)


def load_job_context_template(path: Path | None = None) -> str:
    return load_prompt_file(JOB_CONTEXT_FILE, path)


def load_json_schema(path: Path | None = None) -> str:
    return load_prompt_file(JSON_SCHEMA_FILE, path)
