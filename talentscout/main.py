import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from talentscout.config.settings import Settings
from talentscout.logging.logger import Log
from talentscout.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="talentscout",
        description="Analyze a resume against a job description.",
    )
    parser.add_argument("resume", type=Path, help="resume or profile export (PDF, DOCX, text, image)")
    parser.add_argument(
        "--job-description-file",
        type=Path,
        default=None,
        help="plain-text job description to tailor the resume to",
    )
    parser.add_argument(
        "--media-type",
        default=None,
        help="declared media type of the resume; guessed from the file name when omitted",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> processor -> print analysis as JSON."""
    args = _parse_args(argv)
    settings = Settings()
    # stdout carries the JSON result
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        job_description = (
            args.job_description_file.read_text(encoding="utf-8")
            if args.job_description_file is not None
            else ""
        )
        processor = build_processor(settings)
        result = processor.process(args.resume, job_description, args.media_type)
    except Exception as exc:
        print(f"could not process file: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(asdict(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
