"""
Run the resume review on a local PDF without starting the server.

    python -m backend.ats_review.cli resume.pdf --job-description jd.txt
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from google import genai

from backend.ats_review.config import load_settings
from backend.ats_review.errors import ConfigError
from backend.ats_review.judge import ResumeJudge
from backend.ats_review.logging_config import setup_logging
from backend.ats_review.pipeline import process_resume


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ATS review of a resume PDF")
    parser.add_argument("pdf_path", help="Path to the resume PDF")
    parser.add_argument(
        "--job-description",
        metavar="FILE",
        help="Text file with the job description (built-in default when omitted)",
    )
    parser.add_argument(
        "--mode",
        choices=["legacy", "strict"],
        help="Section categorizer mode (defaults to CATEGORIZER_MODE)",
    )
    return parser


def main(argv=None, client=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
        if client is None:
            client = genai.Client(api_key=settings.require_api_key())
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, settings.log_file)

    if not Path(args.pdf_path).exists():
        print(f"File not found: {args.pdf_path}", file=sys.stderr)
        return 1

    job_description = None
    if args.job_description:
        job_description = Path(args.job_description).read_text(encoding="utf-8")

    judge = ResumeJudge(client, model_name=settings.model_name, timeout=settings.ai_timeout)
    result = asyncio.run(process_resume(
        args.pdf_path,
        job_description,
        judge,
        categorizer_mode=args.mode or settings.categorizer_mode,
    ))

    if not result.ok:
        print(json.dumps({"error": result.error}, indent=2))
        return 1
    print(json.dumps(result.payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
