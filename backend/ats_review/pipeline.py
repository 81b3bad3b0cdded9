"""
ATS Resume Review - request pipeline
extract -> categorize -> analyze, stopping at the first failing stage
"""

import asyncio
import logging
from dataclasses import dataclass

from backend.ats_review.judge import ResumeJudge
from backend.ats_review.resume_parser import categorize_resume_text, extract_text_from_pdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    payload: dict | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, payload: dict) -> "PipelineResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, message: str) -> "PipelineResult":
        return cls(error=message)


async def process_resume(
    pdf_path: str,
    job_description: str | None,
    judge: ResumeJudge,
    categorizer_mode: str = "legacy",
) -> PipelineResult:
    """
    Run one uploaded resume through extraction, categorization and AI review.

    Returns:
        PipelineResult whose payload is {numPages, categories, text, analysis},
        or whose error is the message of the first stage that failed
    """
    try:
        document = await asyncio.to_thread(extract_text_from_pdf, pdf_path)
    except Exception as e:
        logger.error(f"Extraction failed for {pdf_path}: {e}")
        return PipelineResult.failure(str(e))

    logger.info(f"Extracted {len(document.text)} characters from {document.page_count} page(s)")

    try:
        categories = categorize_resume_text(document.text, mode=categorizer_mode)
    except ValueError as e:
        return PipelineResult.failure(str(e))

    try:
        outcome = await judge.analyze(document.text, job_description)
    except Exception as e:
        logger.error(f"Analysis failed: {type(e).__name__}: {e}")
        return PipelineResult.failure(str(e) or type(e).__name__)

    return PipelineResult.success({
        "numPages": document.page_count,
        "categories": categories,
        "text": document.text,
        "analysis": outcome.to_json(),
    })
