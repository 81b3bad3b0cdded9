"""
ATS Resume Review - Resume Judge
Asks Google Gemini to score a resume against a job description
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any

from google import genai

from backend.ats_review.errors import AIServiceError, InputError
from backend.ats_review.prompts import DEFAULT_JOB_DESCRIPTION, build_prompt

logger = logging.getLogger(__name__)

INVALID_JSON_REASON = "Invalid JSON response from AI"


@dataclass(frozen=True)
class ParsedAnalysis:
    """The model answered with JSON; its shape is passed through untouched."""
    data: Any

    def to_json(self) -> Any:
        return self.data


@dataclass(frozen=True)
class UnparsedAnalysis:
    """The model answered with text that is not JSON."""
    raw_response: str
    reason: str = INVALID_JSON_REASON

    def to_json(self) -> dict:
        return {"rawResponse": self.raw_response, "error": self.reason}


AnalysisOutcome = ParsedAnalysis | UnparsedAnalysis


def strip_code_fences(text: str) -> str:
    """Remove ```json openers and any bare ``` fences."""
    return text.replace("```json", "").replace("```", "")


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_analysis(text: str) -> AnalysisOutcome:
    clean_text = strip_code_fences(text)
    try:
        return ParsedAnalysis(json.loads(clean_text, parse_constant=_reject_constant))
    except ValueError as e:
        logger.warning(f"Failed to parse AI response as JSON: {e} (first 200 chars: {clean_text[:200]!r})")
        return UnparsedAnalysis(clean_text)


def _response_text(response) -> str:
    # response.text is None when the candidate only carries non-text parts
    text = getattr(response, "text", None)
    if text:
        return str(text)

    candidates = getattr(response, "candidates", None)
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    return "".join(str(part.text) for part in parts if getattr(part, "text", None))


class ResumeJudge:
    """
    Scores resumes with one Gemini client that lives as long as the process.

    Args:
        client: google.genai.Client (anything exposing models.generate_content)
        model_name: Gemini model identifier
        timeout: Seconds to wait for a completion
        default_job_description: Used when analyze() gets no job description
    """

    def __init__(
        self,
        client: genai.Client,
        model_name: str = "gemini-2.5-flash",
        timeout: float = 60.0,
        default_job_description: str = DEFAULT_JOB_DESCRIPTION,
    ):
        self.client = client
        self.model_name = model_name
        self.timeout = timeout
        self.default_job_description = default_job_description

    async def _complete(self, prompt: str) -> str:
        try:
            # Sync client in a worker thread: Flask closes each async view's loop,
            # which would strand connections pooled by client.aio
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.model_name,
                    contents=prompt,
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.error(f"Gemini call timed out after {self.timeout:g}s")
            raise AIServiceError(f"AI request timed out after {self.timeout:g} seconds")
        except Exception as e:
            logger.error(f"Error generating content: {type(e).__name__}: {e}", exc_info=True)
            raise

        return _response_text(response)

    async def analyze(self, resume_text: str, job_description: str | None = None) -> AnalysisOutcome:
        """
        Analyze a resume against a job description.

        Args:
            resume_text: Full resume text extracted from PDF
            job_description: Target job description; the default one when empty

        Returns:
            ParsedAnalysis with the model's JSON, or UnparsedAnalysis when the
            completion is not valid JSON

        Raises:
            InputError: empty resume text or job description
            AIServiceError: the completion timed out
        """
        job_description = job_description or self.default_job_description
        if not resume_text:
            raise InputError("Resume text is not provided")
        if not job_description:
            raise InputError("Job description is not provided")

        logger.info(f"Analyzing resume ({len(resume_text)} chars) with {self.model_name}")
        prompt = build_prompt(resume_text, job_description)
        completion = await self._complete(prompt)
        logger.debug(f"Raw AI response: {completion[:500]}")

        return parse_analysis(completion)
