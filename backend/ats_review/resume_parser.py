"""
ATS Resume Review - PDF Resume Parser
Extract text from resume PDFs and bucket lines into resume sections
"""

import logging
import re
from dataclasses import dataclass

import PyPDF2

from backend.ats_review.errors import ExtractionError

logger = logging.getLogger(__name__)

# Output order of the buckets
CATEGORY_NAMES = (
    "education",
    "skills",
    "experience",
    "projects",
    "achievements",
    "certifications",
)

# Header patterns, tested in this order
SECTION_HEADERS = {
    "education": re.compile(r"\b(education|academic)\b", re.IGNORECASE),
    "skills": re.compile(r"\b(skills|technical skills)\b", re.IGNORECASE),
    "experience": re.compile(r"\b(experience|work experience|employment)\b", re.IGNORECASE),
    "projects": re.compile(r"\b(projects|portfolio)\b", re.IGNORECASE),
    "certifications": re.compile(r"\b(certifications|certified)\b", re.IGNORECASE),
    "achievements": re.compile(r"\b(achievements|awards|honors)\b", re.IGNORECASE),
}


@dataclass(frozen=True)
class ExtractedDocument:
    text: str
    page_count: int


def extract_text_from_pdf(pdf_path: str) -> ExtractedDocument:
    """
    Extract all text from a PDF file.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        ExtractedDocument with the joined page text and the page count

    Raises:
        ExtractionError: the file is missing or is not a readable PDF
    """
    try:
        with open(pdf_path, 'rb') as file:
            pdf_reader = PyPDF2.PdfReader(file)
            text = ""

            num_pages = len(pdf_reader.pages)
            logger.debug(f"Found {num_pages} page(s) in PDF")

            for page in pdf_reader.pages:
                page_text = page.extract_text() or ""
                text += page_text + "\n"

            return ExtractedDocument(text=text.strip(), page_count=num_pages)

    except FileNotFoundError:
        raise ExtractionError(f"PDF file not found: {pdf_path}")
    except Exception as e:
        raise ExtractionError(f"Error reading PDF: {str(e)}") from e


def _empty_categories() -> dict[str, list[str]]:
    return {name: [] for name in CATEGORY_NAMES}


def _categorize_legacy(lines, categories):
    # A line is appended to the current bucket once for every header pattern it
    # fails before a match, so body lines repeat and later headers leak backwards.
    current = None
    for line in lines:
        for category, pattern in SECTION_HEADERS.items():
            if pattern.search(line):
                current = category
                categories[current].append(line)
                break
            elif current:
                categories[current].append(line)


def _categorize_strict(lines, categories):
    current = None
    for line in lines:
        matched = next(
            (category for category, pattern in SECTION_HEADERS.items() if pattern.search(line)),
            None,
        )
        if matched:
            current = matched
            categories[current].append(line)
        elif current:
            categories[current].append(line)


def categorize_resume_text(text: str, mode: str = "legacy") -> dict[str, list[str]]:
    """
    Bucket resume lines under the section header that precedes them.

    Lines before the first header are dropped. "legacy" reproduces the
    first-mismatch fallthrough of the original categorizer; "strict" tests
    every header pattern before falling back to the current section.

    Args:
        text: Extracted resume text
        mode: "legacy" or "strict"

    Returns:
        Mapping of all six category names to their lines
    """
    if mode == "legacy":
        categorize = _categorize_legacy
    elif mode == "strict":
        categorize = _categorize_strict
    else:
        raise ValueError(f"Unknown categorizer mode: {mode}")

    categories = _empty_categories()
    lines = [line.strip() for line in (text or "").split("\n")]
    categorize([line for line in lines if line], categories)
    return categories
