"""
Prompt text for the ATS resume review.
"""

# Used when the client sends no job description
DEFAULT_JOB_DESCRIPTION = """
    Microsoft Azure Storage is a highly distributed, massively scalable, and ubiquitously accessible cloud storage platform. To provide unmatched performance at lowest cost and power, the Azure storage team is building the storage stack that will run on the DPU (Data Processing Units) based storage nodes. We are looking for a Software Engineer who is interested in developing and deploying distributed storage.

    As a Software Engineer, you will have a chance to work on design, implementation, and optimizations of highly performant and massively scale out storage on DPU hardware. You will be involved in all phases of the storage lifecycle, design, implementation, test, deployment, and support. This opportunity will allow you to accelerate your career growth and hone your technical skills.

    Responsibilities:
    - Works with appropriate stakeholders to determine user requirements for the new features to be developed.
    - Participates and contributes to the design of massively scalable storage services.
    - Owns software components and/or modules and drives the component level design decisions working with the team, senior engineers, and architects.
    - Creates and implements code for a product, service, or feature, reusing code as applicable.
    - Writes and learns to create code that is extensible and maintainable.

    Qualifications:
    - Bachelor's Degree in Computer Science, or related technical discipline with proven experience coding in languages including, but not limited to, C, C++, C#, Java, JavaScript, or Python.
    - Knowledge of Windows or Linux Operating System, AND distributed systems and storage.
"""


def build_prompt(resume_text: str, job_description: str) -> str:
    """Embed the resume and job description verbatim in the ATS evaluation template."""
    return f"""
        Analyze the provided resume against the job description for ATS compliance, relevance, and effectiveness. Provide a structured JSON response for visualization.

        *Evaluation Criteria:*
        1. ATS Score (0-100): Relevance (0-40), Keyword Match (0-30), Formatting/Readability (0-20), Contact Completeness (0-10).
        2. Missing Sections: Critical (e.g., Work Experience), Recommended (e.g., Certifications).
        3. Missing Skills: Must-Have and Nice-to-Have from the job description.
        4. Missing Achievements: Suggest quantifiable achievements.
        5. Contact Information Validation: Extract and validate email, LinkedIn, etc.
        6. AI-Powered Suggestions: Detailed feedback in Markdown.

        *Resume:*
        {resume_text}

        *Job Description:*
        {job_description}

        *JSON Response Format:*
        {{
          "ats_score": {{ "total": 0, "breakdown": {{ "relevance": 0, "keyword_match": 0, "formatting": 0, "contact_completeness": 0 }} }},
          "missing_sections": {{ "critical": [], "recommended": [] }},
          "missing_skills": {{ "must_have": [], "nice_to_have": [] }},
          "missing_achievements": [],
          "contact_info": {{ "email": null, "linkedin": null, "github": null, "portfolio": null }},
          "suggestions": []
        }}
        """
