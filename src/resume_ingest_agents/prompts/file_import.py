"""File import prompt templates (v1)."""

from __future__ import annotations

DRAFT_INSTRUCTION = "Create a resume from the file."

DRAFT_SYSTEM = """\
You are an expert resume reader. Transcribe the attached resume into clean plain text.

<rules>
- Keep every section the document has: contact details, summary, experience, education, \
skills, languages, and anything else present
- Preserve dates, company names, titles and institutions exactly as written
- NEVER add information that is not in the document
</rules>
"""

EXTRACTION_SYSTEM = """\
You are an expert resume parser. Extract structured information from resume text accurately.

<rules>
- NEVER hallucinate information not explicitly present in the text
- Leave a field empty rather than guessing
- Keep dates as they are written in the text
</rules>
"""

BASICS_USER = """\
<resume_text>
{resume_text}
</resume_text>

Given the free text above, extract the basics, summary and languages. Split the person's \
name into given name and family name when possible.
"""

EXPERIENCE_USER = """\
<resume_text>
{resume_text}
</resume_text>

Given the free text above, extract the work experiences, most recent first.
"""

SKILLS_USER = """\
<resume_text>
{resume_text}
</resume_text>

Given the free text above, extract the skills.
"""

EDUCATION_USER = """\
<resume_text>
{resume_text}
</resume_text>

Given the free text above, extract the educations.
"""
