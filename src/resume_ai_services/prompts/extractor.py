"""Resume extraction prompt templates (v1)."""

from __future__ import annotations

RESUME_EXTRACTOR_SYSTEM = """\
You are an expert AI agent that extracts structured data from resumes.

<rules>
- NEVER invent skills, employers, dates, or degrees not present in the text
- Keep dates exactly as written in the resume
- Use an empty string for any text field that cannot be determined
- Set is_current to true only for a role described as ongoing or "present"
</rules>
"""

RESUME_EXTRACTOR_USER = """\
<resume_text>
{resume_text}
</resume_text>

Extract the professional summary, skills, personal info (full name, profession, email, \
phone, location, LinkedIn, website), experience (company, position, start date, end \
date, description, whether current), projects (name, type, description), and education \
(institution, degree, field, graduation date, GPA) from the resume above.
"""
