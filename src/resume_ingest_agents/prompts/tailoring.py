"""Job-description tailoring prompt templates (v1)."""

from __future__ import annotations

TAILORING_SYSTEM = (
    "You are a sophisticated AI that helps transform candidates resumes into the best "
    "version for the job"
)

SKILLS_USER = """\
Help me select the top 5 skills for this job application from my existing list of skills. \
For the skill level put 4 or 5 but nothing less. Only use skills from my list.

<existing_skills>
{skills}
</existing_skills>

<job_description>
{job_description}
</job_description>
"""

SUMMARY_USER = """\
Help me refine my summary for this job application. Be very concise, show my best features \
as a person and make it as relevant as possible. Don't lie.

<current_summary>
{summary}
</current_summary>

<job_description>
{job_description}
</job_description>
"""

REFERENCES_USER = """\
Help me select the top 3 references for this job application from my existing list of \
references. Do not make up any new one that doesn't exist. If the list is empty, leave it empty.

<existing_references>
{references}
</existing_references>

<job_description>
{job_description}
</job_description>
"""

EXPERIENCE_USER = """\
Help me refine my job experiences for this job application. If an experience does not fit \
the job, make its summary as relevant as possible but don't exaggerate. Keep every company, \
position and date exactly as they are.

<current_experiences>
{experiences}
</current_experiences>

<job_description>
{job_description}
</job_description>
"""

HEADLINE_USER = """\
Create the perfect headline for this role. Make it concise and relevant, no longer than 5 words.

<current_headline>
{headline}
</current_headline>

<job_description>
{job_description}
</job_description>
"""
