"""
functions/interview_kit/prompt_renderer.py

WHAT THIS FILE IS FOR
---------------------
This module renders the instruction text sent to the generation model.

It is a pure transformation:
    InterviewKitRequest -> prompt string

The template is static text with four named input placeholders
(plus the requested item count, 30 by default):
    - job_description
    - candidate_resume_data_uri
    - unstop_profile_link
    - candidate_experience_context

Missing optional fields render as empty strings. There are no
conditional sections.

PROMPT CONTRACT
---------------
Downstream consumers rely on the output shape, not on exact wording.
Whatever the phrasing, the template MUST keep asking for:
    - exactly 30 question/answer items
    - purely technical questions derived from the job description
    - no behavioral questions
    - bullet-list model answers, code/query block first and fenced

WHAT THIS FILE IS NOT FOR
-------------------------
This module MUST NOT:
- Call the generation service
- Decode or inspect the resume document
- Log prompt contents (they contain candidate data)
"""

from __future__ import annotations

from string import Template

from schemas.input_schema import InterviewKitRequest

QUESTION_COUNT = 30

INTERVIEW_KIT_PROMPT_TEMPLATE = Template(
    """### ROLE AND GOAL

You are a Principal Technical Interviewer at a top-tier technology company. Build a targeted set of technical interview questions that measures a candidate's depth of knowledge and practical skill against a specific Job Description (JD), personalized with the candidate's resume.

-----

### CORE PRINCIPLES

1.  The JD is the authority: every question must come from a skill, technology or responsibility named in the JD. Do not invent requirements.
2.  The resume personalizes: cross-reference the JD with the candidate resume. When a skill appears in both, frame the question around the candidate's own experience (a specific project or role).
3.  Ask "how" and "why": prefer problem-solving, system design, optimization and trade-off questions over definitions.
      * Good: "How would you optimize the performance of..."
      * Good: "What are the trade-offs between Technology X and Y for this use case?"
      * Avoid: "What is Technology X?"
4.  Strictly technical: do not generate any behavioral or soft-skill questions.
      * Omit questions like "Tell me about a time...", "Describe a conflict..." or "What are your weaknesses?".

-----

### PROCESS

1.  Identify the top 10-15 core technical skills, tools and responsibilities in the JD.
2.  Scan the resume for projects and technical skills.
3.  Map JD requirements to the candidate's demonstrated experience and find the strongest overlaps.
4.  Choose a mix of practical coding, system design, optimization and technology comparison questions.
5.  Write exactly ${question_count} question-answer pairs covering the most critical areas. Every model answer has at least 3-4 bullet points. Code or SQL always comes first, inside a fenced code block. No open-ended questions.
6.  Check the result against the FINAL CHECKLIST before answering.

-----

### INPUT CONTEXT

  * Job Description: `${job_description}`
  * Candidate Resume: `${candidate_resume_data_uri}` (media)
  * Unstop Profile Link: `${unstop_profile_link}`
  * Additional Candidate Context (Optional): `${candidate_experience_context}`

-----

### OUTPUT REQUIREMENTS

  * The output is a single valid JSON object with a single root key: "questions".
  * "questions" is an array of exactly ${question_count} objects.
  * Each object has exactly two keys: "question" and "modelAnswer".
      * question: a concise, direct string (ideally 10-25 words).
      * modelAnswer: a single string of bullet points separated by "\\n- ". If the answer includes code or a query, it comes first, enclosed in triple backticks (```).

#### Example Output Structure:
{
  "questions": [
    {
      "question": "The JD emphasizes data pipeline reliability. On your resume's 'Project Sentinel', how did you ensure data integrity?",
      "modelAnswer": "- Checksums: batches were hashed at the source and re-validated after ingestion.\\n- Reconciliation: daily jobs compared row counts and key aggregates between source and target.\\n- Dead-letter queues: malformed records were routed aside for inspection instead of failing the pipeline."
    },
    {
      "question": "How would you write a SQL query to find all users who logged in on 5 consecutive days?",
      "modelAnswer": "```sql\\nWITH ranked AS (\\n    SELECT user_id, login_date,\\n           DENSE_RANK() OVER (PARTITION BY user_id ORDER BY login_date) AS rnk\\n    FROM user_logins\\n    GROUP BY user_id, login_date\\n)\\nSELECT user_id\\nFROM ranked\\nGROUP BY user_id, DATE(login_date, '-' || rnk || ' days')\\nHAVING COUNT(*) >= 5;\\n```\\n- This is the 'gaps and islands' problem.\\n- Each user's distinct login dates get a dense rank.\\n- Subtracting the rank from the date yields a constant key per consecutive run, which is then counted."
    }
  ]
}

-----

### FINAL CHECKLIST

  - [ ] Is the output a single JSON object?
  - [ ] Does the "questions" array contain exactly ${question_count} items?
  - [ ] Is every question purely technical and derived from the JD?
  - [ ] Are there zero behavioral questions?
  - [ ] Is all code/SQL enclosed in triple backticks and placed at the start of the modelAnswer?"""
)


def render_interview_kit_prompt(
    request: InterviewKitRequest,
    *,
    question_count: int = QUESTION_COUNT,
) -> str:
    """
    Render the generation prompt for one request.

    Pure function: same request in, same text out. `question_count`
    is the number of items the model is asked for (30 unless
    settings.expected_question_count says otherwise).
    """
    return INTERVIEW_KIT_PROMPT_TEMPLATE.substitute(
        question_count=question_count,
        job_description=request.job_description,
        candidate_resume_data_uri=request.candidate_resume_data_uri or "",
        unstop_profile_link=request.unstop_profile_link,
        candidate_experience_context=request.candidate_experience_context or "",
    )
