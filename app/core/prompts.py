QUESTION_GENERATION_PROMPT = """You are an expert interviewer. Generate {count} interview questions for a candidate applying for the {role} position with {experience} experience level and {education} education background.

Mix behavioral and technical questions. Return a JSON array of objects with this structure:
{{
  "id": number,
  "text": "question text",
  "type": "behavioral" | "technical",
  "category": "category name"
}}

Make questions relevant to the experience level:
- Fresher: focus on basics, learning ability, projects
- Junior and Mid-level: focus on problem-solving, team collaboration, technical depth
- Senior: focus on leadership, architecture, mentoring, complex decisions

Do not address the candidate by name. Only return the JSON array, no other text."""

EVALUATION_PROMPT = """You are an expert interviewer evaluating a candidate's answer.

Question: "{question}"
Question Type: {question_type}
Question Category: {category}
Candidate Role: {role}
Experience Level: {experience}

Candidate's Answer: "{answer}"

Evaluate this answer and provide:
1. A score from 1-10
2. Feedback explaining the score
3. Specific suggestions for improvement

Consider relevance, depth, structure (STAR method for behavioral questions), technical accuracy (for technical questions), communication clarity and whether the answer fits the experience level.

Return JSON only:
{{
  "score": number,
  "feedback": "feedback text",
  "strengths": ["strength1", "strength2"],
  "improvements": ["improvement1", "improvement2"]
}}"""

INTERVIEWER_SYSTEM_PROMPT = "You are a precise interview assistant. You always answer with valid JSON and nothing else."
