from typing import Dict, List, Tuple

from app.core.models import ExperienceLevel, QuestionRecord, QuestionType, Role

B = QuestionType.BEHAVIORAL
T = QuestionType.TECHNICAL

QuestionSeed = Tuple[str, QuestionType, str]

OPENING_QUESTION: QuestionSeed = (
    "Tell me about yourself and your career goals.", B, "Introduction"
)

DEFAULT_QUESTIONS: Tuple[QuestionSeed, ...] = (
    OPENING_QUESTION,
    ("Describe a challenging situation you faced and how you overcame it.", B, "Problem Solving"),
    ("Walk me through a project you are proud of and the tools you used to deliver it.", T, "Project Experience"),
)

ROLE_DISCIPLINES: Dict[Role, str] = {
    Role.FRONTEND_DEVELOPER: "frontend development",
    Role.BACKEND_DEVELOPER: "backend development",
    Role.FULL_STACK_DEVELOPER: "full stack development",
    Role.DATA_ANALYST: "data analysis",
    Role.DATA_SCIENTIST: "data science",
    Role.PRODUCT_MANAGER: "product management",
    Role.UI_UX_DESIGNER: "user experience design",
    Role.MARKETING_ASSOCIATE: "digital marketing",
    Role.BUSINESS_ANALYST: "business analysis",
    Role.SOFTWARE_ENGINEER: "software engineering",
    Role.DEVOPS_ENGINEER: "infrastructure and delivery automation",
    Role.QA_ENGINEER: "software quality assurance",
}

ROLE_TECHNICAL: Dict[Role, Tuple[QuestionSeed, ...]] = {
    Role.FRONTEND_DEVELOPER: (
        ("How do you keep a large single-page application fast as it grows?", T, "Performance"),
        ("Explain how you manage state across components in a modern frontend framework.", T, "State Management"),
        ("How do you make a web interface accessible to keyboard and screen reader users?", T, "Accessibility"),
    ),
    Role.BACKEND_DEVELOPER: (
        ("How would you design a REST API for a service that handles thousands of requests per second?", T, "API Design"),
        ("When would you add a cache in front of a database, and how do you keep it consistent?", T, "Caching"),
        ("How do you diagnose and fix a slow database query?", T, "Databases"),
    ),
    Role.FULL_STACK_DEVELOPER: (
        ("Walk me through how a request travels from the browser to the database and back in an application you built.", T, "Architecture"),
        ("How do you handle authentication between a frontend client and a backend API?", T, "Security"),
        ("How do you decide whether logic belongs on the client or on the server?", T, "System Design"),
    ),
    Role.DATA_ANALYST: (
        ("How do you clean and validate a dataset before analysing it?", T, "Data Quality"),
        ("Write in words the SQL you would use to find the top customers by revenue each month.", T, "SQL"),
        ("How do you choose the right visualization for a stakeholder dashboard?", T, "Visualization"),
    ),
    Role.DATA_SCIENTIST: (
        ("How do you detect and handle overfitting in a model?", T, "Machine Learning"),
        ("Explain how you would evaluate a classification model on an imbalanced dataset.", T, "Model Evaluation"),
        ("Describe your approach to feature engineering for a new prediction problem.", T, "Feature Engineering"),
    ),
    Role.PRODUCT_MANAGER: (
        ("How do you prioritise features when engineering capacity is limited?", T, "Prioritization"),
        ("Which metrics would you track to measure the success of a new feature?", T, "Metrics"),
        ("How do you turn customer feedback into a product requirement?", T, "Requirements"),
    ),
    Role.UI_UX_DESIGNER: (
        ("Walk me through your design process from research to final prototype.", T, "Design Process"),
        ("How do you run and learn from a usability test?", T, "User Research"),
        ("How do you build and maintain a design system across a product?", T, "Design Systems"),
    ),
    Role.MARKETING_ASSOCIATE: (
        ("How would you plan a campaign to launch a new product?", T, "Campaign Planning"),
        ("Which metrics do you use to judge whether a campaign worked?", T, "Analytics"),
        ("How do you segment an audience for targeted messaging?", T, "Segmentation"),
    ),
    Role.BUSINESS_ANALYST: (
        ("How do you gather and document requirements from stakeholders with conflicting goals?", T, "Requirements"),
        ("Describe how you would map and improve an existing business process.", T, "Process Analysis"),
        ("How do you use data to support a business recommendation?", T, "Data Analysis"),
    ),
    Role.SOFTWARE_ENGINEER: (
        ("How do you choose a data structure for a performance-sensitive feature?", T, "Data Structures"),
        ("Explain how you approach testing a new module you have written.", T, "Testing"),
        ("How do you review code and what do you look for?", T, "Code Quality"),
    ),
    Role.DEVOPS_ENGINEER: (
        ("How would you design a CI/CD pipeline for a service with several environments?", T, "CI/CD"),
        ("How do you monitor a production system and respond to alerts?", T, "Observability"),
        ("Explain how you manage infrastructure as code and keep environments consistent.", T, "Infrastructure"),
    ),
    Role.QA_ENGINEER: (
        ("How do you decide what to automate and what to test manually?", T, "Test Strategy"),
        ("Describe how you would build a regression test suite for a web application.", T, "Automation"),
        ("How do you report a defect so that developers can reproduce it quickly?", T, "Defect Management"),
    ),
}

LEVEL_BEHAVIORAL: Dict[ExperienceLevel, Tuple[QuestionSeed, ...]] = {
    ExperienceLevel.FRESHER: (
        ("Tell me about a time you had to learn a new skill quickly.", B, "Learning Ability"),
        ("Describe an academic or personal project you worked on as part of a team.", B, "Teamwork"),
    ),
    ExperienceLevel.JUNIOR: (
        ("Describe a challenging problem you faced at work and how you solved it.", B, "Problem Solving"),
        ("Tell me about a time you received critical feedback and what you did with it.", B, "Growth"),
    ),
    ExperienceLevel.MID_LEVEL: (
        ("Tell me about a time you disagreed with a teammate and how you resolved it.", B, "Collaboration"),
        ("Describe a project where you had to balance quality against a tight deadline.", B, "Ownership"),
    ),
    ExperienceLevel.SENIOR: (
        ("Tell me about a time you led a team through a difficult change.", B, "Leadership"),
        ("Describe how you have mentored someone and what the outcome was.", B, "Mentoring"),
    ),
}

LEVEL_DEPTH_TEMPLATES: Dict[ExperienceLevel, Tuple[str, str]] = {
    ExperienceLevel.FRESHER: (
        "Walk me through a project where you applied the fundamentals of {discipline}.",
        "Fundamentals",
    ),
    ExperienceLevel.JUNIOR: (
        "What is a technical mistake you made in {discipline} and what did it teach you?",
        "Technical Depth",
    ),
    ExperienceLevel.MID_LEVEL: (
        "Describe the most complex problem you have solved in {discipline} and the trade-offs you weighed.",
        "Technical Depth",
    ),
    ExperienceLevel.SENIOR: (
        "How have you shaped the architecture or long-term technical direction of {discipline} work in your team?",
        "Architecture",
    ),
}


def select_questions(role: Role | str, experience_level: ExperienceLevel | str) -> List[QuestionRecord]:
    """Return the ordered interview questions for a role and experience level.

    The result is deterministic for a given pair. An unrecognized role or level
    yields ``DEFAULT_QUESTIONS`` so a session can always progress.
    """
    parsed_role = Role.parse(role)
    parsed_level = ExperienceLevel.parse(experience_level)
    if parsed_role is None or parsed_level is None:
        return _number(DEFAULT_QUESTIONS)

    technical = ROLE_TECHNICAL[parsed_role]
    behavioral = LEVEL_BEHAVIORAL[parsed_level]
    depth_template, depth_category = LEVEL_DEPTH_TEMPLATES[parsed_level]
    depth = (depth_template.format(discipline=ROLE_DISCIPLINES[parsed_role]), T, depth_category)

    seeds = (
        technical[0],
        OPENING_QUESTION,
        technical[1],
        behavioral[0],
        depth,
        behavioral[1],
        technical[2],
    )
    return _number(seeds)


def _number(seeds) -> List[QuestionRecord]:
    return [
        QuestionRecord(id=index, text=text, type=question_type, category=category)
        for index, (text, question_type, category) in enumerate(seeds, start=1)
    ]
