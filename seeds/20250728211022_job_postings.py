from __future__ import annotations

from models import JobPosting
from seeds.helpers import replace_rows, stamped
from utils import generate_uuids


MODEL = JobPosting

PUBLISHED = 2
ADMIN_USER = 1

JOB_POSTINGS = [
    {
        "title": "Senior Backend Engineer",
        "slug": "senior-backend-engineer",
        "description": (
            "We are looking for a Senior Backend Engineer to join our team. "
            "You will be responsible for designing and implementing scalable backend services."
        ),
        "requirements": (
            "5+ years of experience with Node.js, TypeScript, PostgreSQL. "
            "Experience with microservices architecture."
        ),
        "responsibilities": (
            "Design and implement backend services, write clean and maintainable code, "
            "collaborate with frontend team."
        ),
        "salary_min": 15000000,
        "salary_max": 25000000,
        "is_remote": False,
        "department_id": 1,
        "job_category_id": 1,
        "job_type_id": 2,
        "employment_level_id": 4,
    },
    {
        "title": "Product Manager",
        "slug": "product-manager",
        "description": (
            "We are seeking a Product Manager to lead product strategy and development. "
            "You will work closely with engineering and design teams."
        ),
        "requirements": (
            "3+ years of product management experience, strong analytical skills, "
            "experience with agile methodologies."
        ),
        "responsibilities": "Define product strategy, create product roadmaps, work with cross-functional teams.",
        "salary_min": 20000000,
        "salary_max": 35000000,
        "is_remote": True,
        "department_id": 2,
        "job_category_id": 1,
        "job_type_id": 2,
        "employment_level_id": 4,
    },
    {
        "title": "Digital Marketing Intern",
        "slug": "digital-marketing-intern",
        "description": (
            "We are looking for a Digital Marketing Intern to support our marketing team. "
            "This is a great opportunity to learn about digital marketing."
        ),
        "requirements": (
            "Currently pursuing a degree in Marketing or related field, "
            "basic knowledge of social media platforms."
        ),
        "responsibilities": (
            "Assist with social media management, support marketing campaigns, analyze marketing data."
        ),
        "salary_min": 3000000,
        "salary_max": 5000000,
        "is_remote": False,
        "department_id": 3,
        "job_category_id": 2,
        "job_type_id": 1,
        "employment_level_id": 1,
    },
    {
        "title": "UI/UX Designer",
        "slug": "ui-ux-designer",
        "description": (
            "We are seeking a UI/UX Designer to create beautiful and functional user interfaces. "
            "You will work on both web and mobile applications."
        ),
        "requirements": "3+ years of UI/UX design experience, proficiency in Figma, strong portfolio.",
        "responsibilities": "Design user interfaces, create wireframes and prototypes, conduct user research.",
        "salary_min": 12000000,
        "salary_max": 20000000,
        "is_remote": True,
        "department_id": 2,
        "job_category_id": 5,
        "job_type_id": 2,
        "employment_level_id": 3,
    },
    {
        "title": "HR Generalist",
        "slug": "hr-generalist",
        "description": (
            "We are looking for an HR Generalist to support our human resources team. "
            "You will handle various HR functions."
        ),
        "requirements": (
            "2+ years of HR experience, knowledge of Indonesian labor law, strong communication skills."
        ),
        "responsibilities": (
            "Handle recruitment, employee relations, HR administration, support HR initiatives."
        ),
        "salary_min": 8000000,
        "salary_max": 15000000,
        "is_remote": False,
        "department_id": 4,
        "job_category_id": 3,
        "job_type_id": 2,
        "employment_level_id": 3,
    },
    {
        "title": "DevOps Engineer",
        "slug": "devops-engineer",
        "description": (
            "We are seeking a DevOps Engineer to manage our infrastructure and deployment processes. "
            "You will work on CI/CD pipelines."
        ),
        "requirements": "3+ years of DevOps experience, knowledge of Docker, Kubernetes, AWS.",
        "responsibilities": (
            "Manage cloud infrastructure, implement CI/CD pipelines, monitor system performance."
        ),
        "salary_min": 15000000,
        "salary_max": 25000000,
        "is_remote": True,
        "department_id": 1,
        "job_category_id": 1,
        "job_type_id": 2,
        "employment_level_id": 3,
    },
    {
        "title": "Frontend Developer",
        "slug": "frontend-developer",
        "description": (
            "We are looking for a Frontend Developer to build responsive web applications. "
            "You will work with React and modern JavaScript."
        ),
        "requirements": (
            "2+ years of frontend development experience, proficiency in React, TypeScript, CSS."
        ),
        "responsibilities": (
            "Build responsive web applications, collaborate with backend team, optimize performance."
        ),
        "salary_min": 10000000,
        "salary_max": 18000000,
        "is_remote": False,
        "department_id": 1,
        "job_category_id": 1,
        "job_type_id": 2,
        "employment_level_id": 2,
    },
    {
        "title": "Marketing Specialist",
        "slug": "marketing-specialist",
        "description": (
            "We are seeking a Marketing Specialist to help us grow our brand and reach. "
            "You will work on various marketing campaigns."
        ),
        "requirements": (
            "2+ years of marketing experience, knowledge of digital marketing tools, creative thinking."
        ),
        "responsibilities": (
            "Create marketing campaigns, manage social media, analyze marketing performance."
        ),
        "salary_min": 8000000,
        "salary_max": 15000000,
        "is_remote": False,
        "department_id": 3,
        "job_category_id": 2,
        "job_type_id": 2,
        "employment_level_id": 2,
    },
    {
        "title": "Recruitment Specialist",
        "slug": "recruitment-specialist",
        "description": (
            "We are looking for a Recruitment Specialist to help us find and hire top talent. "
            "You will manage the full recruitment cycle."
        ),
        "requirements": (
            "3+ years of recruitment experience, strong communication skills, knowledge of recruitment tools."
        ),
        "responsibilities": (
            "Source candidates, conduct interviews, manage recruitment process, build talent pipeline."
        ),
        "salary_min": 12000000,
        "salary_max": 20000000,
        "is_remote": False,
        "department_id": 4,
        "job_category_id": 3,
        "job_type_id": 2,
        "employment_level_id": 3,
    },
    {
        "title": "Lead Mobile Developer (iOS)",
        "slug": "lead-mobile-developer-ios",
        "description": (
            "We are seeking a Lead Mobile Developer to lead our iOS development team. "
            "You will be responsible for iOS app development."
        ),
        "requirements": (
            "5+ years of iOS development experience, proficiency in Swift, experience leading teams."
        ),
        "responsibilities": (
            "Lead iOS development team, architect mobile applications, mentor junior developers."
        ),
        "salary_min": 20000000,
        "salary_max": 35000000,
        "is_remote": True,
        "department_id": 1,
        "job_category_id": 1,
        "job_type_id": 2,
        "employment_level_id": 4,
    },
]


def seed(db) -> int:
    uuids = generate_uuids(len(JOB_POSTINGS))
    rows = [
        {
            **posting,
            "id": idx + 1,
            "uuid": uuids[idx],
            "location": "Jakarta, Indonesia",
            "status_id": PUBLISHED,
            "created_by": ADMIN_USER,
        }
        for idx, posting in enumerate(JOB_POSTINGS)
    ]
    return replace_rows(db, JobPosting, stamped(rows))
