"""Bootstrap data for a fresh database: the first admin account and a sample SAT exam."""
import logging
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from preppulse.core.constants import RoleEnum
from preppulse.core.security import get_password_hash
from preppulse.crud.exam import exam as crud_exam
from preppulse.crud.user import user as crud_user
from preppulse.models.exam import Exam
from preppulse.models.question import Question
from preppulse.models.user import User

logger = logging.getLogger(__name__)

SAMPLE_EXAM = {
    "title": "Digital SAT Practice Test",
    "description": "A comprehensive practice test covering mathematics and reading",
    "duration": 90,
    "total_questions": 10,
    "passing_score": 70,
    "subject": "SAT Prep",
}

SAMPLE_QUESTIONS = [
    ("Mathematics", "Algebra", "easy", "If 2x + 5 = 15, what is the value of x?",
     ("x = 3", "x = 5", "x = 7", "x = 10"), "B",
     "Subtract 5 from both sides: 2x = 10, then divide by 2: x = 5", 1),
    ("Mathematics", "Geometry", "medium", "What is the area of a circle with radius 5?",
     ("25π", "10π", "5π", "50π"), "A",
     "Area = πr², so Area = π(5²) = 25π", 1),
    ("Mathematics", "Arithmetic", "easy", "What is 15% of 80?",
     ("10", "12", "15", "20"), "B",
     "15% of 80 = 0.15 × 80 = 12", 1),
    ("Reading", "Vocabulary", "medium", 'Which word is closest in meaning to "ubiquitous"?',
     ("Rare", "Everywhere", "Ancient", "Expensive"), "B",
     "Ubiquitous means present, appearing, or found everywhere", 1),
    ("Reading", "Grammar", "easy", "Choose the correct sentence:",
     ("She don't like apples", "She doesn't likes apples", "She doesn't like apples", "She not like apples"), "C",
     'The correct form uses "doesn\'t" with the base verb "like"', 1),
    ("Mathematics", "Algebra", "hard", "If f(x) = 2x² + 3x - 5, what is f(2)?",
     ("5", "7", "9", "11"), "C",
     "f(2) = 2(2²) + 3(2) - 5 = 8 + 6 - 5 = 9", 2),
    ("Reading", "Comprehension", "medium", "What is the main purpose of a thesis statement?",
     ("To conclude the essay", "To present the main argument", "To provide examples", "To introduce the author"), "B",
     "A thesis statement presents the main argument or claim of an essay", 1),
    ("Mathematics", "Statistics", "medium", "What is the median of: 3, 7, 9, 15, 21?",
     ("7", "9", "11", "15"), "B",
     "The median is the middle value when numbers are ordered: 9", 1),
    ("Mathematics", "Trigonometry", "hard", "What is sin(90°)?",
     ("0", "0.5", "1", "undefined"), "C",
     "sin(90°) = 1 (maximum value of sine function)", 2),
    ("Reading", "Literary Devices", "medium", 'What literary device is "The wind whispered through the trees"?',
     ("Metaphor", "Simile", "Personification", "Alliteration"), "C",
     "Personification gives human characteristics to non-human things", 1),
]


def create_admin(db: Session, *, email: str, password: str, name: str = "Admin User") -> Tuple[User, bool]:
    """Return (admin, created). An existing account with that email is promoted, not duplicated."""
    existing = crud_user.get_by_email(db, email=email)
    if existing:
        if not existing.is_admin:
            crud_user.update(db, db_obj=existing, obj_in={"role": RoleEnum.ADMIN})
            logger.info(f"Promoted existing user {existing.id} to admin")
        return existing, False

    admin = crud_user.create(db, obj_in={
        "name": name,
        "email": email.lower(),
        "password_hash": get_password_hash(password),
        "role": RoleEnum.ADMIN,
    })
    logger.info(f"Created admin user {admin.id}")
    return admin, True


def add_sample_exam(db: Session, *, admin: Optional[User] = None) -> Exam:
    if admin is None:
        admin = db.query(User).filter(User.role == RoleEnum.ADMIN).order_by(User.id).first()
        if admin is None:
            raise LookupError("No admin user found; create one first")

    exam = Exam(**SAMPLE_EXAM, created_by=admin.id, is_active=True)
    db.add(exam)
    db.flush()
    for subject, topic, difficulty, text, options, correct, explanation, points in SAMPLE_QUESTIONS:
        db.add(Question(
            exam_id=exam.id,
            subject=subject,
            topic=topic,
            difficulty=difficulty,
            question_text=text,
            option_a=options[0],
            option_b=options[1],
            option_c=options[2],
            option_d=options[3],
            correct_answer=correct,
            explanation=explanation,
            points=points,
        ))
    db.commit()
    logger.info(f"Sample exam {exam.id} added with {len(SAMPLE_QUESTIONS)} questions")
    return crud_exam.get(db, id=exam.id)
