import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from preppulse.core.database import SessionLocal
from preppulse.core.logging import configure_logging
from preppulse.seed import add_sample_exam


def main():
    configure_logging()
    db = SessionLocal()
    try:
        exam = add_sample_exam(db)
        print(f"Created exam: {exam.title} (id {exam.id}, {len(exam.questions)} questions)")
    except LookupError as exc:
        print(str(exc))
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
