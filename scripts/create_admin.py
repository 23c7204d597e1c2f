import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from preppulse.core.database import SessionLocal
from preppulse.core.logging import configure_logging
from preppulse.seed import create_admin


def main():
    parser = argparse.ArgumentParser(description="Create the first PrepPulse admin account.")
    parser.add_argument("--email", default=os.getenv("ADMIN_EMAIL", "admin@example.com"))
    parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD"))
    parser.add_argument("--name", default="Admin User")
    args = parser.parse_args()

    if not args.password:
        parser.error("--password (or ADMIN_PASSWORD) is required")

    configure_logging()
    db = SessionLocal()
    try:
        admin, created = create_admin(db, email=args.email, password=args.password, name=args.name)
    finally:
        db.close()

    if created:
        print(f"Admin user created: {admin.email} (id {admin.id})")
    else:
        print(f"User {admin.email} already exists (id {admin.id}) and is an admin")


if __name__ == "__main__":
    main()
