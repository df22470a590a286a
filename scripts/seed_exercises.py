#!/usr/bin/env python3
"""
Seed a user's exercise library with the starter exercises (idempotent).

Usage:
    python scripts/seed_exercises.py --email someone@example.com
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.models import SessionLocal, init_database
from repositories import UserRepository
from services.workout_service import WorkoutService
from app.exceptions import RepScaleError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("seed_exercises")


def main():
    p = argparse.ArgumentParser(description="Seed the starter exercise library.")
    p.add_argument("--email", required=True, help="Email of the user to seed")
    args = p.parse_args()

    init_database()
    db = SessionLocal()
    try:
        user = UserRepository(db).get_by_email(args.email)
        if user is None:
            logger.error("No user with email %s", args.email)
            sys.exit(2)
        added = WorkoutService.seed_default_exercises(db, user.user_id)
        logger.info("Added %d exercises for %s", added, args.email)
    except RepScaleError:
        logger.exception("Seeding failed")
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
