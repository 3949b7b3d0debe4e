"""Generate a week of exercises and meals for an existing user."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import SessionLocal, run_migrations
from app.logging_config import configure_logging
from app.services.errors import PlannerError
from app.services.planner_service import PlannerService


logger = logging.getLogger("scripts.generate_week")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a weekly fitness and meal plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Regenerate exercises and meals for user 1
  python scripts/generate_week.py --user-id 1

  # Only regenerate meals, keeping exercises
  python scripts/generate_week.py --user-id 1 --meals-only
        """
    )
    parser.add_argument(
        "--user-id",
        type=int,
        required=True,
        help="Id of the user to plan for"
    )
    parser.add_argument(
        "--meals-only",
        action="store_true",
        help="Keep existing exercises and regenerate meals"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    run_migrations()

    db = SessionLocal()
    try:
        planner = PlannerService(db)
        if args.meals_only:
            plans = planner.generate_meal_plan(args.user_id)
        else:
            plans = planner.generate_week(args.user_id)
        db.commit()
    except PlannerError as e:
        db.rollback()
        logger.error("Plan generation failed [%s]: %s", e.code, e.message)
        sys.exit(1)
    finally:
        db.close()

    for plan in plans:
        calories = sum(meal.calories for meal in plan.meals)
        logger.info(
            "%-9s | %2d exercises | %d meals | %5.0f kcal",
            plan.day,
            len(plan.exercises),
            len(plan.meals),
            calories,
        )


if __name__ == "__main__":
    main()
