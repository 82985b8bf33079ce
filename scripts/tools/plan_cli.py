"""
CLI for running the planning engine against a JSON snapshot.

The snapshot holds everything a caller would pass in for one user on one
day (camelCase or snake_case keys):

    {
      "activeGoal": {"category": "strength", "target": {"exercise": "bench press"}},
      "recentWorkouts": [...],
      "splitPreference": "PPL",
      "yesterdayDate": "2026-10-18",
      "injuryConstraints": ["knee pain"],
      "userProfile": {"weight_kg": 80, "height_cm": 180},
      "weightLossPerWeek": 1
    }

Usage examples:
    # Today's workout intent
    python -m scripts.tools.plan_cli intent --file snapshot.json

    # Next-session weight/rep targets
    python -m scripts.tools.plan_cli progression --file snapshot.json

    # Nutrition targets
    python -m scripts.tools.plan_cli nutrition --file snapshot.json

    # Everything at once, snapshot on stdin
    cat snapshot.json | python -m scripts.tools.plan_cli all
"""
import argparse
import json
import sys
from typing import Any

from pydantic import ValidationError as SchemaValidationError

from coach_engine.core.exceptions import DomainError
from coach_engine.core.logging import add_log_context, clear_log_context, configure_logging
from coach_engine.schemas.snapshot import PlanningSnapshot
from coach_engine.services import (
    get_nutrition_planner,
    get_progression_calculator,
    get_workout_intent_planner,
)


def load_snapshot(path: str | None) -> PlanningSnapshot:
    """Read a snapshot from a JSON file, or stdin when no file (or "-") is given."""
    if path and path != "-":
        with open(path, "r") as f:
            data = json.load(f)
    else:
        data = json.load(sys.stdin)
    return PlanningSnapshot.model_validate(data)


def intent_command(snapshot: PlanningSnapshot) -> dict[str, Any]:
    intent = get_workout_intent_planner().plan_snapshot(snapshot)
    return intent.to_payload()


def progression_command(snapshot: PlanningSnapshot) -> dict[str, Any]:
    targets = get_progression_calculator().compute(
        snapshot.recent_workouts, snapshot.active_goal
    )
    return {name: target.to_payload() for name, target in targets.items()}


def nutrition_command(snapshot: PlanningSnapshot) -> dict[str, Any]:
    intent = get_nutrition_planner().compute(
        snapshot.active_goal,
        snapshot.user_profile,
        snapshot.weight_loss_per_week,
    )
    return intent.to_payload()


def all_command(snapshot: PlanningSnapshot) -> dict[str, Any]:
    return {
        "workoutIntent": intent_command(snapshot),
        "progressionTargets": progression_command(snapshot),
        "nutritionIntent": nutrition_command(snapshot),
    }


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Daily training and nutrition planning CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m scripts.tools.plan_cli intent --file snapshot.json
  python -m scripts.tools.plan_cli progression --file snapshot.json
  python -m scripts.tools.plan_cli nutrition --file snapshot.json
  python -m scripts.tools.plan_cli all --file snapshot.json --indent 0
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    commands = {
        "intent": (intent_command, "Plan today's workout intent"),
        "progression": (progression_command, "Compute next-session progression targets"),
        "nutrition": (nutrition_command, "Compute calorie, protein and carb targets"),
        "all": (all_command, "Run all three planners"),
    }
    for name, (func, help_text) in commands.items():
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--file", "-f",
            help="JSON snapshot file (reads stdin when omitted)"
        )
        sub.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (0 for compact output)"
        )
        sub.set_defaults(func=func)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(stream=sys.stderr)
    add_log_context(command=args.command)

    try:
        snapshot = load_snapshot(args.file)
        result = args.func(snapshot)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Could not read snapshot: {e}", file=sys.stderr)
        return 2
    except SchemaValidationError as e:
        print(f"❌ Invalid snapshot:\n{e}", file=sys.stderr)
        return 2
    except DomainError as e:
        print(f"❌ {e.code}: {e.message}", file=sys.stderr)
        return 2
    finally:
        clear_log_context()

    print(json.dumps(result, indent=args.indent or None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
