"""
Main Execution Script for the Trainer Matching Engine.
Loads a snapshot (cached JSON or freshly generated), runs one booking through
the activity and trainer services, and prints a report.
"""

import os
import sys
import logging
import json

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from models import (
    Activity,
    ActivityFilterOptions,
    Location,
    PackageActivity,
    RankingCriteria,
    Trainer,
    TrainerFilterOptions,
    TrainerRequirements
)
from matching import ActivityService, TrainerService, format_hours, normalize_capabilities

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

# --- CONFIGURATION ---
CACHE_FILENAME = os.path.join(os.path.dirname(os.path.abspath(__file__)), "sample_snapshot.json")
USE_CACHE = True  # Set to False to force new AI generation
SESSION_DURATION_HOURS = 3.0
API_KEY = os.environ.get("GOOGLE_API_KEY")
# ---------------------


def save_snapshot(data: dict, filename: str):
    """Persist a generated snapshot so later runs skip the LLM."""
    serializable = {}
    for key, val in data.items():
        if isinstance(val, list):
            serializable[key] = [item.model_dump(mode='json') for item in val]
        else:
            serializable[key] = val

    with open(filename, 'w') as f:
        json.dump(serializable, f, indent=2)
    logger.info(f"Saved snapshot to {filename}")


def load_snapshot(filename: str):
    """
    Load a JSON snapshot and rebuild the pydantic records.
    Returns None when the file is missing or unreadable.
    """
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        logger.warning(f"Snapshot {filename} not found or invalid. Falling back to Generator.")
        return None

    logger.info(f"Loading snapshot from {filename}...")

    trainers = []
    for item in data.get('trainers', []):
        if item.get('capabilities') is not None:
            item['capabilities'] = normalize_capabilities(item['capabilities'])
        trainers.append(Trainer(**item))

    snapshot = {
        "trainers": trainers,
        "activities": [Activity(**item) for item in data.get('activities', [])],
        "package_activities": [PackageActivity(**item) for item in data.get('package_activities', [])],
        "request": data.get('request', {})
    }
    logger.info(f"Snapshot loaded: {len(snapshot['trainers'])} trainers, {len(snapshot['activities'])} activities.")
    return snapshot


def generate_snapshot():
    # Imported lazily so cached runs work without the LLM client configured
    from generators.data_factory import DataGenerator

    generator = DataGenerator(api_key=API_KEY)
    data, cost = generator.generate_snapshot()
    logger.info(f"Total Estimated LLM Cost: ${cost:.4f}")
    return data


def build_location(request: dict) -> Location | None:
    raw = request.get('location')
    if not raw:
        return None
    if raw.get('postcode') and not raw.get('region'):
        return Location.from_postcode(raw['postcode'])
    return Location(**raw)


def main():
    snapshot = None

    # --- PHASE 1: DATA ACQUISITION (Cache vs. GenAI) ---
    if USE_CACHE:
        snapshot = load_snapshot(CACHE_FILENAME)

    if not snapshot or not snapshot["trainers"]:
        if not API_KEY:
            logger.error("GOOGLE_API_KEY not found and no usable snapshot. Please set it via 'export GOOGLE_API_KEY=...'")
            return
        snapshot = generate_snapshot()
        snapshot["request"] = {}
        save_snapshot(snapshot, CACHE_FILENAME)

    if not snapshot["trainers"]:
        logger.error("No data available. Exiting.")
        return

    trainers = snapshot["trainers"]
    activities = snapshot["activities"]
    bindings = snapshot["package_activities"]
    request = snapshot.get("request") or {}

    location = build_location(request)
    session_duration = request.get('session_duration', SESSION_DURATION_HOURS)
    selected_ids = request.get('selected_activity_ids', [])
    capabilities = request.get('capabilities', [])
    mode = request.get('mode')

    activity_service = ActivityService()
    trainer_service = TrainerService()

    # --- PHASE 2: ACTIVITIES ---
    options = ActivityFilterOptions(location=location, search=request.get('search'))
    filtered_activities = activity_service.rank_activities(
        activity_service.filter_activities(activities, options), location
    )
    activity_stats = activity_service.get_stats(activities, filtered_activities, location)
    validation = activity_service.validate_selection(
        selected_ids, request.get('trainer_choice', False), activities, session_duration
    )

    # --- PHASE 3: TRAINERS ---
    filtered_trainers = trainer_service.filter(
        trainers,
        TrainerFilterOptions(capabilities=capabilities, location=location, activity_ids=selected_ids),
        bindings
    )
    ranked = trainer_service.rank(
        filtered_trainers,
        RankingCriteria(capabilities=capabilities, location=location, activities=selected_ids),
        bindings
    )
    best = trainer_service.get_best_match(
        trainers,
        TrainerRequirements(
            capabilities=capabilities,
            activity=selected_ids[0] if selected_ids else None,
            location=location,
            duration=session_duration
        ),
        bindings
    )
    trainer_stats = trainer_service.get_stats(trainers, filtered_trainers)

    # --- PHASE 4: REPORTING ---
    print("\n" + "=" * 50)
    print("BOOKING MATCH REPORT")
    print("=" * 50)
    print(f"Region:   {activity_stats.region or 'Any'}")
    print(f"Session:  {format_hours(session_duration)}")
    print(f"Activities: {activity_stats.filtered}/{activity_stats.total} available")
    for activity in filtered_activities:
        marker = "*" if mode and activity_service.is_recommended_for_mode(activity, mode) else " "
        print(f" {marker} [{activity.id}] {activity.name} ({format_hours(activity.duration)})")

    selected_total = activity_service.get_total_duration(activities, selected_ids)
    print(f"\nSelection: {selected_ids} = {format_hours(selected_total)}")
    for error in validation.errors:
        print(f"  ERROR:   {error}")
    for warning in validation.warnings:
        print(f"  WARNING: {warning}")

    print(f"\nTrainers: {trainer_stats.filtered}/{trainer_stats.total} match ({trainer_stats.available} available)")
    for rank, trainer in enumerate(ranked, start=1):
        caps = ", ".join(trainer_service.get_capability_display_name(c) for c in trainer.capabilities or [])
        print(f"  {rank}. {trainer.name} (rating {trainer.rating or 0}, {trainer.experience or 0}y) {caps}")

    if best:
        print(f"\nBest match: {best.name}")
    else:
        print("\nBest match: none")


if __name__ == "__main__":
    main()
