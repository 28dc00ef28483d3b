"""
LLM-powered snapshot generator for the Trainer Matching Engine.
STRATEGY: one batched request per record type, then strict pydantic validation.

Used by the runner to produce demo trainers, activities and package bindings
when no cached snapshot is available.
"""

import os
import json
import logging
import re
import google.generativeai as genai
from typing import List, Tuple, Dict, Any, Type
from pydantic import ValidationError, BaseModel

from models import Activity, PackageActivity, Trainer
from matching import CAPABILITY_LABELS, normalize_capabilities

logger = logging.getLogger(__name__)

MODEL_NAME = "gemini-2.5-flash"
ENVELOPE_KEYS = ["trainers", "activities", "package_activities", "bindings", "result"]


class DataGenerator:
    def __init__(self, api_key: str | None = None):
        self.api_key = api_key or os.environ.get("GOOGLE_API_KEY")
        if not self.api_key:
            raise ValueError("GOOGLE_API_KEY not found. Please set it in environment.")

        genai.configure(api_key=self.api_key)
        self.model = genai.GenerativeModel(MODEL_NAME)
        self.total_cost = 0.0

    def _estimate_cost(self, prompt_tokens: int, response_tokens: int) -> float:
        return (prompt_tokens * 0.075 + response_tokens * 0.30) / 1_000_000

    def _robust_parse_json(self, raw_text: str) -> List[Any]:
        """
        Strips Markdown fences and normalises the payload to a list of dicts.
        """
        if not raw_text: return []

        # 1. Clean Markdown Code Blocks
        clean_text = re.sub(r"```(?:json)?\s*|\s*```", "", raw_text).strip()

        try:
            data = json.loads(clean_text)
        except json.JSONDecodeError:
            # Fallback: pull out the outermost list
            match = re.search(r'(\[.*\])', clean_text, re.DOTALL)
            if not match:
                return []
            try:
                data = json.loads(match.group(1))
            except json.JSONDecodeError:
                return []

        # 2. Normalize Data Shape
        if isinstance(data, list): return data
        if isinstance(data, dict):
            for key in ENVELOPE_KEYS:
                if key in data and isinstance(data[key], list):
                    return data[key]
            return [data]
        return []

    def _validate_batch(self, items: List[Any], model_class: Type[BaseModel]) -> List[BaseModel]:
        valid_items = []
        for i, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object item {i} in {model_class.__name__} batch")
                continue
            if model_class is Trainer and "capabilities" in item:
                item["capabilities"] = normalize_capabilities(item.get("capabilities") or [])
            try:
                valid_items.append(model_class(**item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid item {i} in batch: {e.json()}")
        return valid_items

    def _fetch_big_batch(self, prompt: str, model_class: Type[BaseModel]) -> Tuple[List[Any], float]:
        """
        Executes a generation request with robust parsing.
        """
        try:
            generation_config = genai.GenerationConfig(
                response_mime_type="application/json",
                max_output_tokens=16000,
                temperature=0.7
            )
            response = self.model.generate_content(prompt, generation_config=generation_config)
        except Exception as e:
            logger.error(f"Batch Generation Failed: {e}")
            return [], 0.0

        cost = 0.0
        usage = getattr(response, "usage_metadata", None)
        if usage is not None:
            cost = self._estimate_cost(usage.prompt_token_count, usage.candidates_token_count)
        self.total_cost += cost

        items = self._validate_batch(self._robust_parse_json(response.text), model_class)
        logger.info(f"Generated {len(items)} {model_class.__name__} records")
        return items, cost

    def generate_trainers(self, count: int = 12, regions: List[str] | None = None) -> Tuple[List[Trainer], float]:
        regions = regions or ["Hertfordshire", "Greater London", "Essex"]
        prompt = f"""
        Generate {count} trainers for a children's activity and support booking platform.

        OUTPUT: A single valid JSON Array of {count} objects.

        STRICT SCHEMA RULES:
        - "id": INTEGER, unique, starting at 1.
        - "name": string, "slug": kebab-case of the name.
        - "capabilities": list chosen ONLY from {json.dumps(sorted(CAPABILITY_LABELS))}.
        - "service_regions": list chosen from {json.dumps(regions)}, or null for trainers who travel anywhere.
        - "rating": number between 0 and 5 (one decimal).
        - "experience": integer years between 0 and 20.
        - "available": boolean.
        Make roughly one trainer in five have null service_regions and one in six have an empty capability list.
        """
        return self._fetch_big_batch(prompt, Trainer)

    def generate_activities(self, count: int = 20, regions: List[str] | None = None) -> Tuple[List[Activity], float]:
        regions = regions or ["Hertfordshire", "Greater London", "Essex"]
        prompt = f"""
        Generate {count} activities a trainer can run with a child (ages 5-16).

        OUTPUT: A single valid JSON Array of {count} objects.

        STRICT SCHEMA RULES:
        - "id": INTEGER, unique, starting at 1.
        - "name": short title. "description": one sentence.
        - "duration": hours as a number between 0.5 and 6 (multiples of 0.5).
        - "available_in_regions": list chosen from {json.dumps(regions)}, or null when offered everywhere.
        Include homework, outdoor, sensory/therapy, revision and day-trip style activities.
        """
        return self._fetch_big_batch(prompt, Activity)

    def generate_package_activities(self, trainers: List[Trainer], activities: List[Activity]) -> Tuple[List[PackageActivity], float]:
        if not trainers or not activities:
            return [], 0.0

        roster = [{"id": t.id, "capabilities": t.capabilities or []} for t in trainers]
        catalogue = [{"id": a.id, "name": a.name} for a in activities]
        prompt = f"""
        Assign qualified trainers to each activity.

        TRAINERS: {json.dumps(roster)}
        ACTIVITIES: {json.dumps(catalogue)}

        OUTPUT: JSON Array with one object per activity: {{"id": <activity id>, "trainer_ids": [<trainer ids>]}}.
        Every activity should have between 1 and 4 trainers. Use ONLY the ids listed above.
        """
        return self._fetch_big_batch(prompt, PackageActivity)

    def generate_snapshot(self, trainer_count: int = 12, activity_count: int = 20) -> Tuple[Dict[str, List], float]:
        """Trainers, activities and bindings in three calls."""
        logger.info("Generating snapshot (3 API Calls)...")
        step_cost = 0.0

        trainers, c1 = self.generate_trainers(trainer_count)
        step_cost += c1
        activities, c2 = self.generate_activities(activity_count)
        step_cost += c2
        bindings, c3 = self.generate_package_activities(trainers, activities)
        step_cost += c3

        return {
            "trainers": trainers,
            "activities": activities,
            "package_activities": bindings
        }, step_cost
