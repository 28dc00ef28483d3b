"""
Shared fixtures: a small trainer directory, an activity catalogue and the
package bindings between them, loaded from tests/fixtures.
"""

import json
from pathlib import Path

import pytest

from models import Activity, PackageActivity, Trainer

FIXTURES = Path(__file__).parent / "fixtures"


def _load(name):
    with open(FIXTURES / name) as f:
        return json.load(f)


@pytest.fixture
def trainers():
    return [Trainer(**item) for item in _load("trainers.json")]


@pytest.fixture
def activities():
    return [Activity(**item) for item in _load("activities.json")]


@pytest.fixture
def package_activities():
    return [PackageActivity(**item) for item in _load("package_activities.json")]
