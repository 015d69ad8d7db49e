# src/ride_match/io/config.py
import json
from pathlib import Path

from ride_match.config.models import ScenarioModel


def load_scenario(path: str | Path) -> ScenarioModel:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    return ScenarioModel.model_validate(raw)
