from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from apps.experiment.settings import ExperimentSettings

ENV_PREFIX = "PARRY_"
SECTION = "experiment"
DEFAULT_PROFILE = "dev"


def _repo_root() -> Path:
    """Heuristic: walk up from this file until we find pyproject.toml."""
    here = Path(__file__).resolve()
    return next((d for d in here.parents if (d / "pyproject.toml").exists()), Path.cwd())


def profile_path(env: Mapping[str, str], profile: str) -> Path:
    """Where `<profile>.toml` lives; PARRY_CONFIG_DIR points *at* profiles/."""
    root = env.get(f"{ENV_PREFIX}CONFIG_DIR")
    profiles = Path(root) if root else _repo_root() / "configs" / "profiles"
    return profiles / f"{profile}.toml"


def read_profile_section(path: Path, section: str = SECTION) -> dict[str, Any]:
    """The `[section]` table of a profile, or {} when the file is absent."""
    if not path.is_file():
        return {}
    try:
        doc = tomllib.loads(path.read_text("utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Failed to parse profile TOML: {path}") from e
    table = doc.get(section, {})
    if not isinstance(table, dict):
        raise RuntimeError(f"[{section}] in {path} is not a table")
    return dict(table)


def _decode(raw: str) -> Any:
    # JSON first so numbers, bools and keymaps come through typed
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def env_overrides(fields: Iterable[str], env: Mapping[str, str]) -> dict[str, Any]:
    """
    PARRY_SEED=42, PARRY_repetitions=3 -> {'seed': 42, 'repetitions': 3}.
    Matching ignores case after the prefix; unknown names are skipped.
    """
    by_upper = {f.upper(): f for f in fields}
    out: dict[str, Any] = {}
    for name, raw in env.items():
        if not name.startswith(ENV_PREFIX):
            continue
        field = by_upper.get(name[len(ENV_PREFIX):].upper())
        if field is not None:
            out[field] = _decode(raw)
    return out


def load_experiment_settings(
    env: Mapping[str, str] | None = None, profile: str | None = None
) -> ExperimentSettings:
    """
    Merge defaults (ExperimentSettings) <- TOML [experiment] <- env PARRY_*.
    Env examples: PARRY_SEED=42, PARRY_REPETITIONS=3,
    PARRY_KEYMAP={"a":"jab","s":"block","d":"cross"}
    """
    env = os.environ if env is None else env
    profile = (profile or env.get(f"{ENV_PREFIX}PROFILE") or DEFAULT_PROFILE).strip()

    merged = ExperimentSettings.model_construct().model_dump()
    merged.update(read_profile_section(profile_path(env, profile)))
    merged.update(env_overrides(merged.keys(), env))

    # a numeric seed from env or TOML is still a seed string
    if isinstance(merged.get("seed"), int | float) and not isinstance(merged["seed"], bool):
        merged["seed"] = str(merged["seed"])

    return ExperimentSettings.model_validate(merged)
