"""Load the NewsGuard YAML config (search, completion, fact_check, scoring, logging)."""

from pathlib import Path

import yaml

from newsguard.config.models import NewsGuardConfig


def load_config(path: Path | str) -> NewsGuardConfig:
    """Read a NewsGuard config file.

    Sections left out of the file take their model defaults, so an empty
    file yields an OpenRouter completion client, Serper search and
    analysis logging switched off. API keys never live in the file; the
    clients read them from the environment when they are built.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If a section is malformed, names an
            unknown completion ``type``, or holds an out-of-range option.
    """
    with Path(path).open() as f:
        raw = yaml.safe_load(f)
    return NewsGuardConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Return ``configs/default.yaml`` at the project root."""
    # src/newsguard/config/loader.py -> project root
    return Path(__file__).resolve().parents[3] / "configs" / "default.yaml"
