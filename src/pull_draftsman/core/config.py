"""Project configuration for pull-draftsman.

Configuration lives in an optional `.pull-draftsman.toml` at the repository
root. All keys are optional:

    # Conventional base branch names, highest priority first
    base_branch_candidates = ["stage", "develop", "main"]

    # Remote to compare against when it exists
    remote = "upstream"

    # Directory for generated drafts (relative to the repository root)
    output_dir = "drafts"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from pull_draftsman.core.errors import ConfigError

CONFIG_FILE_NAME = ".pull-draftsman.toml"

# Adjust with `base_branch_candidates` in the config file
DEFAULT_BASE_BRANCH_CANDIDATES: tuple[str, ...] = (
    "stage",
    "staging",
    "develop",
    "dev",
    "main",
    "master",
    "release",
)

DEFAULT_REMOTE = "origin"


@dataclass(frozen=True)
class DraftsmanConfig:
    """In-memory representation of `.pull-draftsman.toml`."""

    base_branch_candidates: tuple[str, ...] = DEFAULT_BASE_BRANCH_CANDIDATES
    preferred_remote: str = DEFAULT_REMOTE
    output_dir: Path | None = None


def load_config(repo_root: Path) -> DraftsmanConfig:
    """Load the config file from the repository root if present; otherwise return defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or a value is invalid
    """
    cfg_path = repo_root / CONFIG_FILE_NAME
    if not cfg_path.exists():
        return DraftsmanConfig()

    try:
        text = cfg_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {cfg_path}: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    candidates = data.get("base_branch_candidates", list(DEFAULT_BASE_BRANCH_CANDIDATES))
    if not isinstance(candidates, list) or not all(isinstance(c, str) for c in candidates):
        raise ConfigError(f"{cfg_path}: base_branch_candidates must be a list of strings")
    if not candidates:
        raise ConfigError(f"{cfg_path}: base_branch_candidates must not be empty")

    remote = data.get("remote", DEFAULT_REMOTE)
    if not isinstance(remote, str) or not remote:
        raise ConfigError(f"{cfg_path}: remote must be a non-empty string")

    output_dir: Path | None = None
    raw_output_dir = data.get("output_dir")
    if raw_output_dir is not None:
        if not isinstance(raw_output_dir, str):
            raise ConfigError(f"{cfg_path}: output_dir must be a string")
        output_dir = Path(raw_output_dir).expanduser()
        if not output_dir.is_absolute():
            output_dir = repo_root / output_dir

    return DraftsmanConfig(
        base_branch_candidates=tuple(candidates),
        preferred_remote=remote,
        output_dir=output_dir,
    )
