"""
Writer context for changelog_preset.

The transform reads a single setting from its context: the base URL of
the project's issue tracker, taken from ``bugs.url`` in the package
manifest (``package.json``). This module holds the :class:`Context`
object and a loader that reads and validates the manifest.

If the manifest is missing, malformed, or has fields of the wrong type,
a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings when the host
# application has not configured logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


DEFAULT_MANIFEST_NAME = "package.json"


class ConfigError(Exception):
    """Raised when the package manifest is missing or invalid."""

    pass


@dataclass
class Context:
    """Context handed to the commit transform.

    Attributes
    ----------
    package_data : Dict[str, Any]
        Contents of the package manifest.
    """

    package_data: Dict[str, Any] = field(default_factory=dict)

    @property
    def issue_url(self) -> Optional[str]:
        """Issue tracker base URL, or ``None`` when the project has none."""
        bugs = self.package_data.get("bugs")
        if not isinstance(bugs, Mapping):
            return None
        return bugs.get("url") or None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Context":
        """Build a context from a writer context or from package data.

        A mapping carrying a ``packageData`` key is treated as a full
        writer context; any other mapping is taken as the package data.
        """
        if "packageData" in data:
            package_data = data.get("packageData") or {}
        else:
            package_data = data
        return cls(package_data=dict(package_data))


def _validate(data: Any) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigError("Package manifest must be a JSON object")
    bugs = data.get("bugs")
    if bugs is None:
        return data
    if not isinstance(bugs, dict):
        raise ConfigError("'bugs' must be an object")
    if "url" in bugs and bugs["url"] is not None and not isinstance(bugs["url"], str):
        raise ConfigError("'bugs.url' must be a string")
    return data


def load_context(path: Optional[Union[str, Path]] = None) -> Context:
    """Load the package manifest at ``path`` and return a :class:`Context`.

    Args:
        path: Path to the JSON manifest. Defaults to ``package.json`` in
              the current working directory.

    Returns:
        A context whose ``package_data`` is the validated manifest.

    Raises:
        ConfigError: If the manifest is missing, malformed, or invalid.
    """
    manifest_path = Path(path) if path is not None else Path.cwd() / DEFAULT_MANIFEST_NAME

    if not manifest_path.exists():
        logger.error("Package manifest '%s' does not exist", manifest_path)
        raise ConfigError(f"Missing package manifest: {manifest_path}")

    try:
        content = manifest_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse package manifest: %s", exc)
        raise ConfigError(f"Invalid JSON in {manifest_path.name}: {exc}") from exc

    package_data = _validate(data)
    context = Context(package_data=package_data)
    logger.debug("Loaded package manifest from: %s", manifest_path)
    logger.debug("Issue tracker URL: %s", context.issue_url)
    return context
