"""CI provider detection and the marker text each provider understands."""

from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import Mapping

from ci_group.config import (
    AZURE_PIPELINES_VAR,
    DIALECT_ALIASES,
    DIALECT_OVERRIDE_VAR,
    GITHUB_ACTIONS_VAR,
    NEWLINE_SUBSTITUTE,
)

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def sanitize(text: str | None) -> str:
    """Collapse line breaks so *text* fits on a single marker line.

    ``None`` becomes an empty string; other non-string values are passed
    through ``str()``.
    """
    if text is None:
        return ""
    return _LINE_BREAK.sub(NEWLINE_SUBSTITUTE, str(text))


class Dialect(enum.Enum):
    GITHUB_ACTIONS = "github"
    AZURE_PIPELINES = "azure"
    NONE = "none"

    @property
    def is_active(self) -> bool:
        return self is not Dialect.NONE

    def open_marker(self, name: str) -> str | None:
        name = sanitize(name)
        if self is Dialect.GITHUB_ACTIONS:
            return f"::group::{name}"
        if self is Dialect.AZURE_PIPELINES:
            return f"##[group]{name}"
        return None

    def close_marker(self) -> str | None:
        # Providers match closes to opens by order, never by name.
        if self is Dialect.GITHUB_ACTIONS:
            return "::endgroup::"
        if self is Dialect.AZURE_PIPELINES:
            return "##[endgroup]"
        return None


def _is_true(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "true"


def detect(environ: Mapping[str, str] | None = None) -> Dialect:
    """Classify the current process environment.

    Resolution order: an explicit ``CI_GROUP_DIALECT`` override, then
    ``GITHUB_ACTIONS``, then ``TF_BUILD`` (Azure Pipelines). Anything else,
    including an unrecognized override value, falls through to
    :attr:`Dialect.NONE`. The environment is read on every call.
    """
    env = os.environ if environ is None else environ

    override = env.get(DIALECT_OVERRIDE_VAR)
    if override is not None and override.strip():
        member = DIALECT_ALIASES.get(override.strip().lower())
        if member is not None:
            logger.debug("Dialect forced to %s by %s", member, DIALECT_OVERRIDE_VAR)
            return Dialect[member]
        logger.debug("Ignoring unrecognized %s=%r", DIALECT_OVERRIDE_VAR, override)

    if _is_true(env.get(GITHUB_ACTIONS_VAR)):
        logger.debug("Detected GitHub Actions via %s", GITHUB_ACTIONS_VAR)
        return Dialect.GITHUB_ACTIONS
    if _is_true(env.get(AZURE_PIPELINES_VAR)):
        logger.debug("Detected Azure Pipelines via %s", AZURE_PIPELINES_VAR)
        return Dialect.AZURE_PIPELINES
    return Dialect.NONE
