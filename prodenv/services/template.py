"""
Line-oriented handling of env templates.

Values are opaque: no quoting or escaping is interpreted. Each line keeps its
own terminator so untouched lines are written back byte for byte.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from prodenv.config import get_settings
from prodenv.services.secrets import TokenKind, generate_secret


logger = logging.getLogger(__name__)

LLM_KEY_NAME = "LLM_BINDING_API_KEY"

# Keys that get a generated value only when set to the placeholder.
PLACEHOLDER_KEYS: Dict[str, TokenKind] = {
    "LIGHTRAG_API_KEY": TokenKind.API_KEY,
    "TOKEN_SECRET": TokenKind.PASSWORD,
    "NEO4J_PASSWORD": TokenKind.PASSWORD,
}


@dataclass
class TemplateDocument:
    """Ordered lines of a template env file."""

    lines: List[str] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "TemplateDocument":
        return cls(lines=text.splitlines(keepends=True))

    def has_line(self, content: str) -> bool:
        """True if any line equals ``content`` once surrounding whitespace is dropped."""
        return any(line.strip() == content for line in self.lines)


def is_passthrough(line: str) -> bool:
    """Blank lines, comments and lines without ``=`` are never rewritten."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#") or "=" not in line


def split_assignment(line: str) -> tuple[str, str]:
    key, value = line.split("=", 1)
    return key.strip(), value


def build_replacements(
    template: TemplateDocument,
    llm_key_override: Optional[str] = None,
    generator: Callable[[TokenKind], str] = generate_secret,
) -> Dict[str, str]:
    """
    Collect the values to substitute into the template.

    Args:
        template: Parsed template document.
        llm_key_override: Value for ``LLM_BINDING_API_KEY``. When non-empty it is
            applied whether or not the template holds a placeholder for it.
        generator: Token factory, swappable for deterministic callers.

    Returns:
        Mapping of key name to replacement value.
    """
    placeholder = get_settings().PLACEHOLDER
    replacements: Dict[str, str] = {}

    for key, kind in PLACEHOLDER_KEYS.items():
        if template.has_line(f"{key}={placeholder}"):
            replacements[key] = generator(kind)
            logger.info("Generated %s value for %s", kind.value, key)

    if llm_key_override:
        replacements[LLM_KEY_NAME] = llm_key_override
        logger.info("Using provided value for %s", LLM_KEY_NAME)

    return replacements


def render(template: TemplateDocument, replacements: Dict[str, str]) -> str:
    """Return the template text with replaced values; line count is unchanged."""
    out_lines: List[str] = []
    matched = set()
    for line in template.lines:
        if is_passthrough(line):
            out_lines.append(line)
            continue

        key, _ = split_assignment(line)
        if key in replacements:
            matched.add(key)
            out_lines.append(f"{key}={replacements[key]}\n")
        else:
            out_lines.append(line)

    for key in sorted(set(replacements) - matched):
        logger.warning("%s has no assignment line in the template; value not written", key)
    return "".join(out_lines)
