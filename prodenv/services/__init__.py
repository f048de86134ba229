"""Service layer for the env initializer."""
from .secrets import TokenKind, generate_secret
from .template import TemplateDocument, build_replacements, render
from .files import read_template, validate_preconditions, write_output

__all__ = [
	"TokenKind", "generate_secret",
	"TemplateDocument", "build_replacements", "render",
	"read_template", "validate_preconditions", "write_output",
]
