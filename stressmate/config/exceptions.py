"""Custom exceptions for rule table loading."""

from pathlib import Path
from typing import List, Optional, Union


class ConfigurationError(Exception):
    """
    Raised when rule tables or environment settings are invalid.

    Carries the individual validation errors, the rule file they came from
    (if any) and hints for fixing them, so the CLI can print one readable
    block.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
        source: Optional[Union[str, Path]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])
        self.source = Path(source) if source is not None else None
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [self.message]
        if self.source is not None:
            lines.append(f"Rule file: {self.source}")

        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {number}. {error}" for number, error in enumerate(self.errors, 1))

        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {hint}" for hint in self.suggestions)

        return "\n".join(lines)
