"""
Matchers compiled from command display patterns.

A display pattern such as ``fragment-s[et]`` names a mandatory part
(``fragment-s``) and an optional part (``et``) that may be typed in part or
left off entirely. The compiled matcher walks the line one character at a
time instead of going through a regular expression, so command names never
need escaping.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PatternMatch:
    """Result of matching a command line against a pattern."""
    command: str
    tail: Optional[str] = None


@dataclass(frozen=True)
class CommandLinePattern:
    """Case-insensitive matcher for one command's display pattern."""
    mandatory: str
    optional: str = ""

    @property
    def display(self) -> str:
        if not self.optional:
            return self.mandatory
        return f"{self.mandatory}[{self.optional}]"

    def match(self, line: str) -> Optional[PatternMatch]:
        """
        Match a whole command line.

        The line must start with the mandatory text, may continue with any
        leading part of the optional text and must then end, or go on with
        whitespace followed by the argument tail.
        """
        position = len(self.mandatory)
        if line[:position].lower() != self.mandatory.lower():
            return None

        for char in self.optional:
            if position >= len(line) or line[position].lower() != char.lower():
                break
            position += 1

        command, rest = line[:position], line[position:]
        if not rest:
            return PatternMatch(command=command)
        if not rest[0].isspace():
            return None
        return PatternMatch(command=command, tail=rest)

    def matches(self, line: str) -> bool:
        return self.match(line) is not None


def compile_pattern(display_pattern: str) -> CommandLinePattern:
    """
    Compile a display pattern into a matcher.

    Everything from the first ``[`` to a closing ``]`` at the end of the
    pattern is optional; a pattern without brackets must be typed in full.
    Commands whose names contain brackets are matched with ``pattern_for``.
    """
    start = display_pattern.find("[")
    if start <= 0 or not display_pattern.endswith("]"):
        return CommandLinePattern(mandatory=display_pattern)
    return CommandLinePattern(
        mandatory=display_pattern[:start],
        optional=display_pattern[start + 1:-1],
    )


def pattern_for(abbreviation: str, name: str) -> CommandLinePattern:
    """
    Build the matcher for ``name`` abbreviated to ``abbreviation``.

    Works from the two parts directly, so names containing brackets match
    themselves even though their display pattern cannot be compiled back.
    """
    if not name.startswith(abbreviation):
        raise ValueError(f"{abbreviation!r} is not a prefix of {name!r}")
    return CommandLinePattern(mandatory=abbreviation, optional=name[len(abbreviation):])
