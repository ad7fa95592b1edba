"""Regular-expression highlight rules for markup and placeholders."""

from __future__ import annotations

import logging

import regex

from transmark.errors import HighlightError
from transmark.highlighter import Emit, Highlighter
from transmark.kinds import TextKind

logger = logging.getLogger(__name__)

# Seconds a single highlight() or probe may spend inside the regex engine
DEFAULT_TIMEOUT = 1.0

# HTML/XML open and close tags, and entity references
HTML_MARKUP = regex.compile(
    r"""(</?[a-zA-Z0-9:-]+(\s+[-:\w]+(=([-:\w+]|"[^"]*"|'[^']*'))?)*\s*/?>)"""
    r"""|(&[^ ;]+;)"""
)

# php-format: sprintf() conversions plus positional arguments
PHP_FORMAT = regex.compile(r"%(\d+\$)?[-+]{0,2}([ 0]|'.)?-?\d*(\..?\d+)?[%bcdeEfFgGosuxX]")

# c-format: fprintf() conversions, including POSIX positional arguments
C_FORMAT = regex.compile(
    r"%(\d+\$)?[-+ #0]{0,5}(\d+|\*)?(\.(\d+|\*))?(hh|ll|[hljztL])?[%csdioxXufFeEaAgGnp]"
)

# python-format: old %-style, or new {}-style (permissive)
PYTHON_FORMAT = regex.compile(
    r"(%(\(\w+\))?[-+ #0]?(\d+|\*)?(\.(\d+|\*))?[hlL]?[diouxXeEfFgGcrs%])"
    r"|(\{([^{}])*\})"
)

# ruby-format: Kernel#sprintf, same shape as c-format
RUBY_FORMAT = regex.compile(
    r"%(\d+\$)?[-+ #0]{0,5}(\d+|\*)?(\.(\d+|\*))?(hh|ll|[hljztL])?[%csdioxXufFeEaAgGnp]"
)

# Variable markers used by various template languages:
#   %var%           Twig
#   %{var}, {var}   Ruby and friends
#   {{var}}         Mustache, Jinja
#   @var, %var      Drupal, unterminated so it must stay last
#   ":var", ':var'  Drupal, inside href attributes
COMMON_PLACEHOLDERS = regex.compile(
    r"""%[\w.-]+%|%?\{[\w.-]+\}|\{\{[\w.-]+\}\}|[@%][\w-]+|":[\w-]+"|':[\w-]+'"""
)

# Dialect-specific placeholder patterns, keyed by the item's format flag
FORMAT_PATTERNS: dict[str, regex.Pattern] = {
    "php": PHP_FORMAT,
    "c": C_FORMAT,
    "python": PYTHON_FORMAT,
    "ruby": RUBY_FORMAT,
}


class PatternRule(Highlighter):
    """Highlight every non-empty match of a compiled pattern with one kind.

    If the engine runs out of time the rule stops quietly, keeping whatever it
    already emitted. Any other engine failure raises HighlightError.
    """

    def __init__(
        self,
        pattern: regex.Pattern,
        kind: TextKind,
        name: str = "pattern",
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        self._pattern = pattern
        self._kind = kind
        self._name = name
        self._timeout = timeout

    @property
    def kind(self) -> TextKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    def highlight(self, text: str, emit: Emit) -> None:
        try:
            for match in self._pattern.finditer(text, timeout=self._timeout):
                start, end = match.span()
                if start == end:
                    continue
                emit(start, end, self._kind)
        except TimeoutError:
            logger.debug(
                "rule %r timed out after %ss on %d chars, highlighting stopped",
                self._name,
                self._timeout,
                len(text),
            )
        except regex.error as exc:
            raise HighlightError(f"matching failed: {exc}", self._name, text) from exc

    def matches(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in *text*.

        A timeout counts as no match.
        """
        try:
            return self._pattern.search(text, timeout=self._timeout) is not None
        except TimeoutError:
            logger.debug("rule %r probe timed out on %d chars", self._name, len(text))
            return False
        except regex.error as exc:
            raise HighlightError(f"matching failed: {exc}", self._name, text) from exc

    def __repr__(self) -> str:
        return f"PatternRule({self._name!r}, {self._kind!r})"
