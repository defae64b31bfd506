"""Case conversion for kebab-case, dot.case and camelCase.

Every public conversion runs the same pipeline: validate the input,
split it into words with ``utils.string_utils.tokenize`` and join the
words under the target style.
"""

from enum import Enum
import logging
from typing import Any, Callable, Dict, List, Union

from utils.string_utils import tokenize


logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Exception raised during case conversion."""
    pass


class InvalidInputKind(Enum):
    """Reasons an input value is rejected."""
    MISSING = "missing"
    WRONG_TYPE = "wrong-type"


class InvalidInputError(ConversionError, TypeError):
    """Exception raised when the value to convert is not a string.

    Attributes:
        kind: Why the value was rejected.
        value: The rejected value.
    """

    def __init__(
        self,
        message: str,
        kind: InvalidInputKind = InvalidInputKind.WRONG_TYPE,
        value: Any = None,
    ):
        """Initialize the error.

        Args:
            message: Error description.
            kind: Why the value was rejected.
            value: The rejected value.
        """
        self.kind = kind
        self.value = value
        super().__init__(message)


class UnknownStyleError(ConversionError, ValueError):
    """Exception raised when a case style name is not recognized."""
    pass


class CaseStyle(Enum):
    """Supported output case styles."""
    KEBAB = "kebab"
    DOT = "dot"
    CAMEL = "camel"

    @classmethod
    def from_name(cls, name: Union[str, 'CaseStyle']) -> 'CaseStyle':
        """Resolve a style from its name.

        Accepts the enum value in any case, optionally suffixed with
        ``-case`` or ``_case`` (e.g. ``"kebab-case"``, ``"DOT_CASE"``).

        Args:
            name: Style name or CaseStyle member.

        Returns:
            Matching CaseStyle.

        Raises:
            UnknownStyleError: If no style matches.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnknownStyleError(f"Unknown case style: {name!r}")

        key = name.strip().lower()
        for suffix in ('-case', '_case'):
            if key.endswith(suffix):
                key = key[:-len(suffix)]
                break

        try:
            return cls(key)
        except ValueError as e:
            valid = ', '.join(style.value for style in cls)
            raise UnknownStyleError(
                f"Unknown case style: {name!r}. Expected one of: {valid}"
            ) from e


def validate_input(value: Any) -> str:
    """Ensure the value to convert is a string.

    Args:
        value: Value to check.

    Returns:
        The value unchanged.

    Raises:
        InvalidInputError: If the value is None or not a string.
    """
    if value is None:
        logger.debug("Rejected input: None")
        raise InvalidInputError(
            "Input cannot be None", InvalidInputKind.MISSING, value
        )

    if not isinstance(value, str):
        type_name = type(value).__name__
        logger.debug(f"Rejected input of type {type_name}")
        raise InvalidInputError(
            f"Expected str, received {type_name}",
            InvalidInputKind.WRONG_TYPE,
            value,
        )

    return value


def join_kebab(words: List[str]) -> str:
    """Join words as kebab-case."""
    return '-'.join(word.lower() for word in words)


def join_dot(words: List[str]) -> str:
    """Join words as dot.case."""
    return '.'.join(word.lower() for word in words)


def join_camel(words: List[str]) -> str:
    """Join words as camelCase.

    The first word is lowercased; every later word gets an uppercase
    initial followed by lowercase.
    """
    if not words:
        return ''
    first, rest = words[0], words[1:]
    return first.lower() + ''.join(
        word[:1].upper() + word[1:].lower() for word in rest
    )


STYLE_JOINERS: Dict[CaseStyle, Callable[[List[str]], str]] = {
    CaseStyle.KEBAB: join_kebab,
    CaseStyle.DOT: join_dot,
    CaseStyle.CAMEL: join_camel,
}


def convert(value: Any, style: Union[str, CaseStyle]) -> str:
    """Convert a string to the given case style.

    Args:
        value: String to convert.
        style: Target style, as a CaseStyle or its name.

    Returns:
        Converted string; empty when the input holds no words.

    Raises:
        InvalidInputError: If the value is None or not a string.
        UnknownStyleError: If the style is not recognized.
    """
    case_style = CaseStyle.from_name(style)
    text = validate_input(value)

    words = tokenize(text)
    logger.debug(f"Converting {len(words)} word(s) to {case_style.value} case")

    return STYLE_JOINERS[case_style](words)


def to_kebab_case(value: Any) -> str:
    """Convert a string to kebab-case.

    Example: ``to_kebab_case("Hello World")`` returns ``"hello-world"``.
    """
    return convert(value, CaseStyle.KEBAB)


def to_dot_case(value: Any) -> str:
    """Convert a string to dot.case.

    Example: ``to_dot_case("hello@world!")`` returns ``"hello.world"``.
    """
    return convert(value, CaseStyle.DOT)


def to_camel_case(value: Any) -> str:
    """Convert a string to camelCase.

    Example: ``to_camel_case("API response code")`` returns
    ``"apiResponseCode"``.
    """
    return convert(value, CaseStyle.CAMEL)
