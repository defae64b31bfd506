"""Converter module for kebab-case, dot.case and camelCase strings."""

from converter.case_converter import (
    CaseStyle,
    ConversionError,
    InvalidInputError,
    InvalidInputKind,
    STYLE_JOINERS,
    UnknownStyleError,
    convert,
    join_camel,
    join_dot,
    join_kebab,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
    validate_input,
)

__all__ = [
    'CaseStyle',
    'ConversionError',
    'InvalidInputError',
    'InvalidInputKind',
    'STYLE_JOINERS',
    'UnknownStyleError',
    'convert',
    'join_camel',
    'join_dot',
    'join_kebab',
    'to_camel_case',
    'to_dot_case',
    'to_kebab_case',
    'validate_input',
]
