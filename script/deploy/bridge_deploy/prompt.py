#!/usr/bin/env python3
"""
World ID State Bridge Deployment Tool - Prompt Resolver

Resolves deployment parameters from, in order:
1. the configuration already in memory (loaded from a prior run or resolved earlier)
2. the environment (including variables loaded from .env)
3. an interactive terminal prompt
4. the parameter's default value, if it has one

Answers are parsed at this boundary. Integer and boolean parameters that
cannot be parsed raise InvalidInputError, which ends the run.
"""

import os
from typing import Any, MutableMapping, Optional
from .formatter import *
from .parameters import Parameter

TRUE_ANSWERS = ("y", "Y", "true", "True")
FALSE_ANSWERS = ("n", "N", "false", "False")


class InvalidInputError(ValueError):
    """Raised when an answer cannot be parsed as the requested type"""


def coerce(raw: Optional[str], value_type: Optional[type] = None) -> Any:
    """
    Parse a raw answer or environment value

    Args:
        raw: The text as typed by the operator or read from the environment
        value_type: None/str to keep the text, int or bool to parse it

    Returns:
        The parsed value, or None when there is no answer
    """
    if raw is None:
        return None

    if value_type is int:
        answer = raw.strip()
        if not answer:
            return None
        # Plain digits only: no sign, no underscores
        if not (answer.isascii() and answer.isdecimal()):
            raise InvalidInputError(f"Invalid input: {raw!r} is not a non-negative integer")
        return int(answer)

    if value_type is bool:
        if not raw.strip():
            return None
        answer = raw.strip()
        if answer in TRUE_ANSWERS:
            return True
        if answer in FALSE_ANSWERS:
            return False
        raise InvalidInputError(f"Invalid input: {raw!r} is not a yes/no answer")

    return raw


def ask(question: str, value_type: Optional[type] = None) -> Any:
    """Ask the operator a question and return the parsed answer"""
    return coerce(input(question), value_type)


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def resolve(
    config: MutableMapping[str, Any],
    key: str,
    env_var: str,
    prompt: str,
    default: Any = None,
    value_type: Optional[type] = None,
) -> Any:
    """
    Populate config[key] unless it already holds a value

    Returns:
        The resolved value, or None if nothing provided one
    """
    if _is_set(config.get(key)):
        return config[key]

    value = coerce(os.environ.get(env_var) or None, value_type)
    if _is_set(value):
        print_info(f"Using {key} from ${env_var}")
    else:
        value = ask(prompt, value_type)

    if not _is_set(value) and default is not None:
        print_info(f"Using default {key}: {default}")
        value = default

    if _is_set(value):
        config[key] = value
        return value
    return None


def resolve_parameter(config: MutableMapping[str, Any], parameter: Parameter) -> Any:
    """Resolve a declared deployment parameter into config"""
    return resolve(
        config,
        parameter.key,
        parameter.env_var,
        parameter.prompt,
        default=parameter.default,
        value_type=parameter.value_type,
    )
