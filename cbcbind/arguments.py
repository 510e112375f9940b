"""Compiles CBC options into the token list read by CBC's command line parser.

Options can be given as a mapping or as a sequence of entries. Every entry is
either named, i.e. a (name, value) pair with a non-empty name, or a bare value.
Named entries become ``-name value`` (or just ``-name`` if the value is None or
empty), bare values become a flag ``-value``:

.. code-block::

    compile_arguments({"sec": 100, "presolve": "off"})
    # ('problem', '-sec', '100', '-presolve', 'off', '-solve', '-quit')

    compile_arguments([("presolve", "off"), 100])
    # ('problem', '-presolve', 'off', '-100', '-solve', '-quit')

Order is preserved, since later CBC flags can override earlier ones.
"""
import logging
import re
from collections.abc import Mapping

from .errors import OptionError

logger = logging.getLogger(__name__)

PREFIX = "-"
PROBLEM_PLACEHOLDER = "problem"
TRAILING_ARGUMENTS = ("-solve", "-quit")

_flag_pattern = re.compile(r"-\w")


class Flag:
    """A CBC option without value, e.g. ``-solve``."""
    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return type(other) is Flag and other.name == self.name

    def __hash__(self):
        return hash((Flag, self.name))

    def __repr__(self):
        return "Flag(%r)" % self.name


class NamedValue:
    """A CBC option followed by its value, e.g. ``-sec 100``."""
    __slots__ = ("name", "value")

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        return type(other) is NamedValue and (other.name, other.value) == (self.name, self.value)

    def __hash__(self):
        return hash((NamedValue, self.name, self.value))

    def __repr__(self):
        return "NamedValue(%r, %r)" % (self.name, self.value)


def prefix_argument(token):
    """Prepends the flag marker to `token` unless it already starts with it."""
    return token if token.startswith(PREFIX) else PREFIX + token


def _to_token(value):
    return "" if value is None else str(value)


def _has_name(name):
    return name is not None and _to_token(name) != ""


def _parse_entry(entry):
    if isinstance(entry, (Flag, NamedValue)):
        return entry
    if isinstance(entry, tuple) and len(entry) == 2:
        name, value = entry
    else:
        name, value = None, entry

    if not _has_name(name):
        return Flag(_to_token(value))
    value = _to_token(value)
    if value == "":
        return Flag(_to_token(name))
    return NamedValue(_to_token(name), value)


def parse_options(options):
    """Turns loosely typed CBC options into a tuple of `Flag` and `NamedValue` entries.

    :param options: a mapping from option name to value, or an iterable whose items are
        (name, value) pairs, bare values or `Flag`/`NamedValue` instances. Names that are
        None or empty make an entry unnamed. None means no options.
    :type options: Union[Dict[str,object], Iterable]
    :return: the parsed entries in input order
    :rtype: Tuple[Union[Flag,NamedValue]]
    """
    if options is None:
        return ()
    entries = options.items() if isinstance(options, Mapping) else options
    return tuple(_parse_entry(entry) for entry in entries)


def compile_arguments(options=None):
    """Compiles CBC options into CBC's argument tokens. The result starts with a
    placeholder for the problem and ends with the tokens that solve the problem
    and leave CBC.

    :param options: see `parse_options`
    :type options: Union[Dict[str,object], Iterable], optional
    :raises OptionError: if an option name does not start with ``-`` followed by a word character.
    :return: the argument tokens
    :rtype: Tuple[str]
    """
    tokens = [PROBLEM_PLACEHOLDER]
    for option in parse_options(options):
        name = prefix_argument(_to_token(option.name))
        if not _flag_pattern.match(name):
            raise OptionError("invalid CBC option name %r" % name)
        tokens.append(name)
        value = _to_token(option.value) if isinstance(option, NamedValue) else ""
        if value != "":
            tokens.append(value)
    tokens.extend(TRAILING_ARGUMENTS)

    logger.debug("compiled CBC arguments: %s", " ".join(tokens))
    return tuple(tokens)
