"""Reading and writing the RON text format used for levels and saves."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any


class RonError(ValueError):
    """Raised for text that is not valid RON."""


@dataclass(frozen=True)
class Ident:
    """A bare identifier, such as a unit enum variant."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Struct:
    """A struct with named fields, optionally carrying its type name."""

    fields: dict[str, Any] = field(default_factory=dict)
    name: str | None = None


_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(
    r"""[+-]?(?:
        0x[0-9A-Fa-f_]+
        | 0o[0-7_]+
        | 0b[01_]+
        | \d[\d_]*(?:\.[\d_]*)?(?:[eE][+-]?\d[\d_]*)?
        | \.\d[\d_]*(?:[eE][+-]?\d[\d_]*)?
    )""",
    re.VERBOSE,
)
_RAW_STRING = re.compile(r'r(#*)"')
_SIMPLE_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def error(self, message: str) -> RonError:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        return RonError(f"{message} at line {line}, column {column}")

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip(self) -> None:
        self.pos = self.skip_from(self.pos)

    def skip_from(self, i: int) -> int:
        text = self.text
        while i < len(text):
            if text.startswith("//", i):
                end = text.find("\n", i)
                i = len(text) if end < 0 else end + 1
            elif text.startswith("/*", i):
                depth, i = 1, i + 2
                while depth:
                    if i >= len(text):
                        self.pos = i
                        raise self.error("unterminated block comment")
                    if text.startswith("/*", i):
                        depth, i = depth + 1, i + 2
                    elif text.startswith("*/", i):
                        depth, i = depth - 1, i + 2
                    else:
                        i += 1
            elif text[i].isspace():
                i += 1
            else:
                break
        return i

    def expect(self, char: str) -> None:
        self.skip()
        if self.peek() != char:
            raise self.error(f"expected {char!r}")
        self.pos += 1

    def document(self) -> Any:
        self.skip()
        while self.text.startswith("#![", self.pos):
            end = self.text.find("]", self.pos + 3)
            if end < 0:
                raise self.error("unterminated attribute")
            self.pos = end + 1
            self.skip()
        value = self.value()
        self.skip()
        if self.pos != len(self.text):
            raise self.error("unexpected trailing characters")
        return value

    def value(self) -> Any:
        self.skip()
        char = self.peek()
        if not char:
            raise self.error("unexpected end of input")
        if char == "(":
            return self.paren(None)
        if char == "[":
            self.pos += 1
            return self.sequence("]", self.value)
        if char == "{":
            self.pos += 1
            return self.mapping()
        if char == '"':
            return self.string('"')
        if char == "'":
            text = self.string("'")
            if len(text) != 1:
                raise self.error("a char literal holds exactly one character")
            return text
        if _RAW_STRING.match(self.text, self.pos):
            return self.raw_string()
        if char.isdigit() or char in "+-.":
            return self.number()
        match = _IDENT.match(self.text, self.pos)
        if match:
            return self.identifier(match)
        raise self.error(f"unexpected character {char!r}")

    def identifier(self, match: re.Match[str]) -> Any:
        name = match.group()
        self.pos = match.end()
        constants = {"true": True, "false": False, "None": None, "inf": math.inf, "NaN": math.nan}
        if name in constants:
            return constants[name]
        after = self.skip_from(self.pos)
        if after < len(self.text) and self.text[after] == "(":
            self.pos = after
            return self.paren(name)
        return Ident(name)

    def at_field(self) -> bool:
        match = _IDENT.match(self.text, self.pos)
        if not match:
            return False
        after = self.skip_from(match.end())
        return self.text.startswith(":", after)

    def paren(self, name: str | None) -> Any:
        self.expect("(")
        self.skip()
        if self.at_field():
            fields: dict[str, Any] = {}
            for key, item in self.sequence(")", self.struct_field):
                if key in fields:
                    raise self.error(f"duplicate field {key!r}")
                fields[key] = item
            return Struct(fields, name)
        items = self.sequence(")", self.value)
        if name is None:
            return tuple(items)
        if name == "Some" and len(items) == 1:
            return items[0]
        if not items:
            return Struct({}, name)
        raise self.error(f"unsupported tuple struct {name!r}")

    def struct_field(self) -> tuple[str, Any]:
        self.skip()
        match = _IDENT.match(self.text, self.pos)
        if not match:
            raise self.error("expected a field name")
        self.pos = match.end()
        self.expect(":")
        return match.group(), self.value()

    def sequence(self, close: str, item: Any) -> list[Any]:
        items = []
        while True:
            self.skip()
            if self.peek() == close:
                self.pos += 1
                return items
            items.append(item())
            self.skip()
            char = self.peek()
            if char == ",":
                self.pos += 1
            elif char == close:
                self.pos += 1
                return items
            else:
                raise self.error(f"expected ',' or {close!r}")

    def mapping(self) -> dict[Any, Any]:
        result: dict[Any, Any] = {}

        def entry() -> None:
            key = self.value()
            self.expect(":")
            item = self.value()
            try:
                result[key] = item
            except TypeError as exc:
                raise self.error("map key is not hashable") from exc

        self.sequence("}", entry)
        return result

    def string(self, quote: str) -> str:
        self.pos += 1
        parts = []
        text = self.text
        while True:
            if self.pos >= len(text):
                raise self.error("unterminated string")
            char = text[self.pos]
            if char == quote:
                self.pos += 1
                return "".join(parts)
            if char != "\\":
                parts.append(char)
                self.pos += 1
                continue
            escape = text[self.pos + 1 : self.pos + 2]
            if escape in _SIMPLE_ESCAPES:
                parts.append(_SIMPLE_ESCAPES[escape])
                self.pos += 2
            elif escape == "\n":
                self.pos = self.pos + 2
                while self.pos < len(text) and text[self.pos].isspace():
                    self.pos += 1
            elif escape == "x":
                digits = text[self.pos + 2 : self.pos + 4]
                try:
                    parts.append(chr(int(digits, 16)))
                except ValueError as exc:
                    raise self.error("invalid \\x escape") from exc
                self.pos += 4
            elif escape == "u":
                match = re.compile(r"\\u\{([0-9A-Fa-f]{1,6})\}").match(text, self.pos)
                if not match:
                    raise self.error("invalid \\u escape")
                try:
                    parts.append(chr(int(match.group(1), 16)))
                except ValueError as exc:
                    raise self.error("invalid code point") from exc
                self.pos = match.end()
            else:
                raise self.error(f"unknown escape {escape!r}")

    def raw_string(self) -> str:
        match = _RAW_STRING.match(self.text, self.pos)
        assert match is not None
        closing = '"' + match.group(1)
        end = self.text.find(closing, match.end())
        if end < 0:
            self.pos = len(self.text)
            raise self.error("unterminated raw string")
        self.pos = end + len(closing)
        return self.text[match.end() : end]

    def number(self) -> int | float:
        text = self.text
        sign_len = 1 if text[self.pos] in "+-" else 0
        for word, special in (("inf", math.inf), ("NaN", math.nan)):
            if sign_len and text.startswith(word, self.pos + 1):
                negative = text[self.pos] == "-"
                self.pos += 1 + len(word)
                return -special if negative else special
        match = _NUMBER.match(text, self.pos)
        if not match or not match.group()[sign_len:]:
            raise self.error("invalid number")
        literal = match.group().replace("_", "")
        self.pos = match.end()
        body = literal.lstrip("+-")
        try:
            if body[:2] in ("0x", "0o", "0b"):
                value = int(body, 0)
                return -value if literal.startswith("-") else value
            if any(c in body for c in ".eE"):
                return float(literal)
            return int(literal)
        except ValueError as exc:
            raise self.error(f"invalid number {literal!r}") from exc


def loads(text: str) -> Any:
    """Parse a RON document into Python values, Struct and Ident."""
    return _Parser(text).document()


def _dump_string(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\0", "\\0")
    )
    return f'"{escaped}"'


def _dump_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)


def dumps(value: Any) -> str:
    """Serialise a value in compact RON."""
    if value is None:
        return "None"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _dump_float(value)
    if isinstance(value, str):
        return _dump_string(value)
    if isinstance(value, Ident):
        return value.name
    if isinstance(value, Struct):
        body = ",".join(f"{key}:{dumps(item)}" for key, item in value.fields.items())
        return f"{value.name or ''}({body})"
    if isinstance(value, list):
        return "[" + ",".join(dumps(item) for item in value) + "]"
    if isinstance(value, tuple):
        if len(value) == 1:
            return f"({dumps(value[0])},)"
        return "(" + ",".join(dumps(item) for item in value) + ")"
    if isinstance(value, dict):
        return "{" + ",".join(f"{dumps(k)}:{dumps(v)}" for k, v in value.items()) + "}"
    raise TypeError(f"cannot serialise {type(value).__name__} as RON")