"""
Pytest configuration and shared fixtures for fast_json_format tests.

Provides immutable sample documents used across the formatting, property and
malformed-input test modules.
"""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class FormatCase:
    """
    Immutable container for a formatting test case.

    Holds the input text and the exact output expected for one indent unit.
    """

    description: str
    input_data: str
    expected_output: str
    indent: str = "  "


# https://json.org/JSON_checker/test/pass1.json
PASS1 = """[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]"""


@pytest.fixture
def pass1_document() -> str:
    """
    Provides the json.org pass1 document covering every JSON value form.
    """
    return PASS1


@pytest.fixture
def well_formed_documents() -> list[str]:
    """
    Provides well-formed JSON documents of varying shape.

    None of them contains an escaped quote or backslash written as a \\u
    escape, so formatting is idempotent on all of them.
    """
    return [
        PASS1,
        '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        '{"JSON Test Pattern pass3": {"The outermost value": '
        '"must be an object or array.", "In this test": "It is an object."}}',
        '{"name":"John","age":30,"tags":["a","b"],"meta":{}}',
        "[]",
        "{}",
        '"just a string"',
        "12345678901234567890123",
        '[{"a":[{"b":[{"c":null}]}]},[[],{}],true,false]',
    ]


@pytest.fixture
def pretty_cases() -> list[FormatCase]:
    """
    Provides inputs with their exact expected pretty output.
    """
    return [
        FormatCase(
            "flat object",
            '{"name":"John","age":30}',
            '{\n  "name": "John",\n  "age": 30\n}',
        ),
        FormatCase(
            "nested array in object",
            '{"a":[1,2]}',
            '{\n  "a": [\n    1,\n    2\n  ]\n}',
        ),
        FormatCase(
            "tab indent",
            '{"a":[1]}',
            '{\n\t"a": [\n\t\t1\n\t]\n}',
            indent="\t",
        ),
        FormatCase(
            "four space indent",
            '[{"k":true}]',
            '[\n    {\n        "k": true\n    }\n]',
            indent="    ",
        ),
        FormatCase(
            "scalar document",
            "  null  ",
            "null",
        ),
        FormatCase(
            "empty input",
            "",
            "",
        ),
        FormatCase(
            "whitespace only",
            " \t\r\n ",
            "",
        ),
    ]


@pytest.fixture
def json_checker_failures() -> list[str]:
    """
    Provides documents a strict parser must reject.

    Taken from the json.org JSON_checker suite; the formatter has to accept
    all of them without raising.
    """
    return [
        '["Unclosed array"',
        '{unquoted_key: "keys must be quoted"}',
        '["extra comma",]',
        '["double extra comma",,]',
        '[   , "<-- missing value"]',
        '["Comma after the close"],',
        '["Extra close"]]',
        '{"Extra comma": true,}',
        '{"Extra value after close": true} "misplaced quoted value"',
        '{"Illegal expression": 1 + 2}',
        '{"Illegal invocation": alert()}',
        '{"Numbers cannot have leading zeroes": 013}',
        '{"Numbers cannot be hex": 0x14}',
        '["Illegal backslash escape: \\x15"]',
        "[\\naked]",
        '["Illegal backslash escape: \\017"]',
        '{"Missing colon" null}',
        '{"Double colon":: null}',
        '{"Comma instead of colon", null}',
        '["Colon instead of comma": false]',
        '["Bad value", truth]',
        "['single quote']",
        '["\ttab\tcharacter\tin\tstring\t"]',
        '["tab\\   character\\   in\\  string\\  "]',
        '["line\nbreak"]',
        '["line\\\nbreak"]',
        "[0e]",
        "[0e+]",
        "[0e+-1]",
        '{"Comma instead if closing brace": true,',
        '["mismatch"}',
        '["A\x1fZ control characters in string"]',
    ]
