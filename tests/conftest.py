"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test-case fixtures built from the json.org JSON_checker
suite, each annotated with the exact error code this parser reports.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from jtree import ParseErrorCode


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    ``error_code`` is None for documents that must parse.
    """

    description: str
    input_data: bytes
    error_code: ParseErrorCode | None = None
    expected_output: Any = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents this parser rejects, with their codes.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail2.json
        (2, b'["Unclosed array"', ParseErrorCode.UNCLOSED_BRACKETS),
        # https://json.org/JSON_checker/test/fail3.json
        (
            3,
            b'{unquoted_key: "keys must be quoted"}',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail5.json
        (5, b'["double extra comma",,]', ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail6.json
        (6, b'[   , "<-- missing value"]', ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail7.json
        (
            7,
            b'["Comma after the close"],',
            ParseErrorCode.ROOT_NOT_SINGULAR,
        ),
        # https://json.org/JSON_checker/test/fail8.json
        (8, b'["Extra close"]]', ParseErrorCode.ROOT_NOT_SINGULAR),
        # https://json.org/JSON_checker/test/fail10.json
        (
            10,
            b'{"Extra value after close": true} "misplaced quoted value"',
            ParseErrorCode.ROOT_NOT_SINGULAR,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        (
            11,
            b'{"Illegal expression": 1 + 2}',
            ParseErrorCode.UNCLOSED_BRACKETS,
        ),
        # https://json.org/JSON_checker/test/fail12.json
        (
            12,
            b'{"Illegal invocation": alert()}',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail13.json
        (
            13,
            b'{"Numbers cannot have leading zeroes": 013}',
            ParseErrorCode.UNCLOSED_BRACKETS,
        ),
        # https://json.org/JSON_checker/test/fail14.json
        (
            14,
            b'{"Numbers cannot be hex": 0x14}',
            ParseErrorCode.UNCLOSED_BRACKETS,
        ),
        # https://json.org/JSON_checker/test/fail15.json
        (
            15,
            b'["Illegal backslash escape: \\x15"]',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail16.json
        (16, b"[\\naked]", ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail17.json
        (
            17,
            b'["Illegal backslash escape: \\017"]',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail19.json
        (19, b'{"Missing colon" null}', ParseErrorCode.EXPECT_VALUE),
        # https://json.org/JSON_checker/test/fail20.json
        (20, b'{"Double colon":: null}', ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail21.json
        (
            21,
            b'{"Comma instead of colon", null}',
            ParseErrorCode.EXPECT_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail22.json
        (
            22,
            b'["Colon instead of comma": false]',
            ParseErrorCode.UNCLOSED_BRACKETS,
        ),
        # https://json.org/JSON_checker/test/fail23.json
        (23, b'["Bad value", truth]', ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail24.json
        (24, b"['single quote']", ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail26.json
        (
            26,
            b'["tab\\   character\\   in\\  string\\  "]',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail28.json
        (28, b'["line\\\nbreak"]', ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail29.json
        (29, b"[0e]", ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail30.json
        (30, b"[0e+]", ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail31.json
        (31, b"[0e+-1]", ParseErrorCode.INVALID_VALUE),
        # https://json.org/JSON_checker/test/fail32.json
        (
            32,
            b'{"Comma instead if closing brace": true,',
            ParseErrorCode.INVALID_VALUE,
        ),
        # https://json.org/JSON_checker/test/fail33.json
        (33, b'["mismatch"}', ParseErrorCode.UNCLOSED_BRACKETS),
    ]

    return [
        JsonTestCase(
            description=f"fail{number}.json",
            input_data=doc,
            error_code=code,
        )
        for number, doc, code in fail_docs
    ]


@pytest.fixture
def json_lenient_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker "fail" documents this parser deliberately accepts.

    Scalars are allowed at the root, nesting is unbounded, raw control bytes
    are copied into strings verbatim, and a comma may precede the closing
    delimiter of a container.
    """
    return [
        JsonTestCase(
            "fail1.json - scalar root",
            b'"A JSON payload should be an object or array, not a string."',
            None,
            "A JSON payload should be an object or array, not a string.",
        ),
        JsonTestCase(
            "fail4.json - trailing comma in array",
            b'["extra comma",]',
            None,
            ["extra comma"],
        ),
        JsonTestCase(
            "fail9.json - trailing comma in object",
            b'{"Extra comma": true,}',
            None,
            {"Extra comma": True},
        ),
        JsonTestCase(
            "fail18.json - deep nesting",
            b'[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
            None,
            [[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]],
        ),
        JsonTestCase(
            "fail25.json - raw tabs in string",
            b'["\ttab\tcharacter\tin\tstring\t"]',
            None,
            ["\ttab\tcharacter\tin\tstring\t"],
        ),
        JsonTestCase(
            "fail27.json - raw line break in string",
            b'["line\nbreak"]',
            None,
            ["line\nbreak"],
        ),
    ]


PASS1 = b"""[
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
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that must parse in the default mode.
    """
    return [
        JsonTestCase(
            "pass2.json - deep nesting",
            b'[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "pass3.json - simple object",
            b'{"JSON Test Pattern pass3": {"The outermost value": '
            b'"must be an object or array.", "In this test": '
            b'"It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", b"null", None, None),
        JsonTestCase("true boolean", b"true", None, True),
        JsonTestCase("false boolean", b"false", None, False),
        JsonTestCase("integer", b"42", None, 42.0),
        JsonTestCase("negative integer", b"-17", None, -17.0),
        JsonTestCase("float", b"3.14", None, 3.14),
        JsonTestCase("empty string", b'""', None, ""),
        JsonTestCase("simple string", b'"hello"', None, "hello"),
        JsonTestCase("empty array", b"[]", None, []),
        JsonTestCase("empty object", b"{}", None, {}),
        JsonTestCase("simple array", b"[1, 2, 3]", None, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", b'{"key": "value"}', None, {"key": "value"}
        ),
    ]
