"""
Test data generators for JSON parsing benchmarks.

Creates JSON documents that stress different parts of the parser:
- Objects of different sizes (small/large)
- Nested containers
- Escape-heavy and long strings (string decoder and buffer growth)
- Number-heavy arrays (number validator and converter)
"""

import json
import random
import string
from typing import Any

_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t"]

# Fixed seed so runs compare like with like
_rng = random.Random(20240115)


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "long_strings": _generate_long_strings,
        "number_heavy": _generate_number_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_record(i: int) -> dict[str, Any]:
    return {
        "id": f"rec_{i:06d}",
        "amount": round(_rng.uniform(1.0, 1000.0), 2),
        "currency": _rng.choice(["USD", "EUR", "GBP", "JPY"]),
        "tags": [_random_string(6) for _ in range(_rng.randint(0, 4))],
        "settled": _rng.choice([True, False, None]),
    }


def _generate_large_object() -> str:
    """Generates a large JSON object (> 10KB) with many records."""
    data = {
        "account": _random_string(12),
        "owner": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "zip": f"{_rng.randint(10000, 99999)}",
        },
        "records": [_generate_record(i) for i in range(120)],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types."""
    choices = [
        lambda i: _rng.randint(-1000, 1000),
        lambda i: round(_rng.uniform(-100.0, 100.0), 3),
        lambda i: _random_string(_rng.randint(5, 30)),
        lambda i: _rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _random_string(10)},
    ]
    return json.dumps([_rng.choice(choices)(i) for i in range(200)])


def _generate_nested_structure() -> str:
    """Generates deeply nested JSON structure."""

    def create_nested(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "items": [create_nested(depth - 1) for _ in range(3)],
            "nested": create_nested(depth - 1),
        }

    return json.dumps(create_nested(7))


def _escaped_string(length: int) -> str:
    """Builds raw JSON string content with escapes mixed in."""
    chars = []
    for _ in range(length):
        if _rng.random() < _ESCAPE_PROBABILITY:
            chars.append(_rng.choice(_ESCAPES))
        else:
            chars.append(_rng.choice(string.ascii_letters + " "))
    return "".join(chars)


def _generate_string_heavy() -> str:
    """Generates JSON with many string escape sequences."""
    strings = ",".join(f'"{_escaped_string(50)}"' for _ in range(100))
    members = ",".join(
        f'"key_{i}":"{_escaped_string(40)}"' for i in range(20)
    )
    return f'{{"strings":[{strings}],"mixed_content":{{{members}}}}}'


def _generate_long_strings() -> str:
    """Generates strings straddling several buffer doublings."""
    lengths = [15, 16, 17, 1023, 1024, 1025, 65537]
    return json.dumps({f"s{n}": "x" * n for n in lengths})


def _generate_number_heavy() -> str:
    """Generates an array of numbers in every grammar shape."""
    numbers = []
    for _ in range(500):
        numbers.append(str(_rng.randint(-(10**9), 10**9)))
        numbers.append(repr(_rng.uniform(-1e6, 1e6)))
        numbers.append(f"{_rng.uniform(1, 9):.6f}e{_rng.randint(-300, 300)}")
    return "[" + ",".join(numbers) + "]"


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(_rng.choices(string.ascii_letters, k=length))
