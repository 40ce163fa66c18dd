"""
Tagged value tree produced by the parser.

A ``Value`` starts out ``UNKNOWN`` and is set exactly once by the parser.
Containers exclusively own their children; ``release`` tears a tree down
leaves first and leaves every node ``UNKNOWN``. ``to_python`` recurses, so
like ``json.dumps`` it is bounded by the interpreter's recursion limit.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

type Payload = float | bytes | list["Value"] | list["Member"] | None
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None


class ValueType(Enum):
    """Tag of a ``Value``; ``UNKNOWN`` marks a value parsing never reached."""

    UNKNOWN = "unknown"
    NULL = "null"
    FALSE = "false"
    TRUE = "true"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


@dataclass(frozen=True)
class Member:
    """One key/value pair of an object, in parse order."""

    key: bytes
    value: "Value"


class Value:
    """
    Mutable tagged union over the JSON types.

    Accessors check the tag: asking a string for its number is a caller
    bug and raises ``TypeError`` rather than a parse error.
    """

    __slots__ = ("_payload", "_type")

    def __init__(self) -> None:
        self._type = ValueType.UNKNOWN
        self._payload: Payload = None

    def get_type(self) -> ValueType:
        return self._type

    def _expect(self, expected: ValueType) -> None:
        if self._type is not expected:
            raise TypeError(
                f"expected a {expected.value} value, got {self._type.value}"
            )

    def get_number(self) -> float:
        self._expect(ValueType.NUMBER)
        return self._payload  # type: ignore[return-value]

    def get_string(self) -> bytes:
        self._expect(ValueType.STRING)
        return self._payload  # type: ignore[return-value]

    def get_array(self) -> list["Value"]:
        self._expect(ValueType.ARRAY)
        return self._payload  # type: ignore[return-value]

    def get_object(self) -> list[Member]:
        self._expect(ValueType.OBJECT)
        return self._payload  # type: ignore[return-value]

    def set_null(self) -> None:
        self._type, self._payload = ValueType.NULL, None

    def set_boolean(self, flag: bool) -> None:
        self._type = ValueType.TRUE if flag else ValueType.FALSE
        self._payload = None

    def set_number(self, n: float) -> None:
        self._type, self._payload = ValueType.NUMBER, n

    def set_string(self, s: bytes) -> None:
        self._type, self._payload = ValueType.STRING, s

    def set_array(self, items: list["Value"]) -> None:
        self._type, self._payload = ValueType.ARRAY, items

    def set_object(self, members: list[Member]) -> None:
        self._type, self._payload = ValueType.OBJECT, members

    def release(self) -> None:
        """
        Tears down this value and everything it owns.

        Children are released depth-first before their container, and each
        node ends up ``UNKNOWN`` with no payload. The walk keeps its own
        stack, so arbitrarily deep trees are released without recursion.
        """
        pending: list[tuple[Value, bool]] = [(self, False)]
        while pending:
            node, expanded = pending.pop()
            children = [] if expanded else node._children()
            if not children:
                node._clear()
                continue
            pending.append((node, True))
            pending.extend((child, False) for child in reversed(children))

    def _children(self) -> list["Value"]:
        if self._type is ValueType.ARRAY:
            return self.get_array()
        if self._type is ValueType.OBJECT:
            return [member.value for member in self.get_object()]
        return []

    def _clear(self) -> None:
        """Resets this node alone; its children must already be released."""
        if self._type in (ValueType.ARRAY, ValueType.OBJECT):
            self._payload.clear()  # type: ignore[union-attr]
        self._type = ValueType.UNKNOWN
        self._payload = None

    def __len__(self) -> int:
        if self._type in (ValueType.STRING, ValueType.ARRAY, ValueType.OBJECT):
            return len(self._payload)  # type: ignore[arg-type]
        raise TypeError(f"{self._type.value} value has no length")

    def __bool__(self) -> bool:
        # Set-ness, not emptiness: scalars have no __len__
        return self._type is not ValueType.UNKNOWN

    def __repr__(self) -> str:
        if self._payload is None:
            return f"Value({self._type.value})"
        return f"Value({self._type.value}, {self._payload!r})"

    def to_python(
        self,
        object_pairs_hook: ObjectPairsHook = None,
        encoding: str = "utf-8",
    ) -> Any:
        """
        Converts the tree to plain Python objects.

        Strings and keys are decoded with ``encoding``. Objects become
        ``dict`` (later duplicate keys win) unless ``object_pairs_hook``
        is given, in which case it receives every pair in order.
        """
        if self._type is ValueType.NULL:
            return None
        elif self._type is ValueType.TRUE:
            return True
        elif self._type is ValueType.FALSE:
            return False
        elif self._type is ValueType.NUMBER:
            return self._payload
        elif self._type is ValueType.STRING:
            return self.get_string().decode(encoding)
        elif self._type is ValueType.ARRAY:
            return [
                item.to_python(object_pairs_hook, encoding)
                for item in self.get_array()
            ]
        elif self._type is ValueType.OBJECT:
            pairs = [
                (
                    member.key.decode(encoding),
                    member.value.to_python(object_pairs_hook, encoding),
                )
                for member in self.get_object()
            ]
            if object_pairs_hook:
                return object_pairs_hook(pairs)
            return dict(pairs)
        else:
            raise TypeError("cannot convert an unset value")
