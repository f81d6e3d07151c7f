"""
Test cases for the object and array combinators.

Tests focus on field omission, context paths in error messages, and abort-on-first-failure.
"""

import unittest
from types import MappingProxyType

import dataparser as dp
from dataparser import ABSENT, ParsingError, run_parser


class TestObject(unittest.TestCase):
    """Test object_ parsing."""

    def setUp(self):
        """Set up a parser with required and optional fields."""
        self.foo_parser = dp.object_({
            "a": dp.string,
            "b": dp.boolean,
            "c": dp.optional(dp.number),
        })

    def test_object(self):
        """A missing optional field is left out of the result."""
        result = run_parser(self.foo_parser, {"a": "hello", "b": True})
        self.assertEqual(result, {"a": "hello", "b": True})
        self.assertNotIn("c", result)

    def test_object_with_optional_present(self):
        result = run_parser(self.foo_parser, {"a": "hello", "b": False, "c": 3})
        self.assertEqual(result, {"a": "hello", "b": False, "c": 3})

    def test_object_drops_undeclared_keys(self):
        result = run_parser(self.foo_parser, {"a": "x", "b": True, "extra": 1})
        self.assertEqual(result, {"a": "x", "b": True})

    def test_object_failure_not_a_mapping(self):
        """Scalars, None and lists are rejected."""
        for value in [27, None, [1], "abc"]:
            with self.subTest(value=value):
                with self.assertRaises(ParsingError) as cm:
                    run_parser(self.foo_parser, value)
                self.assertIn("is not an object", str(cm.exception))

    def test_object_missing_required_field(self):
        """A required field fails on the absent marker with its property path."""
        with self.assertRaises(ParsingError) as cm:
            run_parser(self.foo_parser, {"a": "hello"})
        self.assertEqual(
            str(cm.exception), "Value absent is not a boolean in object property b"
        )

    def test_object_field_failure_path(self):
        with self.assertRaises(ParsingError) as cm:
            run_parser(self.foo_parser, {"a": 1, "b": True})
        self.assertEqual(cm.exception.path, ("object property a",))

    def test_object_null_is_not_absent(self):
        """An explicit null is passed through to the field parser."""
        parser = dp.object_({"a": dp.nullable(dp.number)})
        self.assertEqual(run_parser(parser, {"a": None}), {"a": None})
        self.assertEqual(run_parser(parser, {"a": 1}), {"a": 1})
        with self.assertRaises(ParsingError):
            run_parser(dp.object_({"a": dp.optional(dp.number)}), {"a": None})

    def test_object_accepts_any_mapping(self):
        parser = dp.object_({"a": dp.number})
        self.assertEqual(run_parser(parser, MappingProxyType({"a": 1})), {"a": 1})

    def test_object_preserves_declared_order(self):
        parser = dp.object_({"z": dp.number, "a": dp.number})
        result = run_parser(parser, {"a": 1, "z": 2})
        self.assertEqual(list(result), ["z", "a"])

    def test_object_field_parser_sees_absent(self):
        """Field parsers decide what a missing key means."""
        parser = dp.object_({"a": dp.lift(lambda v: "missing" if v is ABSENT else v)})
        self.assertEqual(run_parser(parser, {}), {"a": "missing"})

    def test_object_empty_declaration(self):
        self.assertEqual(run_parser(dp.object_({}), {"a": 1}), {})

    def test_object_alias(self):
        """dataparser.object is the same combinator."""
        self.assertIs(dp.object, dp.object_)

    def test_object_accepts_plain_callables(self):
        parser = dp.object_({"a": lambda v, ctx: v * 2})
        self.assertEqual(run_parser(parser, {"a": 2}), {"a": 4})


class TestArray(unittest.TestCase):
    """Test array parsing."""

    def test_array(self):
        self.assertEqual(run_parser(dp.array(dp.number), [1, 2, 3]), [1, 2, 3])

    def test_array_empty(self):
        self.assertEqual(run_parser(dp.array(dp.number), []), [])

    def test_array_accepts_tuple(self):
        self.assertEqual(run_parser(dp.array(dp.string), ("a", "b")), ["a", "b"])

    def test_array_failure(self):
        """Non-sequences, including strings and mappings, are rejected."""
        for value in [27, "abc", {"a": 1}, None]:
            with self.subTest(value=value):
                with self.assertRaises(ParsingError) as cm:
                    run_parser(dp.array(dp.number), value)
                self.assertIn("is not an array", str(cm.exception))

    def test_array_item_failure_index(self):
        with self.assertRaises(ParsingError) as cm:
            run_parser(dp.array(dp.number), [1, "x", 3])
        self.assertEqual(str(cm.exception), "Value x is not a number in array at index 1")

    def test_array_aborts_on_first_failure(self):
        """Later elements are never visited after a failure."""
        seen = []

        def track(value, _ctx):
            seen.append(value)
            if value == "bad":
                raise dp.error("bad element", _ctx)
            return value

        with self.assertRaises(ParsingError) as cm:
            run_parser(dp.array(track), ["ok", "bad", "never"])
        self.assertEqual(seen, ["ok", "bad"])
        self.assertEqual(str(cm.exception), "bad element in array at index 1")


class TestNestedPaths(unittest.TestCase):
    """Test context paths through nested structures."""

    def setUp(self):
        self.parser = dp.object_({
            "foo": dp.array(dp.object_({"bar": dp.number})),
        })

    def test_nested_success(self):
        value = {"foo": [{"bar": 1}, {"bar": 2}]}
        self.assertEqual(run_parser(self.parser, value), value)

    def test_nested_failure_path(self):
        """Fragments read innermost first."""
        with self.assertRaises(ParsingError) as cm:
            run_parser(self.parser, {"foo": [{"bar": 1}, {"bar": 2}, {"bar": "x"}]})
        self.assertEqual(
            str(cm.exception),
            "Value x is not a number in object property bar"
            " in array at index 2 in object property foo",
        )
        self.assertEqual(
            cm.exception.path,
            ("object property bar", "array at index 2", "object property foo"),
        )

    def test_sibling_paths_do_not_leak(self):
        """A failure in the second field does not mention the first."""
        parser = dp.object_({"a": dp.array(dp.number), "b": dp.number})
        with self.assertRaises(ParsingError) as cm:
            run_parser(parser, {"a": [1, 2], "b": "x"})
        self.assertEqual(str(cm.exception), "Value x is not a number in object property b")


if __name__ == "__main__":
    unittest.main()
