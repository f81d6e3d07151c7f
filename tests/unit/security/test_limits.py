"""
Test cases for structural limits.

Tests focus on rejecting adversarially deep or wide input.
"""

import unittest

import dataparser as dp
from dataparser import ParseConfig, ParseLimits, ParsingError, SecurityError, run_parser
from dataparser.security.limits import LimitValidator


def _nested_lists(depth):
    value = []
    for _ in range(depth):
        value = [value]
    return value


def _nested_list_parser():
    def nested(value, ctx):
        return tree(value, ctx)

    tree = dp.array(nested)
    return tree


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator checks directly."""

    def setUp(self):
        self.validator = LimitValidator(ParseLimits(max_nesting_depth=5, max_array_items=10))

    def test_depth_within_limit(self):
        self.validator.validate_depth(5)  # Should not raise

    def test_depth_exceeds_limit(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_depth(6, ["array at index 0"])
        self.assertEqual(
            str(cm.exception), "Nesting depth 6 exceeds limit 5 in array at index 0"
        )

    def test_path_only_read_on_rejection(self):
        """Checks within limits never walk the context path."""

        def unreadable_path():
            raise AssertionError("path was read")
            yield  # pylint: disable=unreachable

        self.validator.validate_depth(5, unreadable_path())
        self.validator.validate_array_items(10, unreadable_path())

    def test_context_as_path(self):
        ctx = dp.push_to_ctx(dp.push_to_ctx(dp.new_parsing_ctx(), "outer"), "inner")
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_depth(6, ctx)
        self.assertEqual(cm.exception.path, ("inner", "outer"))

    def test_array_items(self):
        self.validator.validate_array_items(10)
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_array_items(11)
        self.assertIn("Array item count 11 exceeds limit 10", str(cm.exception))

    def test_security_error_is_not_parsing_error(self):
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_depth(100)
        self.assertNotIsInstance(cm.exception, ParsingError)
        self.assertIsInstance(cm.exception, dp.DataParserError)


class TestLimitsDuringParsing(unittest.TestCase):
    """Test limits enforced by the structural combinators."""

    def test_nesting_depth_limit(self):
        config = ParseConfig(limits=ParseLimits(max_nesting_depth=3))
        parser = _nested_list_parser()
        self.assertEqual(run_parser(parser, _nested_lists(3), config), _nested_lists(3))
        with self.assertRaises(SecurityError) as cm:
            run_parser(parser, _nested_lists(4), config)
        self.assertTrue(str(cm.exception).startswith("Nesting depth 4 exceeds limit 3"))
        self.assertEqual(len(cm.exception.path), 4)

    def test_limited_config_stops_deep_input(self):
        """Deep input fails cleanly instead of exhausting the stack."""
        with self.assertRaises(SecurityError):
            run_parser(_nested_list_parser(), _nested_lists(5000), ParseConfig.limited())

    def test_default_config_allows_deep_input(self):
        """Without opting in, nesting past the default limit still parses."""
        value = _nested_lists(120)
        self.assertEqual(run_parser(_nested_list_parser(), value), value)
        self.assertEqual(
            run_parser(_nested_list_parser(), value, ParseConfig.unlimited()), value
        )

    def test_array_items_limit(self):
        config = ParseConfig(limits=ParseLimits(max_array_items=2))
        with self.assertRaises(SecurityError):
            run_parser(dp.array(dp.number), [1, 2, 3], config)

    def test_undeclared_keys_are_not_limited(self):
        """Object parsing only visits declared fields, so width is never checked."""
        config = ParseConfig.limited(max_nesting_depth=1, max_array_items=1)
        value = {f"k{i}": i for i in range(50)}
        value["a"] = 1
        self.assertEqual(run_parser(dp.object_({"a": dp.number}), value, config), {"a": 1})

    def test_limits_inside_alt_propagate(self):
        config = ParseConfig(limits=ParseLimits(max_array_items=1))
        parser = dp.alt(dp.array(dp.number), dp.unknown)
        with self.assertRaises(SecurityError):
            run_parser(parser, [1, 2], config)


if __name__ == "__main__":
    unittest.main()
