"""
Basic usage demonstration for dataparser.
"""

import json

import dataparser as dp

USER = dp.object({
    "name": dp.string,
    "age": dp.optional(dp.number),
    "admin": dp.with_default(dp.optional(dp.boolean), False),
    "joined": dp.date_time,
    "tags": dp.with_default(dp.optional(dp.array(dp.string)), list),
})


def main():
    print("dataparser - Basic Usage Demo")
    print("=" * 30)

    # Example 1: Required and optional fields
    print("\n1. Required and Optional Fields")
    data = json.loads('{"name": "Ada", "joined": "2024-01-15T08:00:00Z"}')
    print(f"Input:  {data}")
    print(f"Result: {dp.run_parser(USER, data)}")

    # Example 2: Transforming values
    print("\n2. Transforming Values")
    port = dp.alt(dp.number, dp.map(dp.string, int))
    for raw in [8080, "8443"]:
        print(f"{raw!r} -> {dp.run_parser(port, raw)!r}")

    # Example 3: Validation
    print("\n3. Validation")
    percentage = dp.post_condition(
        dp.number, lambda n: None if 0 <= n <= 100 else f"Value {n} is out of range"
    )
    print(f"42 -> {dp.run_parser(percentage, 42)}")
    try:
        dp.run_parser(dp.array(percentage), [10, 250])
    except dp.ParsingError as e:
        print(f"Error caught: {e}")


if __name__ == "__main__":
    main()
