"""
Error reporting demonstration for dataparser.
"""

import dataparser as dp
from dataparser import ParseConfig, ParseLimits, ParsingError, SecurityError

ORDER = dp.object({
    "id": dp.string,
    "lines": dp.array(dp.object({
        "sku": dp.string,
        "quantity": dp.number,
    })),
})


def main():
    print("dataparser - Error Reporting Demo")
    print("=" * 33)

    # Example 1: Error path through nested structures
    print("\n1. Error with Location Path")
    try:
        dp.run_parser(ORDER, {"id": "A-1", "lines": [{"sku": "X", "quantity": "two"}]})
    except ParsingError as e:
        print("Error caught:")
        print(str(e))
        print(f"Base message: {e.base_message}")
        print(f"Path:         {list(e.path)}")

    # Example 2: Missing required field
    print("\n2. Missing Required Field")
    try:
        dp.run_parser(ORDER, {"lines": []})
    except ParsingError as e:
        print("Error caught:")
        print(str(e))

    # Example 3: Alternatives report the last failure
    print("\n3. Alternatives")
    try:
        dp.run_parser(dp.alt(dp.string, dp.number), True)
    except ParsingError as e:
        print("Error caught:")
        print(str(e))

    # Example 4: Structural limits
    print("\n4. Structural Limits")
    config = ParseConfig(limits=ParseLimits(max_array_items=2))
    try:
        dp.run_parser(dp.array(dp.number), [1, 2, 3], config)
    except SecurityError as e:
        print("Security error caught:")
        print(str(e))


if __name__ == "__main__":
    main()
