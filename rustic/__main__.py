"""Prints the outcome of a couple of divisions, one of which fails."""

import logging

from rustic.result import Failure, Result, Success

logger = logging.getLogger(__name__)


def divide(a: float, b: float) -> Result[float, str]:
    if b == 0:
        logger.debug("Refusing to divide %s by zero", a)
        return Failure("Division by zero")
    return Success(a / b)


def describe(result: Result[float, str]) -> str:
    if result.is_ok():
        return f"Result: {result.unwrap()}"
    else:
        return f"Error: {result.get_err()}"


def main() -> None:
    for a, b in [(10, 2), (10, 0)]:
        result = divide(a, b)
        logger.debug("divide(%s, %s) returned %r", a, b, result)
        print(describe(result))


if __name__ == "__main__":
    main()
