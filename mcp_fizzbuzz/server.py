"""MCP server exposing FizzBuzz classification as a tool."""

from mcp.server.fastmcp import FastMCP
from pydantic import StrictInt

from fizzbuzz.classifier import InvalidArgumentError, make_rules, summarize
from fizzbuzz.schemas import ErrorResponse

mcp = FastMCP("fizzbuzz")


@mcp.tool()
def fizzbuzz(bound: StrictInt = 100, fizz: str = "Fizz", buzz: str = "Buzz") -> dict:
    """Classify the integers 1..bound as Fizz, Buzz, FizzBuzz or the number.

    Args:
        bound: Inclusive upper limit, must be a positive integer; booleans
            fail argument validation
        fizz: Marker for multiples of 3
        buzz: Marker for multiples of 5

    Returns:
        Labels in order plus a count of each label kind, or an error detail
    """
    try:
        rules = make_rules(fizz=fizz, buzz=buzz)
        result = summarize(bound, rules)
    except InvalidArgumentError as e:
        return ErrorResponse(detail=str(e), error_code="invalid_argument").model_dump()

    return result.model_dump()


if __name__ == "__main__":
    mcp.run()
