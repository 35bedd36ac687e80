"""
Argument validation derived from tool input schemas.

Only presence and primitive type of required fields are checked. Enum
membership, ranges and cross-field rules are left to the Todoist API.
"""
from typing import Any, Callable, Dict, Mapping
import copy

from todoist_mcp.mcp_server.base_tool import INVALID_ARGUMENTS, MCPToolError

TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    "string": lambda v: isinstance(v, str),
    "number": lambda v: isinstance(v, (int, float)) and not isinstance(v, bool),
}

TYPE_NAMES = {"string": "a string", "number": "a number"}


def required_fields(input_schema: Mapping[str, Any]) -> list:
    return list(input_schema.get("required", []))


def validate_arguments(tool_name: str, input_schema: Mapping[str, Any], arguments: Any) -> Dict[str, Any]:
    """
    Check arguments against a tool's required-field contract

    Args:
        tool_name: Tool being invoked (used in error messages)
        input_schema: The tool's JSON input schema
        arguments: Untyped arguments from the caller

    Returns:
        A copy of the arguments with schema defaults filled in

    Raises:
        MCPToolError: INVALID_ARGUMENTS if the structure does not match
    """
    if not isinstance(arguments, Mapping):
        raise MCPToolError(
            code=INVALID_ARGUMENTS,
            message=f"Invalid arguments for {tool_name}: expected an object",
            details={"tool": tool_name}
        )

    properties = input_schema.get("properties", {})

    for field in required_fields(input_schema):
        if field not in arguments:
            raise MCPToolError(
                code=INVALID_ARGUMENTS,
                message=f"Invalid arguments for {tool_name}: missing required field '{field}'",
                details={"tool": tool_name, "field": field}
            )

        declared = properties.get(field, {}).get("type")
        check = TYPE_CHECKS.get(declared)
        if check is not None and not check(arguments[field]):
            raise MCPToolError(
                code=INVALID_ARGUMENTS,
                message=f"Invalid arguments for {tool_name}: field '{field}' must be {TYPE_NAMES[declared]}",
                details={"tool": tool_name, "field": field}
            )

    validated = dict(arguments)
    for field, spec in properties.items():
        if field not in validated and "default" in spec:
            validated[field] = copy.deepcopy(spec["default"])

    return validated
