"""
JSON Redactor - MCP Server for Redacting JSON Payloads

A local MCP (Model Context Protocol) server that exposes the JSON redactor
as tools, so AI agents can mask secrets in request/response bodies, audit
records or log payloads before reading or storing them.

Tools:
    - redact_json: Redact a single JSON document
    - redact_json_batch: Redact several JSON documents in one call
    - describe_redaction_policy: Show the active redaction configuration

Configuration comes from JSON_REDACTOR_* environment variables (or a .env
file); see json_redactor.config for the full list.

Safety Constraints:
    - Invalid JSON is never echoed back unless explicitly configured
      (JSON_REDACTOR_ON_PARSE_ERROR=return_input_unchanged)
    - Batch calls are limited to 100 documents
"""

from typing import Any

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from json_redactor import JsonRedactor, load_options_from_env

# Load environment variables from .env file
load_dotenv()

# Initialize MCP server
mcp = FastMCP(
    "json-redactor",
    instructions="MCP Server for masking sensitive values in JSON documents"
)

# Safety constants
MAX_BATCH_SIZE = 100


def get_redactor() -> JsonRedactor:
    """Create and return a JsonRedactor configured from the environment."""
    return JsonRedactor(load_options_from_env())


@mcp.tool()
def redact_json(document: str) -> dict[str, Any]:
    """
    Redact sensitive values in a JSON document.

    Values of configured property names (and of properties selected by
    conditional rules) are replaced with the mask text. Keys, key order and
    array lengths are kept, so the result is still valid JSON.

    Args:
        document: The JSON text to redact.
                  Example: '{"user": "ann", "password": "hunter2"}'

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - redacted: The redacted JSON text (on success)
        - message: The parse error (on error)
        - fallback: What a plain redact() call returns for this input
                    (the mask, or the input unchanged, depending on config)

    Example usage:
        redact_json('{"user": "ann", "password": "hunter2"}')
        # {"status": "success", "redacted": '{"user":"ann","password":"[REDACTED]"}'}
    """
    try:
        redactor = get_redactor()
    except (TypeError, ValueError) as e:
        return {
            "status": "error",
            "message": f"Invalid redactor configuration: {e}"
        }

    result = redactor.try_redact(document)
    if result.success:
        return {
            "status": "success",
            "redacted": result.redacted
        }

    return {
        "status": "error",
        "message": f"Invalid JSON: {result.error}",
        "fallback": redactor.redact(document)
    }


@mcp.tool()
def redact_json_batch(documents: list[str]) -> dict[str, Any]:
    """
    Redact several JSON documents with the same policy.

    Args:
        documents: JSON texts to redact (max 100).

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - count: Number of documents processed
        - failed_count: Number of documents that were not valid JSON
        - results: Redacted texts (or fallbacks) in input order

    Notes:
        - Documents that fail to parse are replaced by the configured
          fallback, never by an exception
    """
    if len(documents) > MAX_BATCH_SIZE:
        return {
            "status": "error",
            "message": f"Too many documents ({len(documents)}); maximum is {MAX_BATCH_SIZE}"
        }

    try:
        redactor = get_redactor()
    except (TypeError, ValueError) as e:
        return {
            "status": "error",
            "message": f"Invalid redactor configuration: {e}"
        }

    results, failed_count = redactor.redact_batch(documents)

    return {
        "status": "success",
        "count": len(results),
        "failed_count": failed_count,
        "results": results
    }


@mcp.tool()
def describe_redaction_policy() -> dict[str, Any]:
    """
    Describe the redaction policy currently configured for this server.

    Useful to check which property names will be masked before sending
    documents to redact_json.

    Returns:
        A dictionary containing:
        - status: "success" or "error"
        - policy: mask, redact_names, conditional_rules, container_policy,
                  on_parse_error, comparison, formatting and profiles
    """
    try:
        options = get_redactor().options
    except (TypeError, ValueError) as e:
        return {
            "status": "error",
            "message": f"Invalid redactor configuration: {e}"
        }

    return {
        "status": "success",
        "policy": {
            "mask": options.mask,
            "redact_names": list(options.redact_names),
            "conditional_rules": [
                {"if": rule.trigger_name, "is": rule.trigger_value, "redact": rule.target_name}
                for rule in options.conditional_rules
            ],
            "container_policy": options.container_policy.value,
            "on_parse_error": options.on_parse_error.value,
            "comparison": options.comparison.value,
            "formatting": options.formatting.value,
            "profiles": list(options.profiles)
        }
    }


if __name__ == "__main__":
    # Run the MCP server using stdio transport
    mcp.run()
