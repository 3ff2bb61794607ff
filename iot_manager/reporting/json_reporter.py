"""JSON output for scenario manager commands.

Formats command results in the flow JSON output standard:
{
    "success": bool,
    "command": str,
    "data": { ... } | null,
    "message": str
}
"""

import json
from typing import Any, Optional


class JsonReporter:
    """Generates flow-compatible JSON output from command results."""

    def generate_flow_output(
        self,
        command: str,
        success: bool,
        message: str,
        data: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Build the flow JSON envelope.

        Args:
            command: Name of the command that ran.
            success: Whether the command succeeded.
            message: Human-readable outcome, shown verbatim to the user.
            data: Command-specific payload. Empty payloads become null.

        Returns:
            Flow-compatible output dictionary.
        """
        return {
            "success": success,
            "command": command,
            "data": data or None,
            "message": message,
        }

    def to_json_string(self, output: dict[str, Any], pretty: bool = False) -> str:
        """Convert output to a JSON string.

        Args:
            output: Output dictionary.
            pretty: If True, format with indentation.

        Returns:
            JSON string.
        """
        if pretty:
            return json.dumps(output, indent=2, ensure_ascii=False)
        return json.dumps(output, ensure_ascii=False)
