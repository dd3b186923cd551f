"""Script domain specific exceptions."""


class ScriptError(Exception):
    """Base class for script domain errors."""


class ScriptNotFoundError(ScriptError):
    """Raised when a script does not exist, was purged, or is hidden from the caller."""

    def __init__(self, script_id: str) -> None:
        super().__init__(f"script not found: {script_id}")
        self.script_id = script_id


class InvalidScriptStateError(ScriptError):
    """Raised when a transition's precondition on the record state is unmet."""
