"""Public exports for the script domain services."""

from .exceptions import InvalidScriptStateError, ScriptError, ScriptNotFoundError
from .models import Script, ScriptInput, ScriptState
from .queries import ScriptQueryService
from .service import ScriptService

__all__ = [
    "InvalidScriptStateError",
    "Script",
    "ScriptError",
    "ScriptInput",
    "ScriptNotFoundError",
    "ScriptQueryService",
    "ScriptService",
    "ScriptState",
]
