"""Custom exception classes.

The geometry engine itself never raises on blueprint content; these are
raised at the validation boundary where raw snapshots become engine input.
"""


class BlueprintEngineError(Exception):
    """Base exception for engine errors."""

    def __init__(self, detail: str, code: str = "BLUEPRINT_ERROR"):
        super().__init__(detail)
        self.detail = detail
        self.code = code


class InvalidBlueprintError(BlueprintEngineError):
    def __init__(self, errors: list[str]):
        self.errors = errors
        detail = f"Blueprint validation failed with {len(errors)} error(s): {'; '.join(errors[:5])}"
        if len(errors) > 5:
            detail += f" ... and {len(errors) - 5} more"
        super().__init__(detail=detail, code="INVALID_BLUEPRINT")
