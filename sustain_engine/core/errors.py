"""
Domain error taxonomy.

Scoring and weight errors are hard failures: a wrong silent score is worse
than a visible error. Simulation "not computable" is not an error at all;
the simulator returns None for it.
"""
from __future__ import annotations

from typing import Optional


class EngineError(Exception):
    """Base class for all scoring engine errors."""


class ConfigurationError(EngineError):
    """Weight configuration is degenerate (e.g. all weights zero)."""


class ValidationError(EngineError):
    """Malformed weight payload. `fields` lists every offending field."""

    def __init__(self, fields: list[str], errors: Optional[dict[str, str]] = None):
        self.fields = fields
        self.errors = errors or {}
        super().__init__(f"Invalid weight fields: {', '.join(fields)}")


class DataError(EngineError):
    """Supplier record is missing a required numeric metric."""

    def __init__(self, field: str, supplier_id: Optional[str] = None):
        self.field = field
        self.supplier_id = supplier_id
        super().__init__(f"Supplier {supplier_id or '<unknown>'} is missing required metric '{field}'")
