# loancalc/inputs/inputs.py
"""
Inputs loader for loancalc runs.

Goals
-----
- Deterministic, file-first inputs parsed with Pydantic.
- Accepts bare LoanTerms JSON as well as a structured shape with run options.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Legacy (root = LoanTerms)
   { "home_price": 300000, "down_payment_value": 10, "interest_rate": 6.0, ... }

2) Structured mortgage (root = AppInputs)
   {
     "terms": { ... LoanTerms ... },
     "run": { "out": "amortization_report.md", "schedule": "yearly", "start_date": "2025-01-01" }
   }

3) Structured plain loan
   { "loan": { ... LoanInputs ... }, "run": { ... } }

Environment overrides (optional)
--------------------------------
- LOANCALC_OUT        -> AppInputs.run.out
- LOANCALC_SCHEDULE   -> AppInputs.run.schedule ("yearly" | "full" | "none")
- LOANCALC_START_DATE -> AppInputs.run.start_date (ISO date)

Notes
-----
- Parsing only checks shapes and types. Range rules (rate caps, term limits) belong
  to the validation layer so they can be reported all together.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import BaseModel, Field, ValidationError, model_validator

from loancalc.schemas.models import LoanInputs, LoanTerms

ScheduleView = Literal["yearly", "full", "none"]
_SCHEDULE_VIEWS = ("yearly", "full", "none")

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class RunOptions(BaseModel):
    """Runtime (non-financial) options controlling report output."""

    out: str = Field("amortization_report.md", description="Path to write the Markdown report.")
    schedule: ScheduleView = Field("yearly", description="Schedule detail in the report.")
    start_date: date | None = Field(None, description="First payment date; enables the payoff date line.")


class AppInputs(BaseModel):
    """
    Full input payload: exactly one of `terms` (mortgage) or `loan` (plain loan),
    plus run options.
    """

    terms: LoanTerms | None = None
    loan: LoanInputs | None = None
    run: RunOptions = RunOptions()

    @model_validator(mode="after")
    def _one_kind(self) -> AppInputs:
        if (self.terms is None) == (self.loan is None):
            raise ValueError('Provide exactly one of "terms" or "loan"')
        return self


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Default search (when path=None):
        1) ./data/sample/loan.json
        2) ./config.json
    """

    env_prefix: str = "LOANCALC_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> AppInputs:
        """Load inputs from a JSON file, or from the default search order when path is None."""
        p = self._resolve_path(path)
        raw = self._read_json_file(p)
        return self._apply_env_overrides(self._parse_root(self._maybe_wrap_legacy(raw)))

    def load_json(self, text: str) -> AppInputs:
        """Load inputs from a JSON string (any supported shape)."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Inputs JSON must be an object")
        return self._apply_env_overrides(self._parse_root(self._maybe_wrap_legacy(raw)))

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        out: str | None = None,
        schedule: str | None = None,
        start_date: date | None = None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied to RunOptions.
        Does not mutate the original instance.
        """
        updates: dict[str, Any] = {}
        if out is not None:
            updates["out"] = out
        if schedule is not None:
            if schedule not in _SCHEDULE_VIEWS:
                raise ValueError(f"schedule must be one of {', '.join(_SCHEDULE_VIEWS)}")
            updates["schedule"] = schedule
        if start_date is not None:
            updates["start_date"] = start_date

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Inputs file not found: {p}")
            return p

        for candidate in (Path("data/sample/loan.json"), Path("config.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError(
            "No inputs path provided and no default inputs found. Looked for ./data/sample/loan.json and ./config.json."
        )

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Inputs JSON in {p} must be an object")
        return cast(dict[str, Any], data)

    def _maybe_wrap_legacy(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Bare LoanTerms at the root become {"terms": ...}."""
        if "terms" in raw or "loan" in raw:
            return raw
        return {"terms": raw}

    def _parse_root(self, data: dict[str, Any]) -> AppInputs:
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Inputs validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        out = os.getenv(f"{prefix}OUT")
        if out:
            updates["out"] = out

        schedule = os.getenv(f"{prefix}SCHEDULE")
        if schedule:
            normalized = schedule.strip().lower()
            if normalized in _SCHEDULE_VIEWS:
                updates["schedule"] = normalized

        start = os.getenv(f"{prefix}START_DATE")
        if start:
            try:
                updates["start_date"] = date.fromisoformat(start.strip())
            except ValueError:
                # Ignore bad value; keep validated cfg.start_date
                pass

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path | None = None) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
