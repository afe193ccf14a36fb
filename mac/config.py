# -*- coding: utf-8 -*-
# Wingmac/mac/config.py

"""
Project: Wingmac
Date: 10/16/2026

Purpose:
--------
Numerical policy for the MAC pipeline: defaults plus right-biased overrides.

Schema:
-------
{
  "sampling":    {"bezier_subdivisions": int >= 1},
  "integration": {"n_steps": int >= 1},
  "profile":     {"endpoint_tol": float >= 0}
}
"""

from typing import Any, Dict, Optional
import copy

from .errors import InputError

__all__ = ["DEFAULTS", "resolve_config"]


DEFAULTS: Dict[str, Any] = {
    "sampling": {
        "bezier_subdivisions": 10,   # 11 evaluations per Bezier piece
    },
    "integration": {
        "n_steps": 1000,
    },
    "profile": {
        "endpoint_tol": 1e-9,
    },
}


def _deep_merge(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two nested dicts (right-biased), preserving types and not mutating inputs.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _int_at_least(section: str, key: str, value: Any, lo: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < lo:
        raise InputError(
            "config['{}']['{}'] must be an integer >= {}".format(section, key, lo),
            {"value": value},
        )
    return value


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge `config` over DEFAULTS and validate the numeric knobs.

    Raises
    ------
    InputError
        If a section is not a dict or a value is out of range.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    for section in DEFAULTS:
        if not isinstance(cfg.get(section), dict):
            raise InputError("config['{}'] must be a dict".format(section), {"value": cfg.get(section)})

    _int_at_least("sampling", "bezier_subdivisions", cfg["sampling"]["bezier_subdivisions"], 1)
    _int_at_least("integration", "n_steps", cfg["integration"]["n_steps"], 1)

    tol = cfg["profile"]["endpoint_tol"]
    try:
        tol = float(tol)
    except (TypeError, ValueError):
        raise InputError("config['profile']['endpoint_tol'] must be a number", {"value": tol})
    if not tol >= 0.0:
        raise InputError("config['profile']['endpoint_tol'] must be >= 0", {"value": tol})
    cfg["profile"]["endpoint_tol"] = tol
    return cfg
