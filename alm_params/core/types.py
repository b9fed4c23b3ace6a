"""
ALM Params: Core Type Definitions

This module defines common type aliases shared across the model, store
and script layers. It exists to centralise frequently used type
definitions and avoid circular imports between higher-level modules.

Key responsibilities:
- Provide canonical aliases for curve shock mappings
- Provide aliases for raw JSON documents

External dependencies:
- typing: Standard library typing primitives only

Thread safety: Thread-safe (no mutable global state)

Author: ALM Team
Created: 2026-10-17
Last Modified: 2026-10-17
Status: Development
Version: v0.1.0
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from typing import Any, Dict, List, Mapping, MutableMapping, Sequence, TypeAlias

# ============================================================================
# Type Aliases
# ============================================================================

# Raw JSON object as read from or written to the parameter document
RawDocument: TypeAlias = Dict[str, Any]

# Curve identifier -> per-year shocks in basis points
CurveShocks: TypeAlias = Dict[str, List[int]]

# Read-only view of curve shocks (for functions that should not mutate)
ReadonlyCurveShocks: TypeAlias = Mapping[str, Sequence[int]]

# Curve shocks in the legacy growable format, mutated in place
LegacyCurveShocks: TypeAlias = MutableMapping[str, List[int]]
