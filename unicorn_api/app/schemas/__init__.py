"""
Pydantic schema definitions for API payloads.

Schemas describe the stored record and the create/update payloads and
own the per-field coercion rules, so services only ever see
normalised values.
"""
