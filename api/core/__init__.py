"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that features share (DB wiring,
logging). Keep feature-specific SQL and business logic in the feature
package (e.g. `dinos/`).
"""
