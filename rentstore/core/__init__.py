"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic given their inputs (clock and
      id generator are passed in, never read from globals)

Design Decisions:
    - Functional core separated from imperative shell: validators, lifecycle
      rules and the query engine are testable without a database
"""
