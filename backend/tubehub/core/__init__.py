"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (new_identifier is the one exception)

Design Decisions:
    - Functional core separated from imperative shell: handlers feed storage
      results into core functions and apply the returned decision
"""
