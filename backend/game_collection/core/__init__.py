"""Core Layer - pure collection logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Filter compilation, record ordering and stat shaping are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell talks to the
      store, the core decides what to ask and how to shape the answer
"""
