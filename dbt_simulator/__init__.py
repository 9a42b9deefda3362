"""
dbt-simulator: a warehouse-free emulation of the dbt command line.

Architecture:
    VFS (path -> text) → Ingestion (models, tests, macros) → Rendering / Graph
    → Interpreter (shell + dbt commands) → CommandResult

Layers:
    - vfs: in-memory file system and path resolution
    - ingestion/: heuristic parsing of models and schema files
    - rendering/: Jinja evaluation with a simulated dbt context
    - graph, selector: build order and --select matching
    - interpreter/: command parsing, execution and the session busy gate

Key Concepts:
    - Nothing is executed; run and test only report what would happen
    - Commands never mutate state; they return a new VFS and directory
    - Every failure at the interpreter boundary is a result, not an exception
"""

__version__ = "0.1.0"
