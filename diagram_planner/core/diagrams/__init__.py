"""
Diagram templates module.

Per-type planner prompts, plan validation, deterministic renderers, the
handler registry and the dispatcher that drives plan -> validate -> render.
"""
