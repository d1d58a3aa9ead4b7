"""
Diagram planner service.

Turns a topic into a planned, validated and deterministically rendered
board diagram (flowchart, Kanban, retrospective, SWOT).
"""

__version__ = "0.1.0"
