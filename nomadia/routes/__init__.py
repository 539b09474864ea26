# nomadia/routes/__init__.py
"""HTTP and Socket.IO surfaces for the route planner."""
