from .documentation import build_documentation_supervisor, supervisor_tools

__all__ = ["build_documentation_supervisor", "supervisor_tools"]
