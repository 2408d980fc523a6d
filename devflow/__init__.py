"""
DevFlow - Terminal dashboard for local development projects.

Architecture:
- providers/project_provider: Data access layer (protocol + filesystem implementation)
- navigation: State machine driven by keys, resizes and scan results
- render: Pure state-to-text renderers
- views/: Textual screen/widget components
- app.py: Main application entry point

Extensibility points:
1. New tabs: Add to navigation.Tab, give them a panel in views/
2. New data sources: Implement the ProjectProvider protocol
3. New project types: Extend project_provider.MARKERS
"""

__version__ = "0.1.0"
