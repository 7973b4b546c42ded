"""
Local Library catalog package.

Key Components:
- models: Pydantic records returned by the repositories
- database: SQLAlchemy schema, sessions and repositories
- pages: the author list and book detail handlers
- app: FastAPI application serving the pages over HTTP
- resources: the same pages as MCP resources
- config: settings with pydantic-settings
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
