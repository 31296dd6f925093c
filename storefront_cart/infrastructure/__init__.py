"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Storage backends (memory, JSON files, SQLAlchemy)
- Notification services
- Configuration management
- Logging infrastructure
"""
