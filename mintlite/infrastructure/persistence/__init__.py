"""SQLAlchemy persistence layer (database, models, repositories)."""
