"""Result store - SQLAlchemy persistence of computed index tables."""
