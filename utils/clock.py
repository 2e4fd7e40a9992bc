from datetime import date, datetime


def today():
    """Current calendar date. Tests monkeypatch this to move time forward."""
    return date.today()


def now():
    return datetime.utcnow()
