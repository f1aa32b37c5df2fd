"""Admin authorisation."""

ADMINS = (
    "5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi",
    "DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX",
)


def assert_eq_admin(admin: str, local: bool = False) -> bool:
    """Whether ``admin`` may perform admin actions; every key is allowed when ``local``."""
    if local:
        return True
    return any(admin == known for known in ADMINS)