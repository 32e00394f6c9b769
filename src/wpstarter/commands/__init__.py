"""Command implementations behind the ``wpstarter`` CLI."""
