"""Allow ``python -m humanparse``."""

from humanparse.cli import cli

cli()
