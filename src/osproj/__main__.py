"""Allow ``python -m osproj``."""

from osproj.cli import main

main()
