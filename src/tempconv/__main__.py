"""Allow ``python -m tempconv``."""

from tempconv.cli import main

main()
