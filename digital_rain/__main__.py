"""Allow ``python -m digital_rain``."""

from .runner import main

main()
