"""Allow ``python -m pwagen``."""
from .cli import main

main()
