"""
Interactive people directory.
Run: python -m cadastro (data is kept in pessoas.json in the current directory).
"""
import logging

from cadastro.cli import run
from cadastro.config import Settings


def main() -> None:
    settings = Settings()
    logging.basicConfig(format=settings.log_format, level=settings.log_level)
    raise SystemExit(run(settings))


if __name__ == "__main__":
    main()
