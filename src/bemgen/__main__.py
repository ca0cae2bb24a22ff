"""Allow ``python -m bemgen``."""

from bemgen.cli.main import cli

if __name__ == "__main__":
    cli()
