"""Allow the reporter CLI to be executable through `python -m whackerlink_reporter`."""
from whackerlink_reporter.cli import cli


if __name__ == "__main__":  # pragma: no cover
    cli(prog_name="whackerlink-reporter")
