from billed.cli.app import run
from billed.logging import configure_logging


def main() -> None:
    configure_logging()
    run()


if __name__ == "__main__":
    main()
