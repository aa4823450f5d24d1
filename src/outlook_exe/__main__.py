"""Entry point for ``python -m outlook_exe``."""

from outlook_exe.cli.app import app


def main() -> None:
    """Run the outlook-exe command line."""
    app(prog_name="outlook-exe")


if __name__ == "__main__":
    main()
