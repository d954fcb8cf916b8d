"""Entry point for datemask."""

from datemask.app import DateMaskApp
from datemask.config import parse_args, resolve_settings


def main() -> None:
    """Run the datemask demo application."""
    args = parse_args()
    settings = resolve_settings(args)
    app = DateMaskApp(settings=settings)
    app.run()


if __name__ == "__main__":
    main()
