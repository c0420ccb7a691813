"""Entry point for digit-field."""

import logging

from digit_field.app import DigitFieldApp
from digit_field.config import parse_args, resolve_configuration


def main() -> None:
    """Run the digit-field demo application."""
    args = parse_args()
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    field_config = resolve_configuration(args)
    app = DigitFieldApp(field_config=field_config)
    app.run()


if __name__ == "__main__":
    main()
