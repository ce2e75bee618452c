import sys
from argparse import ArgumentParser, Namespace, RawTextHelpFormatter
from typing import Optional, Sequence

from cryptoquantity.domain.exceptions import DomainException
from cryptoquantity.shared.config import get_settings
from cryptoquantity.shared.di import Container, get_container
from cryptoquantity.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def setup_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        description="Crypto Quantity Toolkit Entrypoint",
        formatter_class=RawTextHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    to_value_parser = subparsers.add_parser(
        "to-value",
        aliases=["satoshis-to-value"],
        help="Print the decimal value of a smallest-unit amount.",
    )
    to_value_parser.add_argument("value", help="Amount in the smallest unit, e.g. 12345000")
    to_value_parser.add_argument("--precision", type=int, default=None)
    to_value_parser.set_defaults(func=run_to_value)

    to_smallest_parser = subparsers.add_parser(
        "to-smallest-unit",
        aliases=["value-to-satoshis"],
        help="Print the smallest-unit amount of a decimal value (lossy float input).",
    )
    to_smallest_parser.add_argument("value", type=float, help="Decimal value, e.g. 0.12345")
    to_smallest_parser.add_argument("--precision", type=int, default=None)
    to_smallest_parser.set_defaults(func=run_to_smallest_unit)

    convert_parser = subparsers.add_parser(
        "convert", help="Re-express a smallest-unit amount at another precision."
    )
    convert_parser.add_argument("value", help="Amount in the smallest unit of --from")
    convert_parser.add_argument("--from", dest="source_precision", type=int, required=True)
    convert_parser.add_argument("--to", dest="target_precision", type=int, required=True)
    convert_parser.set_defaults(func=run_convert)

    decode_parser = subparsers.add_parser(
        "decode", help="Print the decimal value of a serialized quantity."
    )
    decode_parser.add_argument("data", help='JSON text, e.g. {"value": "12345", "precision": 8}')
    decode_parser.set_defaults(func=run_decode)

    return parser


def run_to_value(args: Namespace, container: Container) -> str:
    quantity = container.quantity_factory().create(args.value, args.precision)

    return repr(quantity.get_float_value())


def run_to_smallest_unit(args: Namespace, container: Container) -> str:
    quantity = container.quantity_factory().from_float(args.value, args.precision)

    return quantity.get_smallest_unit_string()


def run_convert(args: Namespace, container: Container) -> str:
    factory = container.quantity_factory()

    source = factory.create(args.value, args.source_precision)
    converted = factory.from_quantity(source, args.target_precision)

    return converted.get_smallest_unit_string()


def run_decode(args: Namespace, container: Container) -> str:
    quantity = container.quantity_codec().decode(args.data)

    return repr(quantity.get_float_value())


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = get_settings()

    configure_logging(
        log_level=settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
        logger_levels=settings.LOGGER_LEVELS,
    )

    parser = setup_arg_parser()
    args = parser.parse_args(argv)

    logger.debug("command_starting", command=args.command)

    try:
        output = args.func(args, get_container())
    except DomainException as e:
        logger.error("command_failed", command=args.command, error=str(e))
        return 1

    print(output)

    logger.debug("command_completed", command=args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
