import argparse
import sys

from environs import Env

from unitmath.domain.angle import Deg, Degd, Rad, Radd
from unitmath.domain.bool_vector import bool_vector_type
from unitmath.domain.exceptions import UnitMathException
from unitmath.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

ANGLE_TYPES = {
    ("deg", False): Deg,
    ("rad", False): Rad,
    ("deg", True): Degd,
    ("rad", True): Radd,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Angle unit conversion and bool vector inspection"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert an angle between units")
    convert.add_argument("value", type=float, help="Angle value")
    convert.add_argument(
        "--from",
        dest="from_unit",
        choices=["deg", "rad"],
        default="deg",
        help="Unit of the input value",
    )
    convert.add_argument(
        "--to",
        dest="to_unit",
        choices=["deg", "rad"],
        default="rad",
        help="Unit to convert to",
    )
    convert.add_argument(
        "--double",
        action="store_true",
        help="Use double precision instead of float",
    )

    bits = subparsers.add_parser("bits", help="Build a bool vector and show it")
    bits.add_argument("size", type=int, help="Number of bits")
    bits.add_argument(
        "--set",
        dest="indices",
        type=int,
        action="append",
        default=[],
        metavar="I",
        help="Set bit I (repeatable)",
    )
    bits.add_argument(
        "--invert",
        action="store_true",
        help="Complement the vector after setting bits",
    )
    return parser


def run_convert(args: argparse.Namespace) -> None:
    source = ANGLE_TYPES[args.from_unit, args.double](args.value)
    result = ANGLE_TYPES[args.to_unit, args.double](source)
    logger.debug(f"Converted {source!r} to {result!r}")
    print(f"{source!r} -> {result!r}")


def run_bits(args: argparse.Namespace) -> None:
    vector = bool_vector_type(args.size)()
    for index in args.indices:
        vector[index] = True
    if args.invert:
        vector = ~vector
    print(repr(vector))
    print(f"all={vector.all()} any={vector.any()} none={vector.none()}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load environment variables before logging is configured
    env = Env()
    env.read_env(".env")
    setup_logging(env)

    try:
        if args.command == "convert":
            run_convert(args)
        else:
            run_bits(args)
    except (ValueError, TypeError, UnitMathException) as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
