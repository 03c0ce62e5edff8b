import logging
import sys
from argparse import ArgumentParser

from . import __version__
from .thermocouple.thermocouple import OUT_OF_RANGE, ThermocoupleType, get_thermocouple

__all__ = ["main"]


def main(args=None):
    parser = ArgumentParser(
        description="Convert a thermocouple voltage into degrees Celcius"
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    parser.add_argument(
        "-l",
        "--log",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level",
        default="WARNING",
    )
    parser.add_argument(
        "--single",
        action="store_true",
        help="Do the conversion through the single precision entry point",
    )
    parser.add_argument(
        "type",
        type=str.upper,
        choices=[t.name for t in ThermocoupleType],
        help="Thermocouple type",
    )
    parser.add_argument("millivolts", type=float, help="Measured voltage in mV")
    parser.add_argument(
        "cold_junction",
        type=float,
        nargs="?",
        default=0.0,
        help="Cold junction temperature in degrees Celcius (default: %(default)s)",
    )
    args = parser.parse_args(args)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s:%(levelname)s:%(name)s:%(message)s",
        datefmt="%m-%d %H:%M:%S",
    )

    thermocouple = get_thermocouple(args.type)
    logging.debug(
        f"Converting {args.millivolts} mV with cold junction at "
        f"{args.cold_junction} degC for {thermocouple}"
    )

    if args.single:
        temperature = float(
            thermocouple.get_temperature_f32(args.millivolts, args.cold_junction)
        )
    else:
        temperature = thermocouple.get_temperature(args.millivolts, args.cold_junction)

    if temperature == OUT_OF_RANGE:
        logging.error(
            f"{args.millivolts} mV with cold junction at {args.cold_junction} degC "
            f"is outside the calibrated range of a type {thermocouple.name} "
            f"thermocouple ({thermocouple.low} to {thermocouple.high} mV)"
        )
        sys.exit(1)

    print(temperature)


# test with: python -m thermocouple_convert
if __name__ == "__main__":
    main()
