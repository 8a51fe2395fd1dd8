import argparse
import logging

from dateutil.parser import isoparse

import relativedatetime
from relativedatetime import RelativeDateTimeError


def entrance(argv=None):
    relativedatetime_argparse = argparse.ArgumentParser(
        description="Evaluate a relative date-time literal such as '-1d 8H 30m 0s'."
    )
    relativedatetime_argparse.add_argument(
        "literal",
        type=str,
        help="The literal to evaluate, e.g. '+1y' or '-1d @ 8H 30m 0s'",
    )
    relativedatetime_argparse.add_argument(
        "--reference",
        type=str,
        help="ISO 8601 datetime to evaluate against (defaults to now)",
    )
    relativedatetime_argparse.add_argument(
        "--normalize",
        help="Print the canonical form of the literal instead of evaluating it",
        action="store_true",
    )
    relativedatetime_argparse.add_argument(
        "--aware",
        help="Read the current time in the local timezone",
        action="store_true",
    )
    relativedatetime_argparse.add_argument(
        "-v",
        "--verbose",
        help="Log each evaluation step",
        action="store_true",
    )

    args = relativedatetime_argparse.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    reference = None
    if args.reference:
        try:
            reference = isoparse(args.reference)
        except ValueError as e:
            relativedatetime_argparse.error(
                "relativedatetime-eval: invalid --reference %r (%s)" % (args.reference, e)
            )

    try:
        expression = relativedatetime.parse(args.literal)
        if args.normalize:
            print(expression)
            return

        result = relativedatetime.evaluate(
            expression,
            reference,
            settings={"RETURN_AS_TIMEZONE_AWARE": args.aware},
        )
    except RelativeDateTimeError as e:
        relativedatetime_argparse.error("relativedatetime-eval: %s" % e)

    logging.info("relativedatetime-eval: evaluated %r as %s", str(expression), result.isoformat())
    print(result.isoformat())
