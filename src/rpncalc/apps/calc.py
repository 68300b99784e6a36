# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

"""rpn-calc -- installed via setuptools' entry_points"""

import logging
import sys

import click

from rpncalc.exceptions.calc_exceptions import EvalError
from rpncalc.parser.expr import evaluate
from rpncalc.parser.tokens import format_number
from rpncalc.utils import conf
from rpncalc.utils._version import version
from rpncalc.utils.log import setup_console_logging

logger = logging.getLogger(__name__)


def calc_line(line):
    """Evaluate one input line and return (ok, output line).

    The caller must skip empty lines.
    """
    try:
        result = evaluate(line)
    except EvalError as err:
        logger.info(f"failed to evaluate {line!r}: {err}")
        return False, f"{conf.error_prefix}{err}"
    return True, f"{conf.result_prefix}{format_number(result)}"


def iter_expressions(lines):
    for line in lines:
        line = line.rstrip("\r\n")
        if line:
            yield line


@click.command()
@click.option(
    "-f",
    "--file",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="read expressions from FILE (default: standard input)",
)
@click.option("-l", "--logfile", type=click.Path(dir_okay=False), help="log to logfile")
@click.option("--loglevel", default=None, help="log level (default: from configuration, WARNING)")
@click.version_option(version, prog_name="rpn-calc")
@click.argument("expressions", nargs=-1)
def main(input_file, logfile, loglevel, expressions):
    """Evaluate arithmetic expressions, one per line.

    Each EXPRESSION given on the command line is evaluated in turn.
    Without arguments lines are read from standard input.
    """
    setup_console_logging(
        level=loglevel or conf.log_level,
        stream=sys.stderr,
        logfile=logfile,
    )

    lines = expressions or input_file

    failed = 0
    for expression in iter_expressions(lines):
        ok, output = calc_line(expression)
        if not ok:
            failed += 1
        click.echo(output)

    if failed:
        logger.debug(f"{failed} expression(s) failed")
        sys.exit(1)
