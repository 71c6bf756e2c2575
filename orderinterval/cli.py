import datetime
import itertools
from dataclasses import dataclass
from typing import Any, Callable

import click

from orderinterval import domain, logger
from orderinterval.interval import Empty, Intersection, Interval, Lower, Upper
from orderinterval.logger import log
from orderinterval.monoid import interval_monoid
from orderinterval.ordering import Ordering
from orderinterval.parser import parse


@dataclass(frozen=True)
class DomainChoice:
    """The domain the command line works in, picked by --domain"""

    name: str
    decode: Callable[[str], Any]
    steps: domain.IntegralDomain | domain.DateDomain

    @property
    def ordering(self) -> Ordering[Any]:
        return self.steps.ordering

    def value(self, string: str) -> Any:
        try:
            return self.decode(string)
        except ValueError as e:
            raise click.BadParameter(f"{string!r} is not a {self.name} value") from e

    def interval(self, expr: str) -> Interval[Any]:
        try:
            return parse(expr, self.decode, self.ordering)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="EXPR") from e


def bounded_int(steps: domain.IntegralDomain) -> Callable[[str], int]:
    def decode(string: str) -> int:
        value = int(string)
        if steps.min_value is not None and value < steps.min_value:
            raise ValueError(f"{value} is below {steps.min_value}")
        if steps.max_value is not None and value > steps.max_value:
            raise ValueError(f"{value} is above {steps.max_value}")
        return value

    return decode


DOMAINS = {
    "int": DomainChoice("int", int, domain.INTEGERS),
    "int32": DomainChoice("int32", bounded_int(domain.INT32), domain.INT32),
    "int64": DomainChoice("int64", bounded_int(domain.INT64), domain.INT64),
    "date": DomainChoice("date", datetime.date.fromisoformat, domain.DATES),
}


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="sets the verbosity of the program, more means more information",
)
@click.option(
    "--domain",
    "domain_name",
    type=click.Choice(sorted(DOMAINS)),
    default="int",
    show_default=True,
    help="the domain the bounds and values live in.",
)
@click.pass_context
def cli(ctx, verbose, domain_name):
    """Evaluate intervals written like [3, 7) or (-inf, 5] & (0, inf)."""
    logger.initialize(verbose)
    log.debug(f"Using the {domain_name} domain")
    ctx.obj = DOMAINS[domain_name]


@cli.command()
@click.argument("expr")
@click.argument("values", nargs=-1, required=True)
@click.pass_obj
def contains(choice: DomainChoice, expr, values):
    """Check which VALUES lie in EXPR"""
    interval = choice.interval(expr)
    for v in values:
        result = interval.contains(choice.value(v), choice.ordering)
        click.echo(f"{v}: {'true' if result else 'false'}")


@cli.command()
@click.argument("exprs", nargs=-1, required=True)
@click.pass_obj
def intersect(choice: DomainChoice, exprs):
    """Intersect all EXPRS"""
    monoid = interval_monoid(choice.ordering)
    result = monoid.sum(choice.interval(e) for e in exprs)
    click.echo(str(result))


@cli.command("enumerate")
@click.argument("expr")
@click.option("--reverse", is_flag=True, help="go from greatest to least.")
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=100,
    show_default=True,
    help="print at most this many values.",
)
@click.pass_obj
def enumerate_values(choice: DomainChoice, expr, reverse, limit):
    """List the values in EXPR in order"""
    interval = choice.interval(expr)
    match interval:
        case Empty():
            values = iter(())
        case Intersection():
            if reverse:
                values = iter(interval.greatest_to_least(choice.steps))
            else:
                values = iter(interval.least_to_greatest(choice.steps))
        case Lower() if not reverse:
            values = iter(interval.to_iterable(choice.steps))
        case Upper() if reverse:
            values = iter(interval.to_iterable(choice.steps))
        case _:
            direction = "downwards" if reverse else "upwards"
            raise click.UsageError(f"{interval} has no end to enumerate {direction} from")

    for v in itertools.islice(values, limit):
        click.echo(str(v))

    if next(values, None) is not None:
        log.info(f"Stopped after {limit} values")


@cli.command()
@click.argument("expr")
@click.pass_obj
def normalize(choice: DomainChoice, expr):
    """Rewrite a bounded EXPR as [least, strict upper bound)"""
    interval = choice.interval(expr)
    if not isinstance(interval, Intersection):
        raise click.UsageError(f"{interval} is not bounded on both sides")
    result = interval.to_left_closed_right_open(choice.steps)
    if result is None:
        click.echo(f"{interval} cannot be written as [a, b)")
    else:
        click.echo(str(result))


if __name__ == "__main__":
    cli()
