import json
import logging

import click

from pathfolio.analysis.simulation import end_prices, make_rng, run_simulation
from pathfolio.analysis.trades import InvalidTradeError, record_buy, record_sell
from pathfolio.analysis.valuation import calculate_profit, project_holding
from pathfolio.config import Settings
from pathfolio.logging_config import setup_logging
from pathfolio.schemas import InvalidParameterError

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Pathfolio - Monte Carlo price paths and holding P/L"""
    settings = Settings()
    setup_logging(settings.log_dir)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    ctx.obj = settings


@cli.command()
@click.option("--price", "-p", type=float, required=True, help="Current (start) price")
@click.option("--volatility", "-s", type=float, required=True,
              help="Annualised volatility, e.g. 0.30 for 30%")
@click.option("--days", "-d", type=int, default=None,
              help="Trading days to simulate (default: PF_SIMULATION_DAYS)")
@click.option("--paths", "-n", type=int, default=None,
              help="Number of paths (default: PF_SIMULATION_NUM_PATHS)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible runs")
@click.option("--ticker", "-t", type=str, default=None,
              help="Ticker used to derive a stable seed when --seed is not given")
@click.option("--avg-cost", type=float, default=None, help="Holding average cost to project")
@click.option("--shares", type=float, default=None, help="Holding share count to project")
@click.option("--json", "as_json", is_flag=True, help="Print full result as JSON")
@click.pass_obj
def simulate(settings: Settings, price: float, volatility: float, days: int | None,
             paths: int | None, seed: int | None, ticker: str | None,
             avg_cost: float | None, shares: float | None, as_json: bool):
    """Simulate future price paths with geometric Brownian motion."""
    rng = make_rng(seed if seed is not None else settings.simulation_seed, ticker)
    request = {
        "start_price": price,
        "volatility": volatility,
        "horizon_days": days if days is not None else settings.simulation_days,
        "path_count": paths if paths is not None else settings.simulation_num_paths,
    }
    try:
        result = run_simulation(request, rng=rng)
    except InvalidParameterError as e:
        raise click.ClickException(str(e)) from e

    projection = None
    if avg_cost is not None and shares is not None:
        projection = project_holding(end_prices(result["paths"]), avg_cost, shares)

    if as_json:
        click.echo(json.dumps({**result, "projection": projection}))
        return

    summary = result["summary"]
    req = result["request"]
    click.echo(f"Simulated {req['path_count']} paths over {req['horizon_days']} trading days")
    if summary is None:
        click.echo("  No paths generated.")
        return

    click.echo(f"  Average end price: {summary['avg_end_price']:.2f} "
               f"({summary['expected_return_pct']:+.2f}%)")
    click.echo(f"  5% / 50% / 95%:   {summary['p5']:.2f} / {summary['p50']:.2f} / {summary['p95']:.2f}")
    click.echo(f"  Upside probability: {summary['upside_prob']:.1%}")
    if projection is not None:
        click.echo(f"  Projected P/L: mean {projection['mean_profit']:+.2f} "
                   f"({projection['mean_profit_percent']:+.2f}%), "
                   f"profit probability {projection['prob_profit']:.1%}")


@cli.command()
@click.argument("current_price", type=float)
@click.argument("avg_cost", type=float)
@click.argument("shares", type=float)
def profit(current_price: float, avg_cost: float, shares: float):
    """Show market value and P/L of a holding."""
    result = calculate_profit(current_price, avg_cost, shares)
    click.echo(f"Market value: {result['market_value']:.2f}")
    click.echo(f"Profit:       {result['profit']:+.2f} ({result['profit_percent']:+.2f}%)")


@cli.command()
@click.argument("symbol")
@click.argument("shares", type=float)
@click.argument("price", type=float)
@click.option("--fee", type=float, default=None, help="Broker fee (default: estimated from PF_FEE_RATE)")
@click.pass_obj
def buy(settings: Settings, symbol: str, shares: float, price: float, fee: float | None):
    """Show the cost basis created by a buy."""
    try:
        result = record_buy(symbol, shares, price, fee=fee, fee_rate_pct=settings.fee_rate)
    except InvalidTradeError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{result['symbol']}: {result['shares']:g} shares @ {price:.2f} (fee {result['fee']:.2f})")
    click.echo(f"  Total cost: {result['total_cost']:.2f}")
    click.echo(f"  Avg cost:   {result['avg_cost']:.4f}")


@cli.command()
@click.argument("shares", type=float)
@click.argument("price", type=float)
@click.option("--avg-cost", type=float, required=True, help="Average cost of the holding")
@click.option("--held", type=float, required=True, help="Shares currently held")
@click.option("--symbol", type=str, default=None, help="Holding symbol")
@click.option("--fee", type=float, default=None, help="Broker fee (default: estimated from PF_FEE_RATE)")
@click.pass_obj
def sell(settings: Settings, shares: float, price: float, avg_cost: float, held: float,
         symbol: str | None, fee: float | None):
    """Show the realized P/L of a sell."""
    holding = {"symbol": symbol, "shares": held, "avg_cost": avg_cost}
    try:
        result = record_sell(holding, shares, price, fee=fee, fee_rate_pct=settings.fee_rate)
    except InvalidTradeError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Sold {result['shares']:g} shares @ {price:.2f} (fee {result['fee']:.2f})")
    click.echo(f"  Revenue:     {result['revenue']:.2f}")
    click.echo(f"  Realized PL: {result['realized_pl']:+.2f} ({result['return_rate']:+.2f}%)")
    click.echo(f"  Remaining:   {result['remaining_shares']:g}")


if __name__ == "__main__":
    cli()
