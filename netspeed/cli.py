import sys

import click

from netspeed import counters, selector
from netspeed.sampler import NetworkSpeedSampler
from netspeed.util import log, output, system

context_settings = dict(help_option_names=["-h", "--help"])
logger_name = "netspeed"
logfile_name = "waybar-network-speed.log"


class NetworkSpeedCommand(click.Command):
    """
    Usage errors exit with status 1 rather than click's default of 2.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def parse_interval(value: str) -> int | None:
    try:
        interval = int(value)
    except ValueError:
        return None
    return interval if interval >= 1 else None


@click.command(
    cls=NetworkSpeedCommand,
    name="network-speed",
    help="Report aggregate network throughput from /proc/net/dev for waybar",
    context_settings=context_settings,
)
@click.option(
    "-t",
    "--interval",
    "interval_raw",
    metavar="POLLING_INTERVAL",
    default="1",
    show_default=True,
    help="The update interval (in seconds)",
)
@click.option(
    "--once",
    default=False,
    is_flag=True,
    help="Sample a single interval, print the output and exit",
)
@click.option("-d", "--debug", default=False, is_flag=True, help="Enable debug logging")
@click.option(
    "--stats-file",
    envvar="NETSPEED_STATS_FILE",
    default=counters.PROC_NET_DEV,
    hidden=True,
)
@click.option(
    "--sysfs-root",
    envvar="NETSPEED_SYSFS_ROOT",
    default=system.SYSFS_NET,
    hidden=True,
)
@click.argument("interfaces", metavar="[INTERFACE]...", nargs=-1)
def main(
    interval_raw: str,
    once: bool,
    debug: bool,
    stats_file: str,
    sysfs_root: str,
    interfaces: tuple[str, ...],
):
    cache_dir = system.get_cache_directory()
    logger = log.configure(
        debug=debug,
        name=logger_name,
        logfile=cache_dir / logfile_name if cache_dir else None,
    )
    logger.info("entering")

    interval = parse_interval(interval_raw)
    if interval is None:
        output.emit_error(label=interval_raw, detail="Invalid polling interval")
        sys.exit(1)

    allow_list: tuple[str, ...] | None = None
    if interfaces:
        missing = selector.validate_interfaces(names=interfaces, sysfs_root=sysfs_root)
        if missing is not None:
            output.emit_error(label=missing, detail="Interface does not exist")
            sys.exit(1)
        allow_list = interfaces

    sampler = NetworkSpeedSampler(
        selector=selector.InterfaceSelector(allow_list=allow_list),
        interval=interval,
        stats_file=stats_file,
    )
    logger.debug(f"using {sampler.selector!r}")

    if not sampler.start():
        sys.exit(1)

    if once:
        if sampler.run(max_ticks=1) == 0:
            sys.exit(1)
        return

    sampler.run()


if __name__ == "__main__":
    main()
