import json
import logging
from pathlib import Path

import click

from whackerlink_reporter import __version__
from whackerlink_reporter.config import get_reporter_config
from whackerlink_reporter.constants import DEFAULT_CONFIG_FILE
from whackerlink_reporter.errors import ReporterError
from whackerlink_reporter.models import PacketType, ResponseType
from whackerlink_reporter.reporter import Reporter

LOG = logging.getLogger(__name__)

CLI_MAIN_INTRODUCTION = "Send radio-network event reports to an HTTP collector."
CLI_DEBUG_HELP = "Enable debug logging."
CLI_CONFIG_PATH_HELP = "Application config.ini holding a [reporter] section."
CLI_ADDRESS_HELP = "Collector address, overrides the config file."
CLI_PORT_HELP = "Collector port, overrides the config file."
CLI_CONFIG_HELP = "Print the resolved reporter configuration as JSON."
CLI_SEND_TEST_HELP = (
    "Send one event report to the collector and wait for delivery. "
    "The reporter is enabled for this command regardless of the config file."
)


def configure_logger(ctx, param, debug):
    level = logging.WARNING

    if debug:
        level = logging.DEBUG

    logging.basicConfig(format="%(asctime)s %(name)s => %(message)s", level=level)


def reporter_options(func):
    func = click.option("--port", type=int, default=None, help=CLI_PORT_HELP)(func)
    func = click.option("--address", default=None, help=CLI_ADDRESS_HELP)(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=CLI_CONFIG_PATH_HELP,
    )(func)

    return func


def _resolve_config(config_path, address, port, enabled=None):
    try:
        return get_reporter_config(
            address=address,
            port=port,
            enabled=enabled,
            config_path=config_path or DEFAULT_CONFIG_FILE,
        )
    except ValueError as e:
        raise click.ClickException(str(e))


@click.group(help=CLI_MAIN_INTRODUCTION)
@click.option(
    "--debug",
    is_flag=True,
    help=CLI_DEBUG_HELP,
    callback=configure_logger,
    expose_value=False,
    is_eager=True,
)
@click.version_option(version=__version__)
def cli():
    pass


@cli.command(name="config", help=CLI_CONFIG_HELP)
@reporter_options
def show_config(config_path, address, port):
    config = _resolve_config(config_path, address, port)
    click.echo(json.dumps(config.as_dict(), indent=2))


@cli.command(name="send-test", help=CLI_SEND_TEST_HELP)
@reporter_options
@click.option(
    "--packet-type",
    type=click.Choice([t.value for t in PacketType]),
    default=PacketType.U_REG_REQ.value,
    show_default=True,
)
@click.option(
    "--response-type",
    type=click.Choice([t.value for t in ResponseType]),
    default=ResponseType.UNKNOWN.value,
    show_default=True,
)
@click.option("--src-id", default="1", show_default=True)
@click.option("--dst-id", default="1", show_default=True)
@click.option("--site", "site_name", default=None, help="Site name to attach.")
@click.option("--extra", default="test", show_default=True)
def send_test(
    config_path, address, port, packet_type, response_type, src_id, dst_id,
    site_name, extra
):
    config = _resolve_config(config_path, address, port, enabled=True)
    site = {"Name": site_name} if site_name else None

    try:
        reporter = Reporter.from_config(config)
    except ReporterError as e:
        raise click.ClickException(e.message)

    with reporter:
        reporter.send(
            PacketType(packet_type),
            src_id,
            dst_id,
            site,
            extra,
            response_type=ResponseType(response_type),
        )

    LOG.debug("Test report dispatched to %s", config.base_url)
    click.echo(f"Report dispatched to {config.base_url}")
