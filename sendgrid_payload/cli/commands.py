"""Command line interface: build a mail send payload and print it."""
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Tuple

import click
from colorama import Fore, Style, init

from sendgrid_payload import __version__
from sendgrid_payload.builder import (
    ContactBuilder,
    Content,
    MailSettingsBuilder,
    MessageBuilder,
    PersonalizationBuilder,
)
from sendgrid_payload.config import AppConfig
from sendgrid_payload.exporter import JsonExporter, SerializationError


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}", err=True)
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}SendGrid Payload Builder{Fore.CYAN}             ║", err=True)
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}", err=True)


def parse_pairs(ctx, param, values: Tuple[str, ...]) -> Dict[str, str]:
    """Parse repeated KEY=VALUE options into a dict."""
    pairs = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        pairs[key] = value
    return pairs


def contact_from_option(value: str):
    """Build a Contact from 'email' or 'Name <email>'."""
    value = value.strip()
    if value.endswith(">") and "<" in value:
        name, _, email = value[:-1].rpartition("<")
        builder = ContactBuilder(email.strip())
        if name.strip():
            builder.name(name.strip())
        return builder.build()
    return ContactBuilder(value).build()


@click.group()
@click.version_option(version=__version__)
def cli():
    """SendGrid Payload Builder - Build v3 mail send request bodies."""
    pass


@cli.command()
@click.option("--from-email", help="Sender address (default: $SENDGRID_FROM_EMAIL)")
@click.option("--from-name", help="Sender display name (default: $SENDGRID_FROM_NAME)")
@click.option("--subject", required=True, help="Message subject")
@click.option("--to", "to_", multiple=True, help="Recipient, 'email' or 'Name <email>'")
@click.option("--cc", multiple=True, help="Cc recipient")
@click.option("--bcc", multiple=True, help="Bcc recipient")
@click.option("--template-id", help="Dynamic template id")
@click.option("--category", multiple=True, help="Category tag")
@click.option("--data", multiple=True, callback=parse_pairs, help="Dynamic template data KEY=VALUE")
@click.option("--text", help="Plain text body")
@click.option("--html", help="HTML body")
@click.option("--sandbox/--no-sandbox", default=None, help="Sandbox mode (default: $SENDGRID_SANDBOX_MODE, on)")
@click.option("--ip-pool", help="IP pool name (default: $SENDGRID_IP_POOL)")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON to this file")
@click.option("--save", help="Write JSON to <output dir>/<SAVE>.json (not with --output)")
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def build(
    from_email: Optional[str],
    from_name: Optional[str],
    subject: str,
    to_: Tuple[str, ...],
    cc: Tuple[str, ...],
    bcc: Tuple[str, ...],
    template_id: Optional[str],
    category: Tuple[str, ...],
    data: Dict[str, str],
    text: Optional[str],
    html: Optional[str],
    sandbox: Optional[bool],
    ip_pool: Optional[str],
    output: Optional[Path],
    save: Optional[str],
    pretty: bool,
    verbose: bool,
):
    """Build a mail send payload. Nothing is sent."""
    if save and output:
        raise click.UsageError("--save and --output cannot be used together")

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
        print_banner()

    config = AppConfig.from_env()
    defaults = config.defaults

    from_email = from_email or defaults.from_email
    if not from_email:
        raise click.UsageError("--from-email is required when SENDGRID_FROM_EMAIL is not set")

    sender = ContactBuilder(from_email)
    if from_name or defaults.from_name:
        sender.name(from_name or defaults.from_name)

    personalization = PersonalizationBuilder()
    for value in to_:
        personalization.to(contact_from_option(value))
    for value in cc:
        personalization.cc(contact_from_option(value))
    for value in bcc:
        personalization.bcc(contact_from_option(value))
    for key, value in data.items():
        personalization.dynamic_template_data(key, value)

    message = MessageBuilder(sender.build(), subject).personalization(personalization.build())

    # text/plain must come before text/html
    if text is not None:
        message.content(Content("text/plain", text))
    if html is not None:
        message.content(Content("text/html", html))
    if template_id:
        message.template_id(template_id)
    for value in category:
        message.category(value)

    pool = ip_pool or defaults.ip_pool_name
    if pool:
        message.ip_pool_name(pool)

    if sandbox is None:
        sandbox = defaults.sandbox_mode
    if sandbox:
        message.mail_settings(MailSettingsBuilder().sandbox_mode().build())

    if save:
        output = Path(config.output_dir) / f"{save}.json"

    exporter = JsonExporter(indent=2 if pretty else None)
    try:
        if output:
            exporter.export_to_file(output, message.build())
            click.echo(f"{Fore.GREEN}✅ Payload written to {output}", err=True)
        else:
            click.echo(exporter.export(message.build()))
    except SerializationError as e:
        click.echo(f"{Fore.RED}Error: {e}", err=True)
        sys.exit(1)


def main():
    """Console script entry point."""
    init(autoreset=True)
    cli()
