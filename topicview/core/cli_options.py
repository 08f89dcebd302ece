#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from topicview.core.cli_options import input_option, date_option

    @cli.command()
    @input_option()
    @date_option
    def my_command(input, date):
        pass
"""
import click
from topicview.core.paths import CONFIG_PATH, LOG_DIR


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files"
)

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=str(CONFIG_PATH),
    help="YAML configuration file (defaults apply when missing)"
)


# ═══════════════════════════════════════════════════════════════════════════
# PATH OPTIONS (FACTORIES)
# ═══════════════════════════════════════════════════════════════════════════

def input_option(default=None, required=False, help_text="Content directory with Markdown documents"):
    """
    Factory function for the content directory option.

    The directory must exist; when omitted, commands fall back to the
    configured content directory.

    Args:
        default: Default path value (optional)
        required: Whether the option is required (default: False)
        help_text: Custom help text

    Returns:
        Click option decorator
    """
    return click.option(
        "-i", "--input",
        type=click.Path(exists=True, file_okay=False),
        default=default,
        required=required,
        help=help_text
    )


def output_option(default=None, required=False, help_text="Output file"):
    """
    Factory function for output path option.

    Unlike input_option, this does NOT validate existence.

    Args:
        default: Default path value (optional)
        required: Whether the option is required (default: False)
        help_text: Custom help text (default: "Output file")

    Returns:
        Click option decorator
    """
    return click.option(
        "-o", "--output",
        type=click.Path(dir_okay=False),
        default=default,
        required=required,
        help=help_text
    )


# ═══════════════════════════════════════════════════════════════════════════
# FILTER / FORMAT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

date_option = click.option(
    "-d", "--date",
    "date_key",
    default=None,
    help="Only documents whose date key matches exactly (e.g. 2024/1/2)"
)

no_color_option = click.option(
    "--no-color",
    is_flag=True,
    help="Disable ANSI styling"
)

spans_option = click.option(
    "--spans",
    is_flag=True,
    help="Include resolved inline spans for every text field"
)

section_option = click.option(
    "-s", "--section",
    default=None,
    metavar="TITLE|N",
    help="Show only this section, by title or 1-based number"
)
