"""
Command-line interface for shell-bookmarks.

This module provides the CLI that converts a bookmarks file into lf jump
maps, zsh named directories and cd aliases.
"""

import argparse
import logging
import sys
from pathlib import Path

from shell_bookmarks import __version__
from shell_bookmarks.config.configuration import Configuration
from shell_bookmarks.core.shell_generator import ShellBookmarkGenerator
from shell_bookmarks.utils.logging_setup import setup_logging
from shell_bookmarks.utils.validation import (
    ValidationError,
    validate_config_file,
    validate_configuration,
    validate_input_file,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for the bookmarks generator."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="shell-bookmarks",
            description=(
                "Generate shell integration files from a plain-text "
                "bookmarks file"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Bookmarks file format:
  # comment
  proj /home/user/project
  docs "/home/user/My Documents"     # quote paths with spaces or '#'

Examples:
  shell-bookmarks -i bookmarks --lf lf_bookmarks
  shell-bookmarks -i bookmarks -z named_dirs.zsh -c cd_aliases.sh
  shell-bookmarks -i bookmarks -l lf_bookmarks --dry-run
  shell-bookmarks --config shell_bookmarks.toml --verbose
  shell-bookmarks --create-config shell_bookmarks.toml

Output formats:
  --lf        map g<alias> cd <path>
  --zsh       hash -d <alias>=<path>
  --cd-alias  alias cd<alias>="<path>"

Outputs are written only if every line of the bookmarks file parses.
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version=f"%(prog)s {__version__}"
        )

        parser.add_argument(
            "--create-config",
            metavar="FILE",
            help="Write a sample configuration file (TOML, or JSON for a "
            ".json suffix) and exit",
        )

        # Input arguments
        parser.add_argument(
            "--input",
            "-i",
            help="Bookmarks file. Can also be set as input.file in the "
            "configuration file.",
        )

        # Output arguments
        outputs = parser.add_argument_group(
            "outputs", "At least one output is required"
        )
        outputs.add_argument(
            "--lf",
            "-l",
            dest="lf_file",
            metavar="FILE",
            help="Write lf jump mappings to FILE",
        )
        outputs.add_argument(
            "--zsh",
            "-z",
            dest="zsh_file",
            metavar="FILE",
            help="Write zsh named directories to FILE",
        )
        outputs.add_argument(
            "--cd-alias",
            "-c",
            dest="cd_alias_file",
            metavar="FILE",
            help="Write cd aliases to FILE",
        )

        # Optional arguments
        parser.add_argument(
            "--config",
            help="Configuration file path (TOML or JSON). If not specified, "
            "looks for shell_bookmarks.toml/.json in the current directory "
            "and ~/.config/shell-bookmarks/config.toml.",
        )
        parser.add_argument(
            "--blank-lines",
            choices=["skip", "error"],
            help="Skip blank lines (default) or treat them as errors",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Parse the bookmarks file and print the outputs without "
            "writing any file",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable verbose output",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate arguments given on the command line.

        Outputs and input may also come from the configuration file, so
        their presence is checked later by validate_configuration().

        Args:
            args: Parsed arguments from argparse

        Returns:
            Dictionary of validated and processed arguments

        Raises:
            ValidationError: If any validation fails
        """
        input_path = validate_input_file(args.input)
        config_path = validate_config_file(args.config)

        outputs = {}
        for format_name, value in (
            ("lf", args.lf_file),
            ("zsh", args.zsh_file),
            ("cd-alias", args.cd_alias_file),
        ):
            if value:
                outputs[format_name] = validate_output_file(value)

        return {
            "input_path": input_path,
            "config_path": config_path,
            "outputs": outputs,
            "blank_lines": args.blank_lines,
            "dry_run": args.dry_run,
            "verbose": args.verbose,
        }

    def process_arguments(self, validated_args: dict) -> Configuration:
        """
        Load configuration and apply validated arguments on top of it.

        Args:
            validated_args: Dictionary of validated arguments

        Returns:
            Configured Configuration object

        Raises:
            ValidationError: If the merged configuration is incomplete
        """
        config = Configuration(validated_args["config_path"])
        config.update_from_args(validated_args)

        setup_logging(config, verbose=validated_args["verbose"])

        validate_configuration(config)

        return config

    def _handle_create_config(self, output_file: str) -> int:
        """Handle creation of a sample configuration file."""
        output_path = Path(output_file)

        if output_path.exists():
            print(
                f"Configuration file '{output_path}' already exists; "
                f"not overwriting.",
                file=sys.stderr,
            )
            return 1

        try:
            Configuration().create_sample_config(output_path)
        except (OSError, ValueError) as e:
            print(f"Error creating configuration file: {e}", file=sys.stderr)
            return 1

        print(f"✓ Created configuration file: {output_path}")
        print(f"  Use with: shell-bookmarks --config {output_path}")
        return 0

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._handle_create_config(parsed_args.create_config)

            validated_args = self.validate_args(parsed_args)
            config = self.process_arguments(validated_args)

            logger = logging.getLogger(__name__)
            logger.info("shell-bookmarks starting")
            logger.info(f"Input file: {config.get_input_path()}")
            for target in config.get_output_targets():
                logger.info(f"Output: {target}")

            if validated_args["verbose"]:
                print("✓ Arguments validated and configuration loaded")
                if config.loaded_from:
                    print(f"  Config: {config.loaded_from}")
                print(f"  Input: {config.get_input_path()}")
                print(f"  Blank lines: {config.get_blank_line_policy()}")
                for target in config.get_output_targets():
                    print(f"  Output ({target.format_name}): {target.path}")

            generator = ShellBookmarkGenerator(config)
            return generator.run_cli(validated_args)

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            # Configuration loading reports formatted errors as ValueError
            print(f"{e}", file=sys.stderr)
            return 1
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            logging.getLogger(__name__).exception("Unexpected error in CLI")
            return 1


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
