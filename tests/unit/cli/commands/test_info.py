"""
Tests for the `modis/cli/commands/info.py` module.
"""

from argparse import ArgumentParser, Namespace

from pytest_mock import MockerFixture

from modis.cli.commands.info import InfoCommand


def build_info_parser(command: InfoCommand) -> ArgumentParser:
    """
    Build a parser holding only the `info` command.

    Args:
        command: The command to register.

    Returns:
        The parser.
    """
    parser = ArgumentParser()
    subparsers = parser.add_subparsers(dest="command")
    command.add_parser(subparsers)
    return parser


def test_add_parser_sets_up_info_command():
    """Test that the `info` subcommand is registered with its handler."""
    command = InfoCommand()

    args = build_info_parser(command).parse_args(["info"])

    assert args.func == command.process_command
    assert args.offline is False


def test_offline_option():
    """Test the option that skips the server check."""
    args = build_info_parser(InfoCommand()).parse_args(["info", "--offline"])

    assert args.offline is True


def test_process_command_prints_info(mocker: MockerFixture):
    """
    Test that running the command prints the configuration info.

    Args:
        mocker: PyTest mocker fixture.
    """
    mock_print_info = mocker.patch("modis.display.print_info")
    args = Namespace(offline=False)

    InfoCommand().process_command(args)

    mock_print_info.assert_called_once_with(args)
