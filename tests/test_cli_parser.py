"""Tests for CLI command parser."""

import pytest

from cli.models import (
    AddCommand,
    BrowseCommand,
    CountCommand,
    EventsCommand,
    ExistsCommand,
    IdentityCommand,
    PauseCommand,
    RegisterCommand,
    ShowCommand,
    StatusCommand,
    VerifyCommand,
)
from cli.parser import ParseError, parse_command


def test_parse_register():
    cmd = parse_command('register bafy123 report.pdf 2048')
    assert cmd == RegisterCommand(identifier='bafy123', name='report.pdf', size=2048)


def test_parse_register_quoted_name():
    cmd = parse_command('register bafy123 "annual report.pdf" 10')
    assert cmd.name == 'annual report.pdf'


@pytest.mark.parametrize("line,message", [
    ('register bafy123 report.pdf', 'exactly 3 arguments'),
    ('register bafy123 report.pdf 0', 'positive integer'),
    ('register bafy123 report.pdf -4', 'positive integer'),
    ('register bafy123 report.pdf big', "size must be an integer, got 'big'"),
])
def test_parse_register_errors(line, message):
    with pytest.raises(ParseError, match=message):
        parse_command(line)


def test_parse_add():
    assert parse_command('add bafy123 ~/docs/a.pdf') == AddCommand(
        identifier='bafy123', file_path='~/docs/a.pdf'
    )


def test_parse_add_missing_path():
    with pytest.raises(ParseError):
        parse_command('add bafy123')


def test_parse_lookups():
    assert parse_command('verify bafy123') == VerifyCommand(identifier='bafy123')
    assert parse_command('exists bafy123') == ExistsCommand(identifier='bafy123')
    assert parse_command('count') == CountCommand()


def test_parse_verify_requires_identifier():
    with pytest.raises(ParseError, match='exactly 1 argument'):
        parse_command('verify')


def test_parse_show():
    assert parse_command('show 3') == ShowCommand(index=3)

    with pytest.raises(ParseError):
        parse_command('show -1')


def test_parse_browse_defaults():
    assert parse_command('browse') == BrowseCommand(offset=0, limit=20)
    assert parse_command('browse 40') == BrowseCommand(offset=40, limit=20)
    assert parse_command('browse 40 5') == BrowseCommand(offset=40, limit=5)


def test_parse_browse_rejects_zero_limit():
    with pytest.raises(ParseError, match='limit'):
        parse_command('browse 0 0')


def test_parse_events():
    assert parse_command('events') == EventsCommand(after_id=0)
    assert parse_command('events 12') == EventsCommand(after_id=12)


def test_parse_pause_commands():
    assert parse_command('pause') == PauseCommand(paused=True)
    assert parse_command('unpause') == PauseCommand(paused=False)
    assert parse_command('status') == StatusCommand()


def test_parse_no_argument_commands_reject_arguments():
    with pytest.raises(ParseError, match='count takes no arguments'):
        parse_command('count now')


def test_parse_identity():
    assert parse_command('identity') == IdentityCommand()
    assert parse_command('identity 0xabc') == IdentityCommand(address='0xabc')


def test_parse_unknown_command():
    with pytest.raises(ParseError, match='Unknown command: upload'):
        parse_command('upload file.txt')


def test_parse_empty_input():
    with pytest.raises(ParseError):
        parse_command('   ')


def test_parse_unbalanced_quotes():
    with pytest.raises(ParseError, match='Invalid syntax'):
        parse_command('register "bafy report.pdf 10')


def test_parse_browse_caps_limit():
    assert parse_command('browse 0 200') == BrowseCommand(offset=0, limit=200)

    with pytest.raises(ParseError, match='limit must be at most 200'):
        parse_command('browse 0 500')
