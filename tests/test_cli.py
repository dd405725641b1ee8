"""Test the command line entry point."""

import logging
from unittest.mock import patch, MagicMock
from linerepl import __main__ as cli


def test_version_flag(capsys):
    with patch.object(cli.sys, 'argv', ['linerepl', '--version']):
        with patch.object(cli, 'get_version_string', return_value='1.2.3'):
            cli.main()
    assert capsys.readouterr().out == "1.2.3\n"


def test_default_runs_echo_repl():
    with patch.object(cli.sys, 'argv', ['linerepl']):
        with patch('linerepl.repl.Repl.run') as mock_run:
            cli.main()
    mock_run.assert_called_once()


def test_log_option_configures_logging(tmp_path):
    log_file = tmp_path / "repl.log"
    with patch.object(cli.sys, 'argv', ['linerepl', '--log', str(log_file)]):
        with patch('linerepl.repl.Repl.run'):
            with patch.object(cli.logging, 'basicConfig') as mock_config:
                cli.main()
    kwargs = mock_config.call_args.kwargs
    assert kwargs['filename'] == str(log_file)
    assert kwargs['level'] == logging.DEBUG


def test_keytest_prints_events_until_escape(capsys):
    fake_terminal = MagicMock()
    fake_terminal.get_key.side_effect = ['a', '<Ctrl-LEFT>', '<ESC>']
    with patch.object(cli.sys, 'argv', ['linerepl', '--keytest']):
        with patch('linerepl.terminal.TerminalInterface', return_value=fake_terminal):
            cli.main()
    out = capsys.readouterr().out
    assert "regular 'a' modifier=none raw=a" in out
    assert "special 'left' modifier=ctrl raw=<Ctrl-LEFT>" in out
    assert "escape" not in out
    fake_terminal.cleanup.assert_called_once()


def test_version_string_without_installed_package():
    from linerepl import version
    with patch.object(version.importlib.metadata, 'version',
                      side_effect=version.importlib.metadata.PackageNotFoundError):
        assert version.get_version_string() == "unknown"


def test_keytest_hides_modifiers_the_dispatcher_ignores(capsys):
    fake_terminal = MagicMock()
    fake_terminal.get_key.side_effect = ['<Esc+LEFT>', '<Shift-LEFT>', None]
    with patch.object(cli.sys, 'argv', ['linerepl', '--keytest']):
        with patch('linerepl.terminal.TerminalInterface', return_value=fake_terminal):
            cli.main()
    out = capsys.readouterr().out
    assert "special 'left' modifier=ctrl raw=<Esc+LEFT>" in out
    assert "shift_special 'left' modifier=none raw=<Shift-LEFT>" in out
    assert "alt" not in out
