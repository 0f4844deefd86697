from click.testing import CliRunner
import pytest

from fullypeek import __version__
from fullypeek.__main__ import main
from fullypeek.utils import iter_lines


@pytest.fixture
def runner():
    return CliRunner()


def write(path, text):
    with open(path, 'w') as f:
        f.write(text)


def test_version(runner):
    result = runner.invoke(main, ['version'])
    assert result.exit_code == 0
    assert result.output.startswith('fullypeek %s\n' % __version__)


def test_window_stdin(runner):
    result = runner.invoke(main, ['window', '-n', '3'], input='a\nb\nc\n')
    assert result.exit_code == 0
    assert result.output == 'a\tb\tc\nb\tc\t\nc\t\t\n'


def test_window_fill(runner):
    result = runner.invoke(
        main,
        ['window', '--fill', '.'],
        input='a\nb\n',
    )
    assert result.exit_code == 0
    assert result.output == 'a\tb\nb\t.\n'


def test_window_fill_envvar(runner):
    result = runner.invoke(
        main,
        ['window'],
        input='a\n',
        env={'FULLYPEEK_FILL': '.'},
    )
    assert result.exit_code == 0
    assert result.output == 'a\t.\n'


def test_window_spans_files(runner, tmp_path):
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    write(first, 'a\nb\n')
    write(second, 'c\n')
    result = runner.invoke(main, ['window', str(first), str(second)])

    assert result.exit_code == 0
    assert result.output == 'a\tb\nb\tc\nc\t\n'


def test_window_missing_file(runner, tmp_path):
    result = runner.invoke(main, ['window', str(tmp_path / 'missing')])

    assert result.exit_code == 2
    assert 'missing' in result.output


def test_window_verbose(runner):
    result = runner.invoke(
        main,
        ['--verbose', 'window'],
        input='a\nb\n',
    )
    assert result.exit_code == 0
    assert 'wrote 2 windows' in result.output


def test_uniq(runner):
    result = runner.invoke(main, ['uniq'], input='a\na\nb\n\n\na\n')
    assert result.exit_code == 0
    assert result.output == 'a\nb\n\na\n'


def test_uniq_count(runner):
    result = runner.invoke(main, ['uniq', '--count'], input='a\na\nb\n')
    assert result.exit_code == 0
    assert result.output == '      2 a\n      1 b\n'


def test_head(runner):
    result = runner.invoke(main, ['head', '-n', '2'], input='a\nb\nc\n')
    assert result.exit_code == 0
    assert result.output == 'a\nb\n'


def test_head_verbose(runner):
    result = runner.invoke(
        main,
        ['--verbose', 'head', '-n', '2'],
        input='a\nb\nc\n',
    )
    assert result.exit_code == 0
    assert 'wrote 2 lines' in result.output
    assert 'more input follows' in result.output

    result = runner.invoke(
        main,
        ['--verbose', 'head', '-n', '5'],
        input='a\nb\nc\n',
    )
    assert result.exit_code == 0
    assert 'wrote 3 lines' in result.output
    assert 'reached end of input' in result.output


def test_head_negative(runner):
    result = runner.invoke(main, ['head', '--lines=-1'], input='a\n')
    assert result.exit_code == 2
    assert '--lines must be non-negative' in result.output


def test_iter_lines_is_lazy(tmp_path):
    first = tmp_path / 'first'
    write(first, 'a\r\nb\n')

    lines = iter_lines([str(first), str(tmp_path / 'missing')])
    assert next(lines) == 'a'
    assert next(lines) == 'b'
    with pytest.raises(OSError):
        next(lines)
