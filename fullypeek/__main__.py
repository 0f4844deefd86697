from itertools import islice

import click

_version_msg = """\
fullypeek {version}
License GPLv3+: GNU GPL version 3 or later <http://gnu.org/licenses/gpl.html>
This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law."""


def log_summary(verbose, what, count):
    if verbose:
        click.echo('wrote %d %s' % (count, what), err=True)


def log_more_input(has_next):
    click.echo(
        'more input follows' if has_next else 'reached end of input',
        err=True,
    )


@click.group()
@click.option(
    '--verbose/--quiet',
    default=False,
    envvar='FULLYPEEK_VERBOSE',
    help='Print additional information to stderr while running?',
)
@click.pass_context
def main(ctx, verbose):
    """Look ahead through the lines of text files.
    """
    ctx.obj = {
        'verbose': verbose,
    }


@main.command()
def version():
    """Print version and license information.
    """
    from fullypeek import __version__

    click.echo(_version_msg.format(version=__version__))


_paths_argument = click.argument(
    'paths',
    nargs=-1,
    type=click.Path(dir_okay=False, allow_dash=True),
)


def _lines(paths):
    from fullypeek import fully_peekable
    from fullypeek.utils import iter_lines

    return fully_peekable(iter_lines(paths or ('-',)))


@main.command()
@_paths_argument
@click.option(
    '-n',
    '--size',
    default=2,
    type=int,
    help='The number of lines in each window.',
)
@click.option(
    '--fill',
    default='',
    envvar='FULLYPEEK_FILL',
    type=str,
    help='The text to show for positions past the end of the input.',
)
@click.pass_context
def window(ctx, paths, size, fill):
    """Print every line followed by the lines after it, tab delimited.
    """
    if size < 1:
        ctx.fail('--size must be positive, got: %d' % size)

    it = _lines(paths)
    count = 0
    try:
        while it:
            click.echo('\t'.join(it.peek_many(size, default=fill)))
            next(it)
            count += 1
    except (OSError, ValueError) as e:
        ctx.fail(str(e))

    log_summary(ctx.obj['verbose'], 'windows', count)


@main.command()
@_paths_argument
@click.option(
    '--count/--no-count',
    default=False,
    help='Prefix each line with the number of times it was repeated.',
)
@click.pass_context
def uniq(ctx, paths, count):
    """Collapse runs of equal adjacent lines into a single line.
    """
    it = _lines(paths)
    written = 0
    try:
        for line in it:
            repeats = 1
            while it.next_if_eq(line) is not None:
                repeats += 1

            if count:
                click.echo('%7d %s' % (repeats, line))
            else:
                click.echo(line)
            written += 1
    except (OSError, ValueError) as e:
        ctx.fail(str(e))

    log_summary(ctx.obj['verbose'], 'lines', written)


@main.command()
@_paths_argument
@click.option(
    '-n',
    '--lines',
    default=10,
    type=int,
    help='The number of lines to print.',
)
@click.pass_context
def head(ctx, paths, lines):
    """Print the first lines of the input without reading past them.
    """
    if lines < 0:
        ctx.fail('--lines must be non-negative, got: %d' % lines)

    it = _lines(paths)
    written = 0
    try:
        for line in islice(it, lines):
            click.echo(line)
            written += 1

        log_summary(ctx.obj['verbose'], 'lines', written)
        if ctx.obj['verbose']:
            # looks one line past the output
            log_more_input(it.has_next())
    except (OSError, ValueError) as e:
        ctx.fail(str(e))


if __name__ == '__main__':
    main()
