import click


def iter_lines(paths):
    """Lazily read the lines of some text files.

    Parameters
    ----------
    paths : iterable[str]
        The files to read in order. ``'-'`` reads from stdin.

    Yields
    ------
    line : str
        Each line without its trailing newline.

    Notes
    -----
    Each file is only opened once the lines of the files before it have been
    consumed, and closed as soon as its last line has been read.
    """
    for path in paths:
        with click.open_file(path, 'r') as f:
            for line in f:
                yield line.rstrip('\r\n')
