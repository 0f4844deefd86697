from collections import deque
from operator import length_hint


class FullyPeekableIterator:
    """An iterator that can peek at any number of upcoming elements without
    consuming them.

    Parameters
    ----------
    stream : iterable
        The underlying iterable to pull from.

    Notes
    -----
    Peeking ``n`` items ahead will pull that many values into memory until
    they have been consumed with ``next``. Nothing is pulled beyond the
    furthest position that has been asked for.

    Each element of the underlying iterator is pulled at most once, and once
    it has raised ``StopIteration`` it is never pulled again.

    The underlying iterator should not be consumed while the
    ``FullyPeekableIterator`` is in use.
    """
    def __init__(self, stream):
        self._stream = iter(stream)
        self._peeked = deque()
        self._exhausted = False

    def __repr__(self):
        return '<{}: {} peeked{}>'.format(
            type(self).__name__,
            len(self._peeked),
            ', exhausted' if self._exhausted else '',
        )

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self._peeked.popleft()
        except IndexError:
            pass

        if self._exhausted:
            raise StopIteration

        try:
            return next(self._stream)
        except StopIteration:
            self._exhausted = True
            raise

    def __bool__(self):
        return self.has_next()

    def __length_hint__(self):
        if self._exhausted:
            return len(self._peeked)
        return len(self._peeked) + length_hint(self._stream)

    def _fill(self, n):
        """Pull from the underlying iterator until ``n`` elements are peeked
        or it runs out.
        """
        peeked = self._peeked
        put = peeked.append
        while len(peeked) < n and not self._exhausted:
            try:
                put(next(self._stream))
            except StopIteration:
                self._exhausted = True

    def has_next(self):
        """Is there another element to yield?

        This may pull one element from the underlying iterator.

        Returns
        -------
        has_next : bool
        """
        self._fill(1)
        return bool(self._peeked)

    def lift(self, index, default=None):
        """Return the element ``index`` positions ahead without consuming
        anything.

        Parameters
        ----------
        index : int
            The offset from the current position, ``0`` is the element that
            ``next`` would return.
        default : any, optional
            The value to return if the iterator ends before ``index``.

        Returns
        -------
        lifted : any
            The element at ``index`` or ``default``.

        Raises
        ------
        ValueError
            Raised when ``index`` is negative.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2, 3)))
        >>> it.lift(2)
        3
        >>> it.lift(3, default='end')
        'end'
        >>> next(it)
        1
        """
        if index < 0:
            raise ValueError('index must be non-negative, got: %r' % index)

        self._fill(index + 1)
        try:
            return self._peeked[index]
        except IndexError:
            return default

    def lift_many(self, start, stop, default=None):
        """Return the elements from ``start`` up to but not including ``stop``
        positions ahead without consuming anything.

        Parameters
        ----------
        start : int
            The first offset to return.
        stop : int
            The offset to stop at.
        default : any, optional
            The value to put in the place of elements past the end of the
            iterator.

        Returns
        -------
        lifted : list
            A list of ``stop - start`` elements, or an empty list if
            ``stop <= start``. Once one position holds ``default`` for being
            past the end, every later position does too.

        Raises
        ------
        ValueError
            Raised when ``start`` or ``stop`` is negative.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2)))
        >>> it.lift_many(1, 3)
        [2, None]
        """
        if start < 0 or stop < 0:
            raise ValueError(
                'start and stop must be non-negative, got: (%r, %r)' % (
                    start,
                    stop,
                ),
            )

        if stop <= start:
            return []

        self._fill(stop)
        peeked = self._peeked
        available = len(peeked)
        return [
            peeked[index] if index < available else default
            for index in range(start, stop)
        ]

    def peek(self, default=None):
        """Return the element that ``next`` would return without consuming
        it.

        Parameters
        ----------
        default : any, optional
            The value to return if there are no elements left.

        Returns
        -------
        peeked : any
            The next element or ``default``.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2)))
        >>> it.peek()
        1
        >>> next(it)
        1
        >>> next(it)
        2
        >>> it.peek() is None
        True
        """
        return self.lift(0, default)

    def peek_many(self, n, default=None):
        """Return the next ``n`` elements of the iterator without consuming
        them.

        Parameters
        ----------
        n : int
            The number of elements to look at.
        default : any, optional
            The value to put in the place of elements past the end of the
            iterator.

        Returns
        -------
        peeked : list
            Exactly ``n`` elements, padded with ``default`` at the end if the
            iterator runs out.

        Raises
        ------
        ValueError
            Raised when ``n`` is negative.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2, 3, 4)))
        >>> it.peek_many(2)
        [1, 2]
        >>> next(it)
        1
        >>> it.peek_many(1)
        [2]
        >>> next(it)
        2
        >>> it.peek_many(3)
        [3, 4, None]
        """
        if n < 0:
            raise ValueError('n must be non-negative, got: %r' % n)
        return self.lift_many(0, n, default)

    def next_if(self, predicate, default=None):
        """Consume and return the next element only if it matches a
        predicate.

        Parameters
        ----------
        predicate : callable[any, bool]
            Called with the next element.
        default : any, optional
            The value to return if the element does not match or there are no
            elements left.

        Returns
        -------
        element : any
            The consumed element or ``default``.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2)))
        >>> it.next_if(lambda n: n > 1) is None
        True
        >>> it.next_if(lambda n: n == 1)
        1
        """
        if not self.has_next() or not predicate(self._peeked[0]):
            return default
        return self._peeked.popleft()

    def next_if_eq(self, expected, default=None):
        """Consume and return the next element only if it is equal to
        ``expected``.

        See Also
        --------
        :meth:`FullyPeekableIterator.next_if`
        """
        return self.next_if(lambda element: element == expected, default)

    def lookahead_iter(self):
        """Iterate over the remaining elements, consuming each one only when
        the element after it is requested.

        The element most recently yielded stays at the front of the buffer,
        so leaving the loop early leaves that element as the next one
        ``next`` returns.

        Examples
        --------
        >>> it = FullyPeekableIterator(iter((1, 2, 3)))
        >>> for n in it.lookahead_iter():
        ...     if n == 2:
        ...         break
        >>> next(it)
        2
        """
        while self.has_next():
            yield self._peeked[0]
            next(self)


def fully_peekable(iterable):
    """Wrap an iterable in a :class:`FullyPeekableIterator`.

    Parameters
    ----------
    iterable : iterable
        The iterable to wrap.

    Returns
    -------
    it : FullyPeekableIterator
        The wrapped iterator.
    """
    return FullyPeekableIterator(iterable)
