class String(str):
    """A string value with its own object identity.

    CPython shares the empty string and one-character strings, so plain `str`
    objects cannot back `eq?`. Every String construction allocates a fresh
    object; equality and hashing stay those of `str`.
    """

    __slots__ = ()
