"""
The one error kind raised by blasargs.

A symbolic argument either translates to a valid code or the call fails
with InvalidArgumentError. The message lists what would have been accepted,
so the caller can correct the argument without reading the source.
"""


class InvalidArgumentError(ValueError):
    """
    A symbolic argument is outside the vocabulary for its parameter kind.

    Attributes
    ----------
    kind : str
        The parameter kind being translated, e.g. "trans" or "uplo".

    accepted : tuple of str
        Accepted spellings, in the order they appear in the message.

    value : object
        The rejected input, as the caller supplied it.
    """

    def __init__(self, kind, accepted, value):
        self.kind = kind
        self.accepted = tuple(accepted)
        self.value = value
        msg = f'Expected {_or_list(self.accepted)} for {kind} argument, got {value!r}.'
        super().__init__(msg)


def _or_list(words):
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f'{words[0]} or {words[1]}'
    return ', '.join(words[:-1]) + ', or ' + words[-1]
