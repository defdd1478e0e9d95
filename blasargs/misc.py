"""
Docstring templates shared by the CBLAS and LAPACK translators.

The translators for one parameter kind take the same inputs and differ only
in the code family they return, so their docstrings are filled in from one
template per contract: strict (raises on unknown input) or total (never
raises).
"""

STRICT_DOC = """
    Translate a symbolic {kind} argument into {target}.

    Parameters
    ----------
    {param} : {accepts}

    Returns
    -------
    code : {codes}

    Raises
    ------
    InvalidArgumentError
        If "{param}" is none of the accepted values.
    """

TOTAL_DOC = """
    Translate a symbolic {kind} argument into {target}.

    Parameters
    ----------
    {param} : object
        {rule}

    Returns
    -------
    code : {codes}

    Notes
    -----
    This never raises. Inputs that aren't recognized take the {default} branch.
    """


def set_docstring(template, **fields):
    """Decorator that assigns template.format(**fields) as fn.__doc__."""
    def assign(fn):
        fn.__doc__ = template.format(**fields)
        return fn
    return assign
