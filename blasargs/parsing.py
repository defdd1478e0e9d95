"""
Parse symbolic kernel arguments into the semantic variants of blasargs.enums.

This is the only place that knows which spellings are accepted. Everything
downstream (the CBLAS, LAPACK and SciPy translators) works on variants and
is a plain table lookup.

Inputs can be
    (*) a variant that was already parsed, e.g. Op.Trans,
    (*) a token string, matched exactly (no case folding),
    (*) None or a boolean, for the kinds that give those a meaning.

Integers are never treated as booleans: 0 isn't False here, and 1 isn't True.
"""
import numpy as np
from blasargs.enums import Layout, Op, Uplo, Diag, Side, SVDJob, EVDJob
from blasargs.exceptions import InvalidArgumentError


OP_TOKENS = {
    'no_transpose': Op.NoTrans,
    'no-transpose': Op.NoTrans,
    'transpose': Op.Trans,
    'complex_conjugate': Op.ConjTrans,
    'complex-conjugate': Op.ConjTrans,
    'complex_conjugate_transpose': Op.ConjTrans,
    'complex-conjugate-transpose': Op.ConjTrans,
}

SIDE_TOKENS = {
    'left': Side.Left,
    'right': Side.Right,
}

UPLO_TOKENS = {
    'upper': Uplo.Upper,
    'lower': Uplo.Lower,
}

LAYOUT_TOKENS = {
    'row': Layout.RowMajor,
    'row_major': Layout.RowMajor,
    'col': Layout.ColMajor,
    'col_major': Layout.ColMajor,
    'column': Layout.ColMajor,
    'column_major': Layout.ColMajor,
}

SVD_JOB_TOKENS = {
    'all': SVDJob.All,
    'a': SVDJob.All,
    'return': SVDJob.Return,
    's': SVDJob.Return,
    'overwrite': SVDJob.Overwrite,
    'o': SVDJob.Overwrite,
    'none': SVDJob.NoJob,
    'n': SVDJob.NoJob,
}

EVD_NO_VECTOR_TOKENS = ('n',)


def _is_bool(value, truth):
    # numpy.bool_ is not a subclass of bool.
    return isinstance(value, (bool, np.bool_)) and bool(value) is truth


def _lookup(value, variant_cls, tokens, kind, accepted):
    if isinstance(value, variant_cls):
        return value
    if isinstance(value, str) and value in tokens:
        return tokens[value]
    raise InvalidArgumentError(kind, accepted, value)


def parse_op(op, name='trans') -> Op:
    """
    Absent (None) and False both mean "no transpose". True is rejected.
    """
    if op is None or _is_bool(op, False):
        return Op.NoTrans
    accepted = ('false', 'transpose', 'complex_conjugate')
    return _lookup(op, Op, OP_TOKENS, name, accepted)


def parse_side(side, name='side') -> Side:
    return _lookup(side, Side, SIDE_TOKENS, name, ('left', 'right'))


def parse_uplo(uplo, name='uplo') -> Uplo:
    return _lookup(uplo, Uplo, UPLO_TOKENS, name, ('upper', 'lower'))


def parse_diag(diag) -> Diag:
    """
    Total: "unit" and True mean a unit diagonal, anything else means non-unit.
    """
    if isinstance(diag, Diag):
        return diag
    if (isinstance(diag, str) and diag == 'unit') or _is_bool(diag, True):
        return Diag.Unit
    return Diag.NonUnit


def parse_layout(order, name='order') -> Layout:
    return _lookup(order, Layout, LAYOUT_TOKENS, name, ('row', 'col'))


def parse_svd_job(job, name='job') -> SVDJob:
    accepted = ('all', 'return', 'overwrite', 'none', 'a', 's', 'o', 'n')
    return _lookup(job, SVDJob, SVD_JOB_TOKENS, name, accepted)


def parse_evd_job(job) -> EVDJob:
    """
    Total: None, False and "n" skip the eigenvectors. Every other input,
    including "none" and tokens this function has never heard of, computes them.
    """
    if isinstance(job, EVDJob):
        return job
    if job is None or _is_bool(job, False):
        return EVDJob.NoVectors
    if isinstance(job, str) and job in EVD_NO_VECTOR_TOKENS:
        return EVDJob.NoVectors
    return EVDJob.Vectors
