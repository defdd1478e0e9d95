"""
Translate symbolic arguments into the keyword conventions of the wrappers in
scipy.linalg.blas and scipy.linalg.lapack, and into NumPy memory orders.

SciPy's f2py wrappers don't take CBLAS enums or LAPACK characters. They take
small integers: trans_a in {0, 1, 2}, lower in {0, 1}, side in {0, 1},
diag in {0, 1}, compute_vl / compute_vr in {0, 1}. These translators share
the parsers in blasargs.parsing, so the three conventions can't disagree.
"""
import warnings
from blasargs.enums import Layout, Op, Uplo, Diag, Side, SVDJob, EVDJob
from blasargs.parsing import parse_op, parse_side, parse_uplo, parse_diag, \
    parse_layout, parse_svd_job, parse_evd_job


SCIPY_TRANS = {
    Op.NoTrans: 0,
    Op.Trans: 1,
    Op.ConjTrans: 2,
}

SCIPY_SIDE = {
    Side.Left: 0,
    Side.Right: 1,
}

SCIPY_LOWER = {
    Uplo.Upper: 0,
    Uplo.Lower: 1,
}

SCIPY_DIAG = {
    Diag.NonUnit: 0,
    Diag.Unit: 1,
}

SCIPY_COMPUTE_VECTORS = {
    EVDJob.NoVectors: 0,
    EVDJob.Vectors: 1,
}

NUMPY_ORDER = {
    Layout.RowMajor: 'C',
    Layout.ColMajor: 'F',
}


def scipy_trans(op):
    """Value for the trans_a / trans_b keyword of ?gemm, ?trsm, etc."""
    return SCIPY_TRANS[parse_op(op)]


def scipy_side(side):
    return SCIPY_SIDE[parse_side(side)]


def scipy_lower(uplo):
    """Value for the "lower" keyword of ?trsm, ?potrf, ?syevd, etc."""
    return SCIPY_LOWER[parse_uplo(uplo)]


def scipy_diag(diag):
    return SCIPY_DIAG[parse_diag(diag)]


def scipy_compute_vectors(job):
    """Value for the compute_vl / compute_vr keywords of ?geev. Never raises."""
    return SCIPY_COMPUTE_VECTORS[parse_evd_job(job)]


def numpy_order(order):
    """Memory order letter for numpy.reshape, numpy.asarray, etc."""
    return NUMPY_ORDER[parse_layout(order)]


def scipy_gesvd_flags(job, name='job'):
    """
    Keyword arguments for scipy.linalg.lapack.?gesvd, given one job argument
    that applies to both U and V^T.

    Returns
    -------
    flags : dict
        Keys "compute_uv", "full_matrices" and "overwrite_a".

    Notes
    -----
    SciPy's wrapper always returns the factors in new arrays, so "overwrite"
    can't be honored exactly. We return the economy-sized factors and allow
    SciPy to use "a" as workspace, with a warning.
    """
    job = parse_svd_job(job, name)
    if job == SVDJob.NoJob:
        return {'compute_uv': 0, 'full_matrices': 0, 'overwrite_a': 0}
    if job == SVDJob.All:
        return {'compute_uv': 1, 'full_matrices': 1, 'overwrite_a': 0}
    if job == SVDJob.Overwrite:
        msg = """
        SciPy's gesvd wrapper can't write a singular factor over its input.
        The economy-sized factor will be returned in a new array, and the
        contents of "a" will be destroyed.
        """
        warnings.warn(msg)
        return {'compute_uv': 1, 'full_matrices': 0, 'overwrite_a': 1}
    return {'compute_uv': 1, 'full_matrices': 0, 'overwrite_a': 0}
