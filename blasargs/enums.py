from enum import Enum


class Layout(Enum):
    RowMajor = 'row_major'
    ColMajor = 'col_major'


class Op(Enum):
    NoTrans = 'no_transpose'
    Trans = 'transpose'
    ConjTrans = 'complex_conjugate'


class Uplo(Enum):
    Upper = 'upper'
    Lower = 'lower'


class Diag(Enum):
    NonUnit = 'non_unit'
    Unit = 'unit'


class Side(Enum):
    Left = 'left'
    Right = 'right'


class SVDJob(Enum):
    All = 'all'
    Return = 'return'
    Overwrite = 'overwrite'
    NoJob = 'none'  # the factor isn't computed at all.


class EVDJob(Enum):
    NoVectors = 'n'
    Vectors = 'v'
