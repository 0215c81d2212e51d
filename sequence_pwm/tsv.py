"""
Write position weight matrices as TSV tables.
"""
import os
import shutil
import tempfile
import pandas as pd

from sequence_pwm.pwm import AMINO_ACIDS

__all__ = ["write_matrix", "POSITION_COLUMN", "FLOAT_FORMAT"]

POSITION_COLUMN = "Position"
"""
Header of the 1-based alignment position column.
"""

FLOAT_FORMAT = "%.3f"
"""
Format applied to every frequency in the output table.
"""

def _as_frame(matrix):
    if isinstance(matrix, pd.DataFrame):
        df = matrix.reindex(columns=AMINO_ACIDS)
    else:
        df = pd.DataFrame(list(matrix), columns=AMINO_ACIDS, dtype=float)
    return df.fillna(0.0).astype(float)

def _umask():
    umask = os.umask(0)
    os.umask(umask)
    return umask

def write_matrix(matrix, path):
    """
    Write a position weight matrix to a TSV file.

    The table has a Position column followed by one column per Amino Acid in the order of
    `AMINO_ACIDS`, with one row per alignment column. Frequencies are written with three decimal
    places and Amino Acids missing from the matrix are written as 0.000. The table is written to
    a temporary file next to `path` and moved into place once complete, so a failed write never
    leaves a partial table behind. An existing output keeps its permissions and symlinks are
    followed to the file they point at.

    Parameters
    ----------
    matrix : Pandas DataFrame or Sequence of dict
        Frequency matrix, as produced by `build_matrix`, or a sequence of mappings from Amino Acid
        to frequency, one per alignment column.
    path   : str or path-like
        Output file. Created or overwritten.

    Raises
    ------
    OSError
        The output file cannot be written.
    """
    df = _as_frame(matrix)
    df.insert(0, POSITION_COLUMN, range(1, len(df) + 1))

    # write through symlinks to the file they point at
    path = os.path.realpath(path)
    tsv_file = tempfile.NamedTemporaryFile(mode="w", dir=os.path.dirname(path), prefix=".pwm_",
                                           suffix=".tmp", delete=False, newline="")
    try:
        with tsv_file:
            df.to_csv(tsv_file, sep="\t", index=False, float_format=FLOAT_FORMAT,
                      lineterminator="\n")

        if os.path.isfile(path):
            shutil.copymode(path, tsv_file.name)
        else:
            os.chmod(tsv_file.name, 0o666 & ~_umask())
        os.replace(tsv_file.name, path)
    finally:
        if os.path.exists(tsv_file.name):
            os.unlink(tsv_file.name)
