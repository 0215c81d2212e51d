"""
Build position weight matrices from aligned protein sequences.
"""
import logging
from collections import Counter
import numpy as np
import pandas as pd
from Bio.Data.IUPACData import protein_letters

__all__ = ["AMINO_ACIDS", "AA_HASH", "AlignmentLengthError", "count_residues", "build_matrix"]

AMINO_ACIDS = np.array(list(protein_letters))
"""
Numpy array of Amino Acid single letter codes.
"""

AA_HASH = {aa: index for index, aa in enumerate(AMINO_ACIDS)}
"""
Dictionary mapping Amino Acids to their alphabetic index.
"""

class AlignmentLengthError(ValueError):
    """
    Raised when the sequences of an alignment are not all the same length.

    Attributes
    ----------
    record   : int
        1-based index of the first offending sequence.
    expected : int
        Alignment length, taken from the first sequence.
    observed : int
        Length of the offending sequence.
    """
    def __init__(self, record, expected, observed):
        self.record = record
        self.expected = expected
        self.observed = observed
        super().__init__(f"inconsistent alignment length at record {record}, "
                         f"expected {expected} got {observed}")

def count_residues(sequences):
    """
    Count the residues in each column of an alignment.

    Parameters
    ----------
    sequences : Sequence of str or BioPython sequences
        Aligned sequences, all of the same length.

    Returns
    -------
    counts : `numpy.array`
        N x 20 array of canonical Amino Acid counts, with one row per alignment column and columns
        in the order of `AMINO_ACIDS`.
    other  : list of `collections.Counter`
        Counts of non-canonical characters (gaps, ambiguity codes, lowercase residues etc.) at each
        column.

    Raises
    ------
    AlignmentLengthError
        A sequence differs in length from the first sequence.
    """
    sequences = [str(getattr(seq, "seq", seq)) for seq in sequences]
    if not sequences:
        return np.zeros((0, len(AMINO_ACIDS))), []

    length = len(sequences[0])
    counts = np.zeros((length, len(AMINO_ACIDS)))
    other = [Counter() for _ in range(length)]

    for record, seq in enumerate(sequences, start=1):
        if len(seq) != length:
            raise AlignmentLengthError(record, length, len(seq))

        for position, residue in enumerate(seq):
            index = AA_HASH.get(residue)
            if index is None:
                other[position][residue] += 1
            else:
                counts[position, index] += 1

    return counts, other

def build_matrix(sequences):
    """
    Calculate the position weight matrix of an alignment.

    Each value is the number of sequences with that Amino Acid at that position divided by the
    total number of sequences. No pseudocounts or background correction are applied. Non-canonical
    characters are counted towards the total but have no column of their own, so rows containing
    them sum to less than 1.

    Parameters
    ----------
    sequences : Sequence of str or BioPython sequences
        Aligned sequences, all of the same length.

    Returns
    -------
    Pandas DataFrame
        Frequency table with one row per alignment column, indexed by 1-based position, and a
        column for each Amino Acid in `AMINO_ACIDS`. Empty when no sequences are given.

    Raises
    ------
    AlignmentLengthError
        A sequence differs in length from the first sequence.
    """
    sequences = list(sequences)
    counts, other = count_residues(sequences)

    num_other = sum(sum(col.values()) for col in other)
    if num_other:
        symbols = "".join(sorted(set().union(*other)))
        logging.log(logging.WARN, "Ignoring %d non-canonical residues (%s)", num_other, symbols)

    freqs = counts / len(sequences) if sequences else counts
    df = pd.DataFrame(freqs, columns=AMINO_ACIDS,
                      index=pd.RangeIndex(1, counts.shape[0] + 1, name="position"))
    return df
