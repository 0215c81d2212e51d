"""
Read aligned protein sequences from Fasta files.
"""
import gzip
import logging
from functools import partial

__all__ = ["read_fasta"]

def _finish_record(sequences, current_seq, header):
    if current_seq:
        sequences.append("".join(current_seq))
    elif header is not None:
        logging.log(logging.DEBUG, "Dropping record with no sequence: %s", header)

def read_fasta(path):
    """
    Read the sequences from a Fasta file.

    Lines starting with '>' begin a new record and are otherwise ignored. All other lines are
    concatenated onto the current record, so sequences can be split over several lines. Content
    before the first header is returned as a record of its own. Records with no sequence lines
    are dropped rather than returned as empty strings. Files ending in .gz are decompressed on the fly.

    Parameters
    ----------
    path : str or path-like
        Fasta file to read.

    Returns
    -------
    list of str
        Sequences in file order.

    Raises
    ------
    OSError
        The file cannot be opened or read.
    UnicodeDecodeError
        The file is not valid text.
    """
    _open = partial(gzip.open, mode="rt") if str(path).endswith(".gz") else open
    _open = partial(_open, encoding="utf-8")

    sequences = []
    current_seq = []
    header = None
    with _open(path) as fasta_file:
        for line in fasta_file:
            line = line.rstrip("\r\n")
            if line.startswith(">"):
                _finish_record(sequences, current_seq, header)
                current_seq = []
                header = line
            elif line:
                current_seq.append(line)

    _finish_record(sequences, current_seq, header)
    return sequences
