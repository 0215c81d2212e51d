"""
Python package for calculating position weight matrices (PWMs) from aligned protein sequences.
Sequences are read from Fasta files, tallied into per-position Amino Acid frequencies and written out as TSV tables.
"""
__docformat__ = "numpy"

from sequence_pwm import fasta
from sequence_pwm import pwm
from sequence_pwm import tsv

from sequence_pwm.fasta import *
from sequence_pwm.pwm import *
from sequence_pwm.tsv import *

__all__ = [i for j in (fasta.__all__, pwm.__all__, tsv.__all__) for i in j]
